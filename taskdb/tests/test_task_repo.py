from __future__ import annotations

import sqlite3

import pytest

from taskdb.models import Task, TaskUpdate
from taskdb.repository import task_repo


def _task(project_id, name="Analyze the requirements of the app", priority=1, status_id=1):
    return Task(name=name, priority=priority, project_id=project_id, status_id=status_id,
                begin_date="2015-01-01", end_date="2015-01-02")


class TestTaskRepo:

    def test_insert_then_get_round_trip(self, conn, project_id):
        tid = task_repo.insert_task(conn, _task(project_id))
        conn.commit()
        row = task_repo.get_task(conn, tid)
        assert row == (tid, "Analyze the requirements of the app", 1, project_id, 1, "2015-01-01", "2015-01-02")
        assert isinstance(row, tuple)

    def test_update_touches_only_priority_and_dates(self, conn, project_id):
        tid = task_repo.insert_task(conn, _task(project_id, name="Confirm", status_id=7))
        changed = task_repo.update_task(conn, tid, TaskUpdate(priority=2, begin_date="2015-01-04", end_date="2015-01-06"))
        conn.commit()
        assert changed == 1
        assert task_repo.get_task(conn, tid) == (tid, "Confirm", 2, project_id, 7, "2015-01-04", "2015-01-06")
        assert [r[0] for r in task_repo.select_task_by_priority(conn, 2)] == [tid]
        assert task_repo.select_task_by_priority(conn, 1) == []

    def test_update_missing_task_changes_nothing(self, conn):
        assert task_repo.update_task(conn, 404, TaskUpdate(priority=2, begin_date="a", end_date="b")) == 0

    def test_priority_without_match_is_empty(self, conn, project_id):
        task_repo.insert_task(conn, _task(project_id, priority=1))
        assert task_repo.select_task_by_priority(conn, 42) == []

    def test_select_all_in_insert_order(self, conn, project_id):
        a = task_repo.insert_task(conn, _task(project_id, name="a"))
        b = task_repo.insert_task(conn, _task(project_id, name="b"))
        rows = task_repo.select_all_tasks(conn)
        assert [r[0] for r in rows] == [a, b]
        assert all(len(r) == 7 for r in rows)

    def test_tasks_for_project(self, conn, project_id):
        task_repo.insert_task(conn, _task(project_id))
        assert len(task_repo.select_tasks_for_project(conn, project_id)) == 1
        assert task_repo.select_tasks_for_project(conn, project_id + 1) == []

    def test_foreign_key_enforced_by_store(self, conn):
        with pytest.raises(sqlite3.IntegrityError):
            task_repo.insert_task(conn, _task(project_id=12345))

    def test_not_null_enforced_by_store(self, conn, project_id):
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO tasks(name, project_id, status_id, begin_date) VALUES('x', ?, 1, '2015-01-01')",
                         (project_id,))
