from __future__ import annotations

from sqlite3 import Connection

from ..binding import Statement
from ..models import Task, TaskUpdate

_COLS = "id, name, priority, project_id, status_id, begin_date, end_date"

INSERT_TASK = Statement(
    "INSERT INTO tasks(name, priority, project_id, status_id, begin_date, end_date) "
    "VALUES(?,?,?,?,?,?)"
)
# target id is always the last bound value
UPDATE_TASK = Statement("UPDATE tasks SET priority=?, begin_date=?, end_date=? WHERE id=?")
SELECT_ALL_TASKS = Statement(f"SELECT {_COLS} FROM tasks ORDER BY id")
SELECT_TASK = Statement(f"SELECT {_COLS} FROM tasks WHERE id=?")
SELECT_TASKS_BY_PRIORITY = Statement(f"SELECT {_COLS} FROM tasks WHERE priority=? ORDER BY id")
SELECT_TASKS_FOR_PROJECT = Statement(f"SELECT {_COLS} FROM tasks WHERE project_id=? ORDER BY id")


def insert_task(conn: Connection, task: Task) -> int:
    cur = INSERT_TASK.execute(conn, task.as_params())
    return int(cur.lastrowid)


def update_task(conn: Connection, task_id: int, upd: TaskUpdate) -> int:
    """Returns the number of rows changed (0 when task_id does not exist)."""
    cur = UPDATE_TASK.execute(conn, (*upd.as_params(), task_id))
    return cur.rowcount


def select_all_tasks(conn: Connection) -> list[tuple]:
    return SELECT_ALL_TASKS.execute(conn).fetchall()


def get_task(conn: Connection, task_id: int):
    return SELECT_TASK.execute(conn, (task_id,)).fetchone()


def select_task_by_priority(conn: Connection, priority: int) -> list[tuple]:
    return SELECT_TASKS_BY_PRIORITY.execute(conn, (priority,)).fetchall()


def select_tasks_for_project(conn: Connection, project_id: int) -> list[tuple]:
    return SELECT_TASKS_FOR_PROJECT.execute(conn, (project_id,)).fetchall()
