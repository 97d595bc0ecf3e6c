"""
Walkthrough service: the four steps of the tutorial against one handle.

Every store failure is caught here, logged and swallowed; the caller gets a
sentinel (None / False / []) and the flow carries on.
"""
from __future__ import annotations

import logging
import sqlite3
from sqlite3 import Connection
from typing import Any, Dict, List, Optional

from ..db import open_store
from ..logs import LogContext
from ..models import Project, Task, TaskUpdate
from ..repository import project_repo, task_repo
from ..schema import ensure_schema

logger = logging.getLogger(__name__)


def create_project(conn: Connection, project: Project) -> Optional[int]:
    log = LogContext("PROJECT_CREATE")
    log.set_payload(project.model_dump())
    try:
        project_id = project_repo.insert_project(conn, project)
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        logger.error("insert project %r failed: %s", project.name, e)
        log.write("ERROR", str(e))
        return None
    log.set_entity("PROJECT", project_id)
    log.write()
    return project_id


def create_task(conn: Connection, task: Task) -> Optional[int]:
    log = LogContext("TASK_CREATE")
    log.set_payload(task.model_dump())
    try:
        task_id = task_repo.insert_task(conn, task)
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        logger.error("insert task %r failed: %s", task.name, e)
        log.write("ERROR", str(e))
        return None
    log.set_entity("TASK", task_id)
    log.write()
    return task_id


def change_task(conn: Connection, task_id: int, upd: TaskUpdate) -> bool:
    """Apply priority/begin_date/end_date to task_id. False if nothing changed or the store failed."""
    log = LogContext("TASK_UPDATE")
    log.set_entity("TASK", task_id)
    log.set_payload(upd.model_dump())
    try:
        before = task_repo.get_task(conn, task_id)
        changed = task_repo.update_task(conn, task_id, upd)
        conn.commit()
    except sqlite3.Error as e:
        conn.rollback()
        logger.error("update task %s failed: %s", task_id, e)
        log.write("ERROR", str(e))
        return False
    if not changed:
        logger.warning("update task %s: no such task", task_id)
        log.write("NOT_FOUND")
        return False
    try:
        after = task_repo.get_task(conn, task_id)
    except sqlite3.Error as e:
        logger.warning("update task %s committed, re-read failed: %s", task_id, e)
        after = None
    log.set_before(list(before) if before else None)
    log.set_after(list(after) if after else None)
    log.write()
    return True


def list_tasks(conn: Connection) -> List[tuple]:
    try:
        return task_repo.select_all_tasks(conn)
    except sqlite3.Error as e:
        logger.error("select tasks failed: %s", e)
        return []


def list_tasks_by_priority(conn: Connection, priority: int) -> List[tuple]:
    try:
        return task_repo.select_task_by_priority(conn, priority)
    except sqlite3.Error as e:
        logger.error("select tasks by priority %s failed: %s", priority, e)
        return []


def run_walkthrough(db_file: str) -> Optional[Dict[str, Any]]:
    """
    End-to-end tutorial run: schema, one project, two tasks, one update, queries.
    Returns None when the database cannot be opened.
    """
    with open_store(db_file) as res:
        if not res.ok:
            return None
        conn = res.conn

        failed = ensure_schema(conn)
        if failed:
            logger.warning("schema incomplete, failed tables: %s", ", ".join(failed))

        project_id = create_project(conn, Project(name="Cool App", begin_date="2015-01-01", end_date="2015-01-30"))
        task_ids = []
        if project_id is not None:
            for t in (
                Task(name="Analyze the requirements of the app", priority=1, project_id=project_id,
                     status_id=1, begin_date="2015-01-01", end_date="2015-01-02"),
                Task(name="Confirm with user about the top requirements", priority=1, project_id=project_id,
                     status_id=1, begin_date="2015-01-03", end_date="2015-01-05"),
            ):
                task_id = create_task(conn, t)
                if task_id is not None:
                    task_ids.append(task_id)

        updated = False
        if task_ids:
            updated = change_task(conn, task_ids[-1], TaskUpdate(priority=2, begin_date="2015-01-04", end_date="2015-01-06"))

        return {
            "project_id": project_id,
            "task_ids": task_ids,
            "updated": updated,
            "tasks": list_tasks(conn),
            "priority_1": list_tasks_by_priority(conn, 1),
        }
