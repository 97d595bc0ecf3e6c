from __future__ import annotations

from sqlite3 import Connection

from ..binding import Statement
from ..models import Project

INSERT_PROJECT = Statement("INSERT INTO projects(name, begin_date, end_date) VALUES(?,?,?)")
SELECT_PROJECT = Statement("SELECT id, name, begin_date, end_date FROM projects WHERE id=?")
SELECT_PROJECTS = Statement("SELECT id, name, begin_date, end_date FROM projects ORDER BY id")


def insert_project(conn: Connection, project: Project) -> int:
    cur = INSERT_PROJECT.execute(conn, project.as_params())
    return int(cur.lastrowid)


def get_project(conn: Connection, project_id: int):
    return SELECT_PROJECT.execute(conn, (project_id,)).fetchone()


def list_projects(conn: Connection) -> list[tuple]:
    return SELECT_PROJECTS.execute(conn).fetchall()
