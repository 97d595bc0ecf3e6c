from __future__ import annotations

import logging
import sqlite3
from sqlite3 import Connection

logger = logging.getLogger(__name__)

SQL_CREATE_PROJECTS_TABLE = """
CREATE TABLE IF NOT EXISTS projects (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    begin_date TEXT,
    end_date TEXT
);
"""

SQL_CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    priority INTEGER,
    project_id INTEGER NOT NULL,
    status_id INTEGER NOT NULL,
    begin_date TEXT NOT NULL,
    end_date TEXT NOT NULL,
    FOREIGN KEY(project_id) REFERENCES projects(id)
);
"""

TABLES = {
    "projects": SQL_CREATE_PROJECTS_TABLE,
    "tasks": SQL_CREATE_TASKS_TABLE,
}


def create_table(conn: Connection, create_table_sql: str) -> bool:
    try:
        conn.execute(create_table_sql)
    except sqlite3.Error as e:
        logger.error("create table failed: %s", e)
        return False
    return True


def ensure_schema(conn: Connection) -> list[str]:
    """Create every table that is missing. Returns the names that failed."""
    failed = []
    for name, ddl in TABLES.items():
        if not create_table(conn, ddl):
            failed.append(name)
    conn.commit()
    return failed


def list_tables(conn: Connection) -> list[str]:
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
    ).fetchall()
    return [r[0] for r in rows]
