from __future__ import annotations

# taskdb/db.py
import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional
import os
import yaml

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

# DB path resolution order:
# 1) env TASKDB_PATH (highest)
# 2) config.yaml test_db_path (when running under tests)
# 3) config.yaml db_path
# 4) fallback: pythonsqlite.db in the project root
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_ROOT_DB = os.path.join(_PROJECT_ROOT, "pythonsqlite.db")


class StoreError(Exception):
    """A store operation failed (connect, malformed statement, constraint)."""


def _read_config_yaml() -> dict:
    cfg_path = os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable %s: %s", cfg_path, e)
        return {}
    out = {}
    for k in ("db_path", "test_db_path"):
        v = cfg.get(k)
        if isinstance(v, str) and v.strip():
            out[k] = v.strip()
    return out


def get_db_path() -> str:
    env_path = os.environ.get("TASKDB_PATH")
    cfg = _read_config_yaml()
    cfg_db = cfg.get("db_path")
    cfg_test = cfg.get("test_db_path")
    is_test = (os.environ.get("APP_ENV") == "test") or (os.environ.get("PYTEST_CURRENT_TEST") is not None)

    if env_path:
        path = env_path
    elif is_test and cfg_test:
        path = cfg_test
    elif cfg_db:
        path = cfg_db
    else:
        path = _ROOT_DB

    if path == MEMORY:
        return path

    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)
    return path


def _connect(path: str) -> sqlite3.Connection:
    conn = sqlite3.connect(path)
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
    except sqlite3.Error:
        conn.close()
        raise
    return conn


@dataclass(frozen=True)
class StoreResult:
    """Outcome of opening a handle: either a live connection or a diagnostic."""
    conn: Optional[sqlite3.Connection] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.conn is not None

    def unwrap(self) -> sqlite3.Connection:
        if self.conn is None:
            raise StoreError(self.error or "no connection")
        return self.conn


@contextmanager
def open_store(db_file: str) -> Iterator[StoreResult]:
    """
    Open a handle to db_file (or MEMORY), creating the file if absent.

    Never raises on connect failure: the failure is logged and a StoreResult
    carrying the diagnostic is yielded instead. The handle is closed exactly
    once when the block exits, however it exits.
    """
    try:
        conn = _connect(db_file)
    except sqlite3.Error as e:
        logger.error("cannot open database %r: %s", db_file, e)
        yield StoreResult(error=str(e))
        return
    logger.debug("opened database %r (sqlite %s)", db_file, sqlite3.sqlite_version)
    try:
        yield StoreResult(conn=conn)
    finally:
        conn.close()


@contextmanager
def get_conn(db_path: str | None = None) -> Iterator[sqlite3.Connection]:
    """
    Library-facing connection for callers that want errors to propagate
    (the walkthrough itself goes through open_store instead).
    Uses db_path when given, otherwise get_db_path().
    """
    path = db_path or get_db_path()
    conn = _connect(path)
    try:
        yield conn
    finally:
        conn.close()
