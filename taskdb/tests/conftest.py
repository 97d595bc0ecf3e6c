import os
import sys
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@pytest.fixture()
def tmp_db_path(tmp_path, monkeypatch):
    path = tmp_path / "walkthrough_test.db"
    # Point taskdb to this temp DB
    monkeypatch.setenv("TASKDB_PATH", str(path))
    return str(path)


@pytest.fixture()
def conn(tmp_db_path):
    from taskdb.db import open_store
    from taskdb.schema import ensure_schema
    with open_store(tmp_db_path) as res:
        assert res.ok, res.error
        assert ensure_schema(res.conn) == []
        yield res.conn


@pytest.fixture()
def project_id(conn):
    from taskdb.models import Project
    from taskdb.repository import project_repo
    pid = project_repo.insert_project(conn, Project(name="Cool App", begin_date="2015-01-01", end_date="2015-01-30"))
    conn.commit()
    return pid
