#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SQLite walkthrough (projects + tasks)

Run directly, no arguments:
  python walkthrough.py

Steps:
- open (or create) the database configured in config.yaml / TASKDB_PATH
- create the projects and tasks tables if missing
- insert one project and two tasks, update one task's priority and dates
- print all tasks, then the tasks with priority 1
"""

import logging
import sys

from taskdb.db import get_db_path
from taskdb.services.report_svc import print_tasks
from taskdb.services.walkthrough_svc import run_walkthrough


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    db_file = get_db_path()
    summary = run_walkthrough(db_file)
    if summary is None:
        print(f"Could not open database: {db_file}", file=sys.stderr)
        return 1

    print(f"Project created with id {summary['project_id']}, tasks {summary['task_ids']}")
    print_tasks("All tasks", summary["tasks"])
    print_tasks("Tasks with priority 1", summary["priority_1"])
    print(f"\nDatabase: {db_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
