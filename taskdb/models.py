from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

PROJECT_COLUMNS = ("id", "name", "begin_date", "end_date")
TASK_COLUMNS = ("id", "name", "priority", "project_id", "status_id", "begin_date", "end_date")


class Project(BaseModel):
    name: str
    begin_date: Optional[str] = None  # YYYY-MM-DD
    end_date: Optional[str] = None

    def as_params(self) -> tuple:
        return (self.name, self.begin_date, self.end_date)


class Task(BaseModel):
    name: str
    priority: Optional[int] = None
    project_id: int
    status_id: int  # opaque, no defined domain
    begin_date: str
    end_date: str

    def as_params(self) -> tuple:
        return (self.name, self.priority, self.project_id, self.status_id, self.begin_date, self.end_date)


class TaskUpdate(BaseModel):
    priority: Optional[int] = None
    begin_date: str
    end_date: str

    def as_params(self) -> tuple:
        return (self.priority, self.begin_date, self.end_date)
