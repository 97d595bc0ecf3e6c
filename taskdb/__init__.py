"""SQLite project/task walkthrough."""

__version__ = "0.1.0"
