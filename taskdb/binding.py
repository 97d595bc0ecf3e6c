"""Positional placeholder binding.

A ``Statement`` knows how many ``?`` markers its SQL carries, so a call with
the wrong number of values fails here instead of inside sqlite3.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from sqlite3 import Connection, Cursor
from typing import Sequence


class BindingError(ValueError):
    pass


def count_placeholders(sql: str) -> int:
    """Count ``?`` markers outside string literals, quoted identifiers and comments."""
    n = 0
    i = 0
    size = len(sql)
    while i < size:
        ch = sql[i]
        if ch in ("'", '"', "`"):
            end = sql.find(ch, i + 1)
            # a doubled quote inside a literal is an escaped quote
            while end != -1 and end + 1 < size and sql[end + 1] == ch:
                end = sql.find(ch, end + 2)
            if end == -1:
                break
            i = end + 1
            continue
        if ch == "[":
            end = sql.find("]", i + 1)
            if end == -1:
                break
            i = end + 1
            continue
        if sql.startswith("--", i):
            end = sql.find("\n", i)
            if end == -1:
                break
            i = end + 1
            continue
        if sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            if end == -1:
                break
            i = end + 2
            continue
        if ch == "?":
            n += 1
        i += 1
    return n


@dataclass(frozen=True)
class Statement:
    sql: str
    arity: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "arity", count_placeholders(self.sql))

    def bind(self, params: Sequence = ()) -> tuple:
        values = tuple(params)
        if len(values) != self.arity:
            raise BindingError(
                f"statement expects {self.arity} value(s), got {len(values)}: {self.sql.strip()}"
            )
        return values

    def execute(self, conn: Connection, params: Sequence = ()) -> Cursor:
        return conn.execute(self.sql, self.bind(params))
