from __future__ import annotations

import pytest

from taskdb.binding import BindingError, Statement, count_placeholders


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT 1", 0),
        ("UPDATE tasks SET priority=?, begin_date=?, end_date=? WHERE id=?", 4),
        ("SELECT * FROM t WHERE a='?' AND b=?", 1),
        ("SELECT * FROM t WHERE a='it''s ?' AND b=?", 1),
        ('SELECT "col?" FROM t WHERE x=?', 1),
        ("SELECT x -- why?\nFROM t WHERE y=?", 1),
        ("SELECT /* ? */ x FROM t WHERE y=?", 1),
    ],
)
def test_count_placeholders(sql, expected):
    assert count_placeholders(sql) == expected


def test_arity_mismatch_rejected_before_store():
    stmt = Statement("INSERT INTO projects(name, begin_date, end_date) VALUES(?,?,?)")
    assert stmt.arity == 3
    with pytest.raises(BindingError, match="expects 3"):
        stmt.bind(("only name",))
    with pytest.raises(BindingError):
        stmt.bind(("a", "b", "c", "d"))
    assert stmt.bind(["a", None, None]) == ("a", None, None)


def test_execute_never_reaches_connection_on_mismatch():
    class Boom:
        def execute(self, *a):
            raise AssertionError("store should not be called")

    with pytest.raises(BindingError):
        Statement("SELECT ?").execute(Boom(), ())
