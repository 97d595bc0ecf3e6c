from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..models import TASK_COLUMNS


def tasks_frame(rows: Iterable[tuple]) -> pd.DataFrame:
    return pd.DataFrame.from_records(list(rows), columns=list(TASK_COLUMNS))


def print_tasks(title: str, rows: Iterable[tuple]) -> pd.DataFrame:
    df = tasks_frame(rows)
    pd.set_option("display.max_rows", 200)
    pd.set_option("display.width", 160)

    print(f"\n=== {title} ===")
    if not df.empty:
        print(df.to_string(index=False))
    else:
        print("(empty)")
    return df
