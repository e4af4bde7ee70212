"""
Display tables for the yearly and monthly projections.

Money columns are rounded to whole currency units, tariff is shown with two
decimals ("-" on the year-0 row). The resulting frames are what the
dashboard renders and what the CSV/PDF exports serialize.
"""

from __future__ import annotations

from typing import Any, List

import pandas as pd

from core.schema import MONTHLY_COLUMNS, YEARLY_COLUMNS, MonthlySummary, YearlySummary
from core.utils import require_columns, round_half_up

_VALUE_COLS = ["generation_kwh", "tariff", "revenue", "omr", "emi", "net", "cumulative"]


def _fmt_tariff(value: float) -> str:
    return f"{value:.2f}" if value else "-"


def _display_values(df: pd.DataFrame) -> pd.DataFrame:
    require_columns(df, _VALUE_COLS)
    out = pd.DataFrame(index=df.index)
    out["generation_kwh"] = df["generation_kwh"].apply(round_half_up)
    out["tariff"] = df["tariff"].apply(_fmt_tariff)
    for c in ["revenue", "omr", "emi", "net", "cumulative"]:
        out[c] = df[c].apply(round_half_up)
    return out


def yearly_table(yearly: YearlySummary) -> pd.DataFrame:
    df = yearly.to_dataframe()
    values = _display_values(df)
    values.insert(0, "year", df["year"].astype(int))
    values.columns = list(YEARLY_COLUMNS)
    return values.reset_index(drop=True)


def monthly_table(monthly: MonthlySummary) -> pd.DataFrame:
    df = monthly.to_dataframe()
    require_columns(df, ["label", "month"])
    values = _display_values(df)
    values.insert(0, "month", df["month"])
    values.insert(0, "label", df["label"])
    values.columns = list(MONTHLY_COLUMNS)
    return values.reset_index(drop=True)


def table_rows(table: pd.DataFrame) -> List[List[Any]]:
    """Flat, ordered field sequences (one list per row) matching table.columns."""
    return [list(r) for r in table.itertuples(index=False, name=None)]
