"""
Monthly expansion of a yearly projection.

Each contract year is split into 12 equal shares (no seasonal profile).
Tariff is carried unchanged within the year; generation per month is rounded
to whole kWh. The year-0 outlay becomes a single placeholder row.
"""

from __future__ import annotations

from typing import List

from core.schema import (
    MONTH_NAMES,
    YEAR0_MONTH_PLACEHOLDER,
    MonthlySummary,
    MonthRow,
    YearlySummary,
)
from core.utils import round_half_up, running_total


def build_monthly_projection(yearly: YearlySummary) -> MonthlySummary:
    rows: List[MonthRow] = [
        MonthRow(
            key="Y0-M0",
            label="Y0",
            month=YEAR0_MONTH_PLACEHOLDER,
            generation_kwh=0,
            tariff=0.0,
            revenue=0.0,
            omr=0.0,
            emi=0.0,
            net=yearly.rows[0].net,
        )
    ]

    for yr in yearly.rows[1:]:
        y = yr.year
        generation = round_half_up(yr.generation_kwh / 12)
        for m, month_name in enumerate(MONTH_NAMES, start=1):
            rows.append(
                MonthRow(
                    key=f"Y{y}-M{m}",
                    label=f"Y{y}",
                    month=month_name,
                    generation_kwh=generation,
                    tariff=yr.tariff,
                    revenue=yr.revenue / 12,
                    omr=yr.omr / 12,
                    emi=yr.emi / 12,
                    net=yr.net / 12,
                )
            )

    cumulative = running_total(r.net for r in rows)
    return MonthlySummary(rows=tuple(rows), cumulative=tuple(cumulative))
