"""
Result records produced by the projection engine, plus the display headers
used by the tables and exports.

Sign convention: outflows are negative. ``emi`` / ``emi_annual`` are always
<= 0 and enter ``net`` with a plus sign (net = revenue - omr + emi).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Tuple, Union

import pandas as pd

MONTH_NAMES: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
YEAR0_MONTH_PLACEHOLDER = "-"

CURRENCY_LABEL = "INR"

YEARLY_COLUMNS: Tuple[str, ...] = (
    "Year",
    "Generation (kWh)",
    f"Tariff ({CURRENCY_LABEL}/kWh)",
    f"Revenue ({CURRENCY_LABEL})",
    f"O&M ({CURRENCY_LABEL})",
    f"Loan EMI ({CURRENCY_LABEL})",
    f"Net ({CURRENCY_LABEL})",
    f"Cumulative ({CURRENCY_LABEL})",
)

MONTHLY_COLUMNS: Tuple[str, ...] = YEARLY_COLUMNS[:1] + ("Month",) + YEARLY_COLUMNS[1:]


@dataclass(frozen=True)
class YearRow:
    year: int
    generation_kwh: Union[int, float]  # whole kWh; inf/nan pass through
    tariff: float
    revenue: float
    omr: float
    emi: float  # loan installment, <= 0
    net: float


@dataclass(frozen=True)
class CumulativePoint:
    year: int
    value: float


@dataclass(frozen=True)
class YearlySummary:
    """
    Output of the yearly builder.

    rows[0] is the synthetic year-0 outlay row; rows[y] is contract year y.
    cumulative[i].value is the running total of rows[0..i].net.
    payback_year is None when cumulative net never turns non-negative.
    irr is None when the solver did not produce a finite rate.
    """
    capex_total: float
    upfront: float
    loan_amount: float
    year1_gen: Union[int, float]
    year1_revenue: float
    emi_annual: float  # <= 0
    payback_year: Optional[int]
    npv: float
    irr: Optional[float]
    cumulative: Tuple[CumulativePoint, ...]
    rows: Tuple[YearRow, ...]

    @property
    def cashflows(self) -> Tuple[float, ...]:
        return tuple(r.net for r in self.rows)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per year with a trailing ``cumulative`` column."""
        df = pd.DataFrame([asdict(r) for r in self.rows])
        df["cumulative"] = [c.value for c in self.cumulative]
        return df


@dataclass(frozen=True)
class MonthRow:
    key: str
    label: str
    month: str
    generation_kwh: Union[int, float]  # whole kWh; inf/nan pass through
    tariff: float
    revenue: float
    omr: float
    emi: float
    net: float


@dataclass(frozen=True)
class MonthlySummary:
    rows: Tuple[MonthRow, ...]
    cumulative: Tuple[float, ...]

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame([asdict(r) for r in self.rows])
        df["cumulative"] = list(self.cumulative)
        return df
