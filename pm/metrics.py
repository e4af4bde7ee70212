"""
Key investment metrics — the headline numbers of a yearly projection,
formatted for display.

Sentinels from the engine are turned into readable text here:
  irr None / non-finite  -> "n/a"
  payback_year None      -> "beyond term"
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

import pandas as pd

from core.schema import CURRENCY_LABEL, YearlySummary
from core.utils import round_half_up


def format_irr(value: Optional[float]) -> str:
    if value is None or not math.isfinite(value):
        return "n/a"
    return f"{value * 100:.2f}%"


def format_payback(year: Optional[int]) -> str:
    if year is None:
        return "beyond term"
    return f"{year} yrs"


def format_money(value: float) -> str:
    if not math.isfinite(value):
        return "n/a"
    return f"{CURRENCY_LABEL} {round_half_up(value):,}"


@dataclass(frozen=True)
class KeyMetrics:
    """Headline metrics shown above the projection tables."""
    capex_total: float
    upfront: float
    loan_amount: float
    year1_gen: Union[int, float]
    year1_revenue: float
    emi_annual: float  # magnitude of the annual installment, >= 0
    npv: float
    irr: Optional[float]
    payback_year: Optional[int]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "CapEx Total", "Value": format_money(self.capex_total), "Unit": ""},
            {"Metric": "Upfront (Equity)", "Value": format_money(self.upfront), "Unit": ""},
            {"Metric": "Loan Amount", "Value": format_money(self.loan_amount), "Unit": ""},
            {"Metric": "Year-1 Generation", "Value": f"{self.year1_gen:,}", "Unit": "kWh"},
            {"Metric": "Year-1 Revenue", "Value": format_money(self.year1_revenue), "Unit": ""},
            {"Metric": "EMI (annual)", "Value": format_money(self.emi_annual), "Unit": ""},
            {"Metric": "NPV", "Value": format_money(self.npv), "Unit": ""},
            {"Metric": "IRR", "Value": format_irr(self.irr), "Unit": ""},
            {"Metric": "Simple Payback", "Value": format_payback(self.payback_year), "Unit": ""},
        ]
        return pd.DataFrame(rows)


def compute_key_metrics(yearly: YearlySummary) -> KeyMetrics:
    return KeyMetrics(
        capex_total=yearly.capex_total,
        upfront=yearly.upfront,
        loan_amount=yearly.loan_amount,
        year1_gen=yearly.year1_gen,
        year1_revenue=yearly.year1_revenue,
        emi_annual=-yearly.emi_annual,
        npv=yearly.npv,
        irr=yearly.irr,
        payback_year=yearly.payback_year,
    )
