"""
Yearly projection builder — deterministic year-by-year PPA cash flows.

Key rules:
  1. Year 0 is a synthetic row carrying only the upfront (equity) outlay
  2. Year 1 uses base generation / tariff / O&M; escalation starts in year 2
  3. Revenue uses unrounded generation; generation_kwh on the row is rounded
  4. Loan installment (<= 0) applies for years 1..min(contract_years, loan_tenure_years)
  5. net = revenue - omr + emi
  6. Payback = first row index (year 0 included) with cumulative net >= 0
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from core.config import ProjectionConfig
from core.schema import CumulativePoint, YearlySummary, YearRow
from core.utils import round_half_up, running_total

from .finance import irr, npv, pmt

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365


def loan_periods(contract_years: float, loan_tenure_years: float) -> float:
    """Number of annual installments: the loan cannot outlive the contract."""
    return max(0, min(contract_years, loan_tenure_years))


def annual_installment(loan_amount: float, loan_interest_pct: float, n_periods: float) -> float:
    """Constant annual installment (<= 0); a zero-period loan pays nothing."""
    if n_periods <= 0:
        return 0.0
    return pmt(loan_interest_pct / 100.0, n_periods, loan_amount)


def payback_year(cumulative: Sequence[float]) -> Optional[int]:
    """First index whose cumulative net is >= 0, or None if it never gets there."""
    for i, value in enumerate(cumulative):
        if value >= 0:
            return i
    return None


def solve_irr(cashflows: Sequence[float]) -> Optional[float]:
    """IRR of the net series, or None when the solver gives a non-finite rate."""
    rate = irr(cashflows)
    if not math.isfinite(rate):
        logger.info("IRR did not converge to a finite rate (got %s)", rate)
        return None
    return rate


def build_yearly_projection(config: ProjectionConfig) -> YearlySummary:
    """
    Build the year-indexed cash-flow rows and summary for one configuration.

    Nothing is validated: out-of-range percentages simply flow through the
    formulas. Non-positive contract_years yields only the year-0 row.
    """
    cfg = config

    year1_gen = cfg.capacity_kw * cfg.units_per_kw_day * DAYS_PER_YEAR

    capex_total = cfg.capacity_kw * cfg.capex_per_kw
    upfront = (cfg.upfront_percent / 100.0) * capex_total
    loan_amount = capex_total - upfront
    n_loan = loan_periods(cfg.contract_years, cfg.loan_tenure_years)
    emi_annual = annual_installment(loan_amount, cfg.loan_interest_pct, n_loan)

    logger.debug(
        "capex=%.2f upfront=%.2f loan=%.2f loan_periods=%s emi=%.2f",
        capex_total, upfront, loan_amount, n_loan, emi_annual,
    )

    rows: List[YearRow] = [
        YearRow(
            year=0,
            generation_kwh=0,
            tariff=0.0,
            revenue=0.0,
            omr=0.0,
            emi=0.0,
            net=-upfront,
        )
    ]

    gen = year1_gen
    tariff = cfg.ppa_tariff
    omr = cfg.capacity_kw * cfg.omr_per_kw_year

    for y in range(1, int(cfg.contract_years) + 1):
        if y > 1:
            gen = gen * (1 - cfg.degradation_pct / 100.0)
            tariff = tariff * (1 + cfg.tariff_escalation_pct / 100.0)
            omr = omr * (1 + cfg.omr_escalation_pct / 100.0)

        revenue = gen * tariff
        emi = emi_annual if y <= n_loan else 0.0
        net = revenue - omr + emi

        rows.append(
            YearRow(
                year=y,
                generation_kwh=round_half_up(gen),
                tariff=tariff,
                revenue=revenue,
                omr=omr,
                emi=emi,
                net=net,
            )
        )

    cashflows = [r.net for r in rows]
    cum = running_total(cashflows)

    summary = YearlySummary(
        capex_total=capex_total,
        upfront=upfront,
        loan_amount=loan_amount,
        year1_gen=round_half_up(year1_gen),
        year1_revenue=year1_gen * cfg.ppa_tariff,
        emi_annual=emi_annual,
        payback_year=payback_year(cum),
        npv=npv(cfg.discount_rate_pct / 100.0, cashflows),
        irr=solve_irr(cashflows),
        cumulative=tuple(CumulativePoint(year=r.year, value=v) for r, v in zip(rows, cum)),
        rows=tuple(rows),
    )
    return summary
