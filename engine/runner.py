"""
Projection runner — config -> yearly projection -> monthly expansion.

Every call recomputes both views from scratch; nothing is cached or shared
between calls, so runs for different configs are independent.
"""

from __future__ import annotations

import logging
from typing import Tuple

from core.config import ProjectionConfig
from core.schema import MonthlySummary, YearlySummary

from .cashflow import build_yearly_projection
from .monthly import build_monthly_projection

logger = logging.getLogger(__name__)


def run_projection(config: ProjectionConfig) -> Tuple[YearlySummary, MonthlySummary]:
    """
    Run the full projection for one configuration.

    Returns
    -------
    (yearly, monthly)
    yearly: YearlySummary with rows for years 0..contract_years
    monthly: MonthlySummary with 1 + 12 * contract_years rows
    """
    yearly = build_yearly_projection(config)
    monthly = build_monthly_projection(yearly)

    logger.info(
        "Projection: %d years, npv=%.2f, irr=%s, payback=%s",
        len(yearly.rows) - 1,
        yearly.npv,
        "n/a" if yearly.irr is None else f"{yearly.irr:.4%}",
        yearly.payback_year,
    )
    return yearly, monthly
