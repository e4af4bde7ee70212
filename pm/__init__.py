"""
Headline metrics of the PPA calculator (CapEx, equity, loan, EMI, NPV, IRR,
payback) and their display text.
"""

from .metrics import (
    KeyMetrics,
    compute_key_metrics,
    format_irr,
    format_money,
    format_payback,
)

__all__ = [
    "KeyMetrics",
    "compute_key_metrics",
    "format_irr",
    "format_money",
    "format_payback",
]
