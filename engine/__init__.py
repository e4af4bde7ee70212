"""
Projection engine — financial primitives, yearly cash flows, monthly expansion.
"""

from .finance import irr, npv, pmt
from .cashflow import build_yearly_projection
from .monthly import build_monthly_projection
from .runner import run_projection

__all__ = [
    "irr",
    "npv",
    "pmt",
    "build_yearly_projection",
    "build_monthly_projection",
    "run_projection",
]
