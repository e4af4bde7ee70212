"""
Core package — schema definitions, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    MONTH_NAMES,
    MONTHLY_COLUMNS,
    YEARLY_COLUMNS,
    CumulativePoint,
    MonthlySummary,
    MonthRow,
    YearlySummary,
    YearRow,
)
from .config import ProjectionConfig
from .utils import require_columns, round_half_up, running_total

__all__ = [
    "MONTH_NAMES",
    "MONTHLY_COLUMNS",
    "YEARLY_COLUMNS",
    "CumulativePoint",
    "MonthlySummary",
    "MonthRow",
    "YearlySummary",
    "YearRow",
    "ProjectionConfig",
    "require_columns",
    "round_half_up",
    "running_total",
]
