"""
Projection configuration.
A flat, immutable record of plant, tariff, financing and O&M inputs.
Percentages are given in percent (e.g. 11.5 for 11.5%), not as decimals.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class ProjectionConfig:
    # plant
    capacity_kw: float = 50.0
    units_per_kw_day: float = 4.2
    degradation_pct: float = 0.6

    # contract / tariff
    contract_years: int = 20
    ppa_tariff: float = 5.0
    tariff_escalation_pct: float = 2.0

    # capex and financing
    capex_per_kw: float = 42000.0
    upfront_percent: float = 20.0  # equity share of capex, rest is financed
    loan_interest_pct: float = 11.5
    loan_tenure_years: float = 7.0  # fractional tenures amortize over fractional periods

    # operations
    omr_per_kw_year: float = 800.0
    omr_escalation_pct: float = 3.0

    # valuation
    discount_rate_pct: float = 12.0  # ~ WACC / expected return

    def replace(self, **changes: Any) -> "ProjectionConfig":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ProjectionConfig":
        """
        Build a config from a flat keyed mapping (form values, JSON, etc.).
        Missing keys keep their defaults. Values are coerced with float();
        int fields (contract_years) must hold a whole number.
        """
        known = {f.name: f for f in fields(cls)}
        unknown = [k for k in values if k not in known]
        if unknown:
            raise ValueError(f"Unknown config fields: {unknown}")

        kwargs = {}
        for name, value in values.items():
            number = float(value)
            if known[name].type in ("int", int):
                if not number.is_integer():
                    raise ValueError(f"{name} must be a whole number, got {value!r}")
                number = int(number)
            kwargs[name] = number
        return cls(**kwargs)
