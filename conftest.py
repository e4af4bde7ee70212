"""Shared pytest fixtures."""

import pytest

from core.config import ProjectionConfig


@pytest.fixture
def default_config():
    """The calculator's starting inputs: 50 kW, 20 years, 7-year loan."""
    return ProjectionConfig()


@pytest.fixture
def scenario_config():
    """Concrete 50 kW scenario with escalation and degradation switched off."""
    return ProjectionConfig(
        capacity_kw=50,
        units_per_kw_day=4.2,
        degradation_pct=0.0,
        contract_years=20,
        ppa_tariff=5.0,
        tariff_escalation_pct=0.0,
        capex_per_kw=42000,
        upfront_percent=20,
        loan_interest_pct=11.5,
        loan_tenure_years=7,
        omr_per_kw_year=800,
        omr_escalation_pct=0.0,
        discount_rate_pct=12.0,
    )
