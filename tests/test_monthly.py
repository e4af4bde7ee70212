"""Tests for the monthly expansion and the runner."""

import pytest

from core.config import ProjectionConfig
from core.schema import MONTH_NAMES
from engine.cashflow import build_yearly_projection
from engine.monthly import build_monthly_projection
from engine.runner import run_projection


@pytest.fixture
def yearly(default_config):
    return build_yearly_projection(default_config)


@pytest.fixture
def monthly(yearly):
    return build_monthly_projection(yearly)


class TestMonthlyRows:
    def test_row_count(self, monthly):
        assert len(monthly.rows) == 1 + 12 * 20
        assert len(monthly.cumulative) == len(monthly.rows)

    def test_year0_placeholder(self, yearly, monthly):
        r0 = monthly.rows[0]
        assert (r0.key, r0.label, r0.month) == ("Y0-M0", "Y0", "-")
        assert (r0.generation_kwh, r0.tariff, r0.revenue, r0.omr, r0.emi) == (0, 0, 0, 0, 0)
        assert r0.net == yearly.rows[0].net

    def test_keys_labels_months(self, monthly):
        keys = [r.key for r in monthly.rows]
        assert len(set(keys)) == len(keys)
        assert monthly.rows[1].key == "Y1-M1"
        assert monthly.rows[12].key == "Y1-M12"
        assert monthly.rows[13].key == "Y2-M1"
        assert [r.month for r in monthly.rows[1:13]] == list(MONTH_NAMES)
        assert {r.label for r in monthly.rows[1:13]} == {"Y1"}

    def test_equal_split(self, yearly, monthly):
        yr = yearly.rows[3]
        for r in monthly.rows[25:37]:
            assert r.label == "Y3"
            assert r.tariff == yr.tariff
            assert r.revenue == pytest.approx(yr.revenue / 12)
            assert r.omr == pytest.approx(yr.omr / 12)
            assert r.emi == pytest.approx(yr.emi / 12)
            assert r.net == pytest.approx(yr.net / 12)

    def test_generation_rounded_half_up(self, monthly):
        """76,650 kWh / 12 = 6,387.5 -> 6,388."""
        assert monthly.rows[1].generation_kwh == 6388

    def test_no_contract_years(self):
        y = build_yearly_projection(ProjectionConfig(contract_years=0))
        m = build_monthly_projection(y)
        assert len(m.rows) == 1
        assert m.cumulative == (y.rows[0].net,)


class TestMonthlyConsistency:
    def test_cumulative_running_total(self, monthly):
        total = 0.0
        for r, c in zip(monthly.rows, monthly.cumulative):
            total += r.net
            assert c == pytest.approx(total)

    def test_round_trip_to_yearly(self, yearly, monthly):
        by_year = {}
        for r in monthly.rows[1:]:
            agg = by_year.setdefault(r.label, {"net": 0.0, "revenue": 0.0, "omr": 0.0, "emi": 0.0, "gen": 0})
            agg["net"] += r.net
            agg["revenue"] += r.revenue
            agg["omr"] += r.omr
            agg["emi"] += r.emi
            agg["gen"] += r.generation_kwh

        for yr in yearly.rows[1:]:
            agg = by_year[f"Y{yr.year}"]
            assert agg["net"] == pytest.approx(yr.net)
            assert agg["revenue"] == pytest.approx(yr.revenue)
            assert agg["omr"] == pytest.approx(yr.omr)
            assert agg["emi"] == pytest.approx(yr.emi)
            assert abs(agg["gen"] - yr.generation_kwh) <= 6

    def test_final_cumulative_matches_yearly(self, yearly, monthly):
        assert monthly.cumulative[-1] == pytest.approx(yearly.cumulative[-1].value)

    def test_to_dataframe(self, monthly):
        df = monthly.to_dataframe()
        assert list(df.columns)[:3] == ["key", "label", "month"]
        assert df["cumulative"].tolist() == list(monthly.cumulative)


class TestRunner:
    def test_run_projection(self, default_config):
        yearly, monthly = run_projection(default_config)
        assert len(yearly.rows) == 21
        assert len(monthly.rows) == 241
        assert monthly.rows[0].net == yearly.rows[0].net

    def test_independent_configs(self):
        a, _ = run_projection(ProjectionConfig(capacity_kw=10))
        b, _ = run_projection(ProjectionConfig(capacity_kw=200))
        again, _ = run_projection(ProjectionConfig(capacity_kw=10))
        assert a == again
        assert a.capex_total != b.capex_total
