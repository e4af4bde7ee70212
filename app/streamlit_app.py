"""
Solar PPA Earning Calculator — Dashboard
========================================

Inputs on the left, results on the right:
  1. Key metrics:   CapEx, equity, loan, year-1 generation, EMI, NPV, IRR, payback
  2. Cumulative:    running net cash position by year
  3. Breakdown:     yearly or monthly table, exportable as CSV / PDF

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import ProjectionConfig
from core.schema import CURRENCY_LABEL, MONTHLY_COLUMNS, YEARLY_COLUMNS

from engine.runner import run_projection

from pm.metrics import compute_key_metrics, format_irr, format_money, format_payback

from report.tables import monthly_table, table_rows, yearly_table
from report.export import (
    MONTHLY_CSV_NAME,
    MONTHLY_TITLE,
    YEARLY_CSV_NAME,
    YEARLY_TITLE,
    export_filename,
    to_csv_bytes,
    to_pdf_bytes,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# ---------------------------------------------------------------------------
# Input form: (label, config field, step)
# ---------------------------------------------------------------------------
INPUT_FIELDS = [
    ("Plant Capacity (kW)", "capacity_kw", 1.0),
    ("Units/kW/day", "units_per_kw_day", 0.1),
    ("Degradation (%/yr)", "degradation_pct", 0.1),
    ("Contract Years", "contract_years", 1),
    (f"PPA Tariff ({CURRENCY_LABEL}/kWh)", "ppa_tariff", 0.1),
    ("Tariff Escalation (%/yr)", "tariff_escalation_pct", 0.1),
    (f"CapEx ({CURRENCY_LABEL}/kW)", "capex_per_kw", 1.0),
    ("Upfront / Equity (% of CapEx)", "upfront_percent", 1.0),
    ("Loan Interest (% p.a.)", "loan_interest_pct", 0.1),
    ("Loan Tenure (years)", "loan_tenure_years", 1.0),
    (f"O&M ({CURRENCY_LABEL}/kW/year)", "omr_per_kw_year", 1.0),
    ("O&M Escalation (%/yr)", "omr_escalation_pct", 0.1),
    ("Discount Rate (% for NPV)", "discount_rate_pct", 0.1),
]


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_cumulative(table: pd.DataFrame, *, x, y, title, height=280):
    if len(table) == 0:
        st.info("No data to plot.")
        return
    d = table[[x, y]].rename(columns={x: "period", y: "value"})
    d["position"] = d["value"].apply(lambda v: "positive" if v >= 0 else "negative")
    chart = (
        alt.Chart(d).mark_bar()
        .encode(
            x=alt.X("period:O", title=x, sort=None),
            y=alt.Y("value:Q", title=y, axis=alt.Axis(format=",.0f")),
            color=alt.Color(
                "position:N",
                scale=alt.Scale(domain=["positive", "negative"], range=["#2e9e5b", "#d9534f"]),
                legend=None,
            ),
            tooltip=[
                alt.Tooltip("period:O", title=x),
                alt.Tooltip("value:Q", title=y, format=",.0f"),
            ],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Solar PPA Earning Calculator", layout="wide")
st.title("Solar PPA Earning Calculator")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Inputs
# ═══════════════════════════════════════════════════════════════════════════
defaults = ProjectionConfig()
with st.sidebar:
    st.header("Inputs")
    form_values = {}
    for label, key, step in INPUT_FIELDS:
        default = getattr(defaults, key)
        if isinstance(step, int):
            form_values[key] = st.number_input(label, value=int(default), step=step)
        else:
            form_values[key] = st.number_input(label, value=float(default), step=step)

    st.caption(
        "💡 Tip: Discount Rate ~ your WACC/expected return (10–12% typical for rooftop PPA)."
    )

# ═══════════════════════════════════════════════════════════════════════════
# PROJECTION
# ═══════════════════════════════════════════════════════════════════════════
try:
    cfg = ProjectionConfig.from_mapping(form_values)
    yearly, monthly = run_projection(cfg)
except Exception as e:
    st.error(f"Projection failed: {e}")
    st.stop()

metrics = compute_key_metrics(yearly)

# ═══════════════════════════════════════════════════════════════════════════
# SUMMARY — KPI grid
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("Summary")
k1, k2, k3, k4 = st.columns(4)
k1.metric("CapEx Total", format_money(metrics.capex_total))
k2.metric("Upfront (Equity)", format_money(metrics.upfront))
k3.metric("Loan Amount", format_money(metrics.loan_amount))
k4.metric("Year-1 Generation", f"{metrics.year1_gen:,} kWh")

k5, k6, k7, k8 = st.columns(4)
k5.metric("EMI (annual)", format_money(metrics.emi_annual))
k6.metric("NPV", format_money(metrics.npv))
k7.metric("IRR", format_irr(metrics.irr))
k8.metric("Simple Payback", format_payback(metrics.payback_year))

# ═══════════════════════════════════════════════════════════════════════════
# BREAKDOWN — Yearly / Monthly
# ═══════════════════════════════════════════════════════════════════════════
st.divider()
view = st.radio("View", options=["Yearly", "Monthly"], horizontal=True)

if view == "Yearly":
    table = yearly_table(yearly)
    headers, csv_name, title = YEARLY_COLUMNS, YEARLY_CSV_NAME, YEARLY_TITLE
    _plot_cumulative(
        table, x="Year", y=f"Cumulative ({CURRENCY_LABEL})",
        title="Cumulative Net Cash Flow",
    )
else:
    table = monthly_table(monthly)
    headers, csv_name, title = MONTHLY_COLUMNS, MONTHLY_CSV_NAME, MONTHLY_TITLE

rows = table_rows(table)

d1, d2, _ = st.columns([1, 1, 4])
with d1:
    st.download_button(
        "Export CSV",
        data=to_csv_bytes(headers, rows),
        file_name=csv_name,
        mime="text/csv",
    )
with d2:
    st.download_button(
        "Export PDF",
        data=to_pdf_bytes(title, headers, rows),
        file_name=export_filename(title, "pdf"),
        mime="application/pdf",
    )

st.dataframe(table, use_container_width=True, hide_index=True)

st.caption(
    "Notes: Monthly view splits each year equally (for simplicity). "
    "Seasonal CUF, downtime and tax are not modelled."
)
