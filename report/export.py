"""
CSV and PDF export of a header list plus flat rows.

CSV:  comma-separated, "\\n" line endings, a field is double-quoted only when
      it contains a comma, a quote or a newline; embedded quotes are doubled.
PDF:  landscape A4, title on top, header/body table that repeats its header
      row on every page.
"""

from __future__ import annotations

import io
import re
from typing import Any, List, Sequence
from xml.sax.saxutils import escape

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

HEADER_FILL = colors.Color(20 / 255, 30 / 255, 60 / 255)

YEARLY_CSV_NAME = "ppa_yearly.csv"
MONTHLY_CSV_NAME = "ppa_monthly.csv"
YEARLY_TITLE = "PPA Yearly Breakdown"
MONTHLY_TITLE = "PPA Monthly Breakdown"


def _check_widths(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    bad = [i for i, r in enumerate(rows) if len(r) != len(headers)]
    if bad:
        raise ValueError(
            f"{len(bad)} rows do not match the {len(headers)} headers (first bad row: {bad[0]})."
        )


def export_filename(title: str, ext: str) -> str:
    """'PPA Yearly Breakdown', 'pdf' -> 'PPA_Yearly_Breakdown.pdf'"""
    stem = re.sub(r"\s+", "_", title)
    return f"{stem}.{ext}"


def to_csv_bytes(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> bytes:
    _check_widths(headers, rows)
    df = pd.DataFrame(list(rows), columns=list(headers), dtype=object)
    text = df.to_csv(index=False, lineterminator="\n", na_rep="")
    return text.encode("utf-8")


def to_pdf_bytes(title: str, headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> bytes:
    _check_widths(headers, rows)

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=40,
        rightMargin=40,
        topMargin=30,
        bottomMargin=30,
        title=title,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle("ExportTitle", parent=styles["Normal"], fontSize=14, leading=18)

    data: List[List[str]] = [[str(h) for h in headers]]
    data += [["" if v is None else str(v) for v in r] for r in rows]

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 6),
    ]))

    story = [Paragraph(escape(title), title_style), Spacer(1, 12), table]
    doc.build(story)
    return buffer.getvalue()
