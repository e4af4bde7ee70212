"""
Reporting — display tables and CSV/PDF export of the projection.
"""

from .tables import monthly_table, table_rows, yearly_table
from .export import export_filename, to_csv_bytes, to_pdf_bytes

__all__ = [
    "monthly_table",
    "table_rows",
    "yearly_table",
    "export_filename",
    "to_csv_bytes",
    "to_pdf_bytes",
]
