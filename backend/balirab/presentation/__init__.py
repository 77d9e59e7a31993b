"""Consumers of a normalized estimate: table rows, chart data and PDF export."""

from balirab.presentation.chart import (
    ChartSegment,
    build_chart_segments,
    render_pie_chart_png,
)
from balirab.presentation.pdf_export import export_pdf
from balirab.presentation.table import RowKind, TableRow, build_table_rows

__all__ = [
    "ChartSegment",
    "RowKind",
    "TableRow",
    "build_chart_segments",
    "build_table_rows",
    "export_pdf",
    "render_pie_chart_png",
]
