"""PDF export — a paginated A4 document mirroring the breakdown table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import fitz  # type: ignore[import-untyped]

from balirab.data.form_options import (
    DISCLAIMER_LINES,
    DISCLAIMER_TITLE,
    METHODOLOGY_REFERENCE,
)
from balirab.formatting import format_rupiah
from balirab.presentation.table import TABLE_HEADERS, RowKind, build_table_rows

if TYPE_CHECKING:
    from balirab.models.estimate import NormalizedEstimate
    from balirab.models.project import ProjectDetails
    from balirab.presentation.table import TableRow

_PAGE_WIDTH = 595  # A4 in points
_PAGE_HEIGHT = 842
_MARGIN = 40
_ROW_HEIGHT = 14
_FONT = "helv"
_FONT_BOLD = "hebo"
_FONT_SIZE = 8

_TEXT = (0.12, 0.16, 0.23)
_MUTED = (0.39, 0.45, 0.55)
_SHADE = (0.95, 0.96, 0.98)
_RULE = (0.80, 0.84, 0.88)

# (left x, right x, alignment) per table column
_COLUMNS: tuple[tuple[float, float, str], ...] = (
    (_MARGIN, 300, "left"),
    (300, 340, "center"),
    (340, 385, "right"),
    (385, 470, "right"),
    (470, _PAGE_WIDTH - _MARGIN, "right"),
)


class _Writer:
    """Flows text down the page and starts new pages as needed."""

    def __init__(self, doc: fitz.Document) -> None:
        self._doc = doc
        self.page: fitz.Page = doc.new_page(width=_PAGE_WIDTH, height=_PAGE_HEIGHT)
        self.y: float = _MARGIN

    @property
    def bottom(self) -> float:
        return _PAGE_HEIGHT - _MARGIN - _ROW_HEIGHT

    def new_page(self) -> None:
        self.page = self._doc.new_page(width=_PAGE_WIDTH, height=_PAGE_HEIGHT)
        self.y = _MARGIN

    def ensure_space(self, height: float) -> bool:
        """Start a new page if *height* does not fit; return True if it did."""
        if self.y + height > self.bottom:
            self.new_page()
            return True
        return False

    def text(
        self,
        x: float,
        value: str,
        *,
        size: float = _FONT_SIZE,
        bold: bool = False,
        color: tuple[float, float, float] = _TEXT,
    ) -> None:
        self.page.insert_text(
            (x, self.y + size),
            value,
            fontsize=size,
            fontname=_FONT_BOLD if bold else _FONT,
            color=color,
        )

    def paragraph(
        self,
        value: str,
        *,
        size: float = _FONT_SIZE,
        color: tuple[float, float, float] = _TEXT,
    ) -> None:
        width = _PAGE_WIDTH - 2 * _MARGIN
        for line in _wrap(value, width, size):
            self.ensure_space(size + 3)
            self.text(_MARGIN, line, size=size, color=color)
            self.y += size + 3


def _text_width(value: str, size: float, bold: bool = False) -> float:
    return fitz.get_text_length(value, fontname=_FONT_BOLD if bold else _FONT, fontsize=size)


def _wrap(value: str, width: float, size: float, bold: bool = False) -> list[str]:
    """Greedy word wrap to *width* points."""
    lines: list[str] = []
    current = ""
    for word in value.split():
        candidate = f"{current} {word}" if current else word
        if current and _text_width(candidate, size, bold) > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines or [""]


def _cell(
    writer: _Writer,
    column: int,
    value: str,
    *,
    bold: bool = False,
    color: tuple[float, float, float] = _TEXT,
) -> None:
    left, right, align = _COLUMNS[column]
    width = _text_width(value, _FONT_SIZE, bold)
    if align == "right":
        x = right - 4 - width
    elif align == "center":
        x = left + (right - left - width) / 2
    else:
        x = left + 4
    writer.text(x, value, bold=bold, color=color)


def _table_header(writer: _Writer) -> None:
    rect = fitz.Rect(_MARGIN, writer.y, _PAGE_WIDTH - _MARGIN, writer.y + _ROW_HEIGHT + 2)
    writer.page.draw_rect(rect, color=None, fill=_SHADE)
    writer.y += 3
    for column, title in enumerate(TABLE_HEADERS):
        _cell(writer, column, title.upper(), bold=True, color=_MUTED)
    writer.y += _ROW_HEIGHT


def _rule(writer: _Writer) -> None:
    writer.page.draw_line(
        (_MARGIN, writer.y),
        (_PAGE_WIDTH - _MARGIN, writer.y),
        color=_RULE,
        width=0.5,
    )


def _table_row(writer: _Writer, row: TableRow) -> None:
    if row.kind == RowKind.ITEM:
        left, right, _ = _COLUMNS[0]
        desc_lines = _wrap(row.label, right - left - 14, _FONT_SIZE)
        height = _ROW_HEIGHT + (len(desc_lines) - 1) * (_FONT_SIZE + 2)
    elif row.kind == RowKind.CATEGORY:
        width = _PAGE_WIDTH - 2 * _MARGIN - 8
        desc_lines = _wrap(row.label.upper(), width, _FONT_SIZE, bold=True)
        height = _ROW_HEIGHT + (len(desc_lines) - 1) * (_FONT_SIZE + 2)
    else:
        desc_lines = [row.label]
        height = _ROW_HEIGHT

    if writer.ensure_space(height):
        _table_header(writer)

    if row.kind == RowKind.CATEGORY:
        rect = fitz.Rect(_MARGIN, writer.y, _PAGE_WIDTH - _MARGIN, writer.y + height)
        writer.page.draw_rect(rect, color=None, fill=_SHADE)
        top = writer.y
        writer.y += 3
        for line in desc_lines:
            writer.text(_MARGIN + 4, line, bold=True)
            writer.y += _FONT_SIZE + 2
        writer.y = top + height
        return

    if row.kind == RowKind.ITEM:
        writer.y += 3
        line_y = writer.y
        for line in desc_lines:
            writer.text(_MARGIN + 10, line)
            writer.y += _FONT_SIZE + 2
        writer.y = line_y
        _cell(writer, 1, row.unit, color=_MUTED)
        _cell(writer, 2, row.volume)
        _cell(writer, 3, row.unit_price)
        _cell(writer, 4, row.amount)
        writer.y += height - 3
        return

    # Subtotal and footer rows: label right-aligned before the amount column
    bold = row.kind == RowKind.FOOTER
    writer.y += 3
    label_right = _COLUMNS[3][1]
    label_width = _text_width(row.label, _FONT_SIZE, bold)
    writer.text(label_right - 4 - label_width, row.label, bold=bold, color=_MUTED)
    _cell(writer, 4, row.amount, bold=True)
    writer.y += _ROW_HEIGHT - 3
    _rule(writer)


def _number_pages(doc: fitz.Document) -> None:
    total = doc.page_count
    for index, page in enumerate(doc):
        label = f"Halaman {index + 1} / {total}"
        width = _text_width(label, 7)
        page.insert_text(
            (_PAGE_WIDTH - _MARGIN - width, _PAGE_HEIGHT - _MARGIN / 2),
            label,
            fontsize=7,
            fontname=_FONT,
            color=_MUTED,
        )


def export_pdf(
    estimate: NormalizedEstimate,
    project: ProjectDetails | None = None,
) -> bytes:
    """Render *estimate* as a PDF document and return its bytes.

    Every category and item appears in the estimate's category order,
    followed by the physical cost, tax and grand total rows.
    """
    doc = fitz.open()
    try:
        writer = _Writer(doc)

        writer.text(_MARGIN, "Rencana Anggaran Biaya (RAB)", size=16, bold=True)
        writer.y += 22
        writer.text(_MARGIN, f"Mengacu pada {METHODOLOGY_REFERENCE} & Harga Pasar Bali", color=_MUTED)
        writer.y += 16

        if project is not None:
            details = [
                ("Nama Proyek", project.project_name),
                ("Lokasi", f"{project.location}, Bali"),
                ("Luas Tanah / Bangunan", f"{project.land_area:g} m2 / {project.building_area:g} m2"),
                ("Jumlah Lantai", str(project.floors)),
                ("Fungsi Bangunan", project.effective_building_type),
                ("Kelas Material", str(project.quality)),
            ]
            for label, value in details:
                writer.text(_MARGIN, label, color=_MUTED)
                writer.text(_MARGIN + 120, value)
                writer.y += _ROW_HEIGHT - 2
            writer.y += 6

        writer.text(_MARGIN, "Total Biaya", color=_MUTED)
        writer.text(_MARGIN + 120, format_rupiah(estimate.grand_total), bold=True)
        writer.y += _ROW_HEIGHT - 2
        writer.text(_MARGIN, "Estimasi Waktu", color=_MUTED)
        writer.text(_MARGIN + 120, estimate.estimated_duration)
        writer.y += _ROW_HEIGHT + 6

        writer.text(_MARGIN, "Ringkasan Teknis", bold=True)
        writer.y += _ROW_HEIGHT
        writer.paragraph(estimate.project_summary)
        writer.y += 10

        writer.ensure_space(_ROW_HEIGHT * 3)
        _table_header(writer)
        for row in build_table_rows(estimate):
            _table_row(writer, row)

        writer.y += 16
        writer.ensure_space(_ROW_HEIGHT * 2)
        writer.text(_MARGIN, DISCLAIMER_TITLE, bold=True, size=7)
        writer.y += 11
        for line in DISCLAIMER_LINES:
            writer.paragraph(line, size=6.5, color=_MUTED)

        _number_pages(doc)
        return doc.tobytes()
    finally:
        doc.close()
