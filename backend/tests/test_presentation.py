"""Tests for the table, chart and PDF consumers of a normalized estimate."""

from __future__ import annotations

import io

import fitz  # type: ignore[import-untyped]
from PIL import Image

from balirab.data.sample import SAMPLE_PROJECT, SAMPLE_RESULT
from balirab.models.estimate import NormalizedEstimate
from balirab.models.rab import RABCategory, RABItem, RABResult
from balirab.normalizer import normalize_result
from balirab.presentation.chart import PALETTE, build_chart_segments, render_pie_chart_png
from balirab.presentation.pdf_export import export_pdf
from balirab.presentation.table import RowKind, build_table_rows

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sample_estimate() -> NormalizedEstimate:
    return normalize_result(SAMPLE_RESULT)


def _large_estimate(categories: int = 12, items_per_category: int = 10) -> NormalizedEstimate:
    cats = []
    numerals = ["I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII"]
    for c in range(categories):
        items = [
            RABItem(
                description=f"Pekerjaan item {c * items_per_category + i}",
                unit="m2",
                volume=10,
                unit_price=100_000,
                total_price=1_000_000,
            )
            for i in range(items_per_category)
        ]
        cats.append(
            RABCategory(
                category_name=f"{numerals[c]}. Kategori {c}",
                items=items,
                subtotal=items_per_category * 1_000_000,
            )
        )
    physical = categories * items_per_category * 1_000_000
    result = RABResult(
        project_summary="Proyek besar untuk uji pagination.",
        categories=cats,
        grand_total=physical * 1.11,
        estimated_duration="12 Bulan",
    )
    return normalize_result(result)


def _pdf_text(pdf: bytes) -> tuple[int, str]:
    doc = fitz.open(stream=pdf, filetype="pdf")
    try:
        return doc.page_count, "\n".join(page.get_text() for page in doc)
    finally:
        doc.close()


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class TestTableRows:
    def test_row_layout(self) -> None:
        rows = build_table_rows(_sample_estimate())
        # 3 categories x (header + 2 items + subtotal) + 3 footer rows
        assert len(rows) == 15
        assert [r.kind for r in rows[:4]] == [
            RowKind.CATEGORY,
            RowKind.ITEM,
            RowKind.ITEM,
            RowKind.SUBTOTAL,
        ]
        assert all(r.kind == RowKind.FOOTER for r in rows[-3:])

    def test_categories_in_sorted_order(self) -> None:
        rows = build_table_rows(_sample_estimate())
        names = [r.label for r in rows if r.kind == RowKind.CATEGORY]
        assert names == [
            "I. Pekerjaan Persiapan",
            "II. Pekerjaan Tanah",
            "III. Pekerjaan Pondasi",
        ]

    def test_item_row_formatting(self) -> None:
        item = build_table_rows(_sample_estimate())[1]
        assert item.label == "Pembersihan lahan"
        assert item.unit == "m2"
        assert item.volume == "100"
        assert item.unit_price == "Rp 15.000"
        assert item.amount == "Rp 1.500.000"

    def test_subtotal_row(self) -> None:
        subtotal = build_table_rows(_sample_estimate())[3]
        assert subtotal.label == "Subtotal"
        assert subtotal.amount == "Rp 4.500.000"

    def test_footer_rows(self) -> None:
        footer = build_table_rows(_sample_estimate())[-3:]
        assert [(r.label, r.amount) for r in footer] == [
            ("Biaya Fisik", "Rp 46.800.000"),
            ("PPN 11%", "Rp 5.148.000"),
            ("GRAND TOTAL", "Rp 51.948.000"),
        ]

    def test_to_dict(self) -> None:
        row = build_table_rows(_sample_estimate())[0].to_dict()
        assert row["kind"] == "category"
        assert row["label"] == "I. Pekerjaan Persiapan"


# ---------------------------------------------------------------------------
# Chart
# ---------------------------------------------------------------------------


class TestChartSegments:
    def test_one_segment_per_category(self) -> None:
        segments = build_chart_segments(_sample_estimate())
        assert [s.name for s in segments] == [
            "I. Pekerjaan Persiapan",
            "II. Pekerjaan Tanah",
            "III. Pekerjaan Pondasi",
        ]
        assert [s.value for s in segments] == [4_500_000, 3_600_000, 38_700_000]

    def test_percentages(self) -> None:
        segments = build_chart_segments(_sample_estimate())
        assert [s.percent for s in segments] == [9.6, 7.7, 82.7]

    def test_colors_cycle_palette(self) -> None:
        segments = build_chart_segments(_large_estimate(categories=10, items_per_category=1))
        assert segments[0].color == PALETTE[0]
        assert segments[8].color == PALETTE[0]
        assert segments[9].color == PALETTE[1]

    def test_zero_total_gives_zero_percent(self) -> None:
        result = RABResult(
            project_summary="",
            categories=[RABCategory(category_name="I. A", items=[], subtotal=0)],
            grand_total=0,
            estimated_duration="",
        )
        segments = build_chart_segments(normalize_result(result))
        assert segments[0].percent == 0.0

    def test_segment_to_dict(self) -> None:
        data = build_chart_segments(_sample_estimate())[0].to_dict()
        assert data["value_formatted"] == "Rp 4.500.000"


class TestRenderPieChart:
    def test_png_output(self) -> None:
        segments = build_chart_segments(_sample_estimate())
        png = render_pie_chart_png(segments, size=300)
        assert png.startswith(b"\x89PNG")
        img = Image.open(io.BytesIO(png))
        assert img.width == 300
        assert img.height > 300

    def test_empty_segments(self) -> None:
        png = render_pie_chart_png([])
        assert png.startswith(b"\x89PNG")


# ---------------------------------------------------------------------------
# PDF export
# ---------------------------------------------------------------------------


class TestExportPdf:
    def test_is_pdf(self) -> None:
        pdf = export_pdf(_sample_estimate(), SAMPLE_PROJECT)
        assert pdf.startswith(b"%PDF")

    def test_contains_every_category_item_and_total(self) -> None:
        _, text = _pdf_text(export_pdf(_sample_estimate(), SAMPLE_PROJECT))
        for category in SAMPLE_RESULT.categories:
            assert category.category_name.upper() in text
            for item in category.items:
                assert item.description in text
        assert "Biaya Fisik" in text
        assert "PPN 11%" in text
        assert "GRAND TOTAL" in text
        assert "Rp 51.948.000" in text
        assert "Rp 46.800.000" in text
        assert "Rp 5.148.000" in text

    def test_categories_in_sorted_order(self) -> None:
        _, text = _pdf_text(export_pdf(_sample_estimate()))
        first = text.index("I. PEKERJAAN PERSIAPAN")
        second = text.index("II. PEKERJAAN TANAH")
        third = text.index("III. PEKERJAAN PONDASI")
        assert first < second < third

    def test_project_header(self) -> None:
        _, text = _pdf_text(export_pdf(_sample_estimate(), SAMPLE_PROJECT))
        assert "Villa Test" in text
        assert "Denpasar, Bali" in text
        assert "Villa Private/Komersial" in text

    def test_paginates_long_estimates(self) -> None:
        pages, text = _pdf_text(export_pdf(_large_estimate()))
        assert pages > 1
        assert f"Halaman 1 / {pages}" in text
        assert "Pekerjaan item 0" in text
        assert "Pekerjaan item 119" in text
        assert "GRAND TOTAL" in text

    def test_long_category_name_wraps_within_margins(self) -> None:
        name = "I. Pekerjaan " + " ".join(f"Struktur{i}" for i in range(30))
        result = RABResult(
            project_summary="Ringkasan",
            estimated_duration="3 Bulan",
            grand_total=1_110_000,
            categories=[
                RABCategory(
                    category_name=name,
                    subtotal=1_000_000,
                    items=[
                        RABItem(
                            description="Galian",
                            unit="m3",
                            volume=10,
                            unit_price=100_000,
                            total_price=1_000_000,
                        )
                    ],
                )
            ],
        )
        pdf = export_pdf(normalize_result(result))

        doc = fitz.open(stream=pdf, filetype="pdf")
        try:
            page = doc[0]
            words = [w for w in page.get_text("words") if w[4].startswith("STRUKTUR")]
            right_edge = page.rect.width - 40
        finally:
            doc.close()

        assert len(words) == 30
        assert all(w[2] <= right_edge + 1 for w in words)
        assert len({round(w[1]) for w in words}) > 1
