"""Tabular breakdown of a normalized estimate.

Rows come out in display order: for each category a header row, its items
and a subtotal row, then the three footer rows (physical cost, tax, grand
total).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from balirab.formatting import format_rupiah, format_volume
from balirab.models.estimate import TAX_RATE_PERCENT

if TYPE_CHECKING:
    from balirab.models.estimate import NormalizedEstimate

TABLE_HEADERS: tuple[str, ...] = (
    "Uraian Pekerjaan",
    "Sat",
    "Vol",
    "Harga Satuan",
    "Jumlah",
)

CONSTRUCTION_COST_LABEL = "Biaya Fisik"
TAX_LABEL = f"PPN {TAX_RATE_PERCENT}%"
GRAND_TOTAL_LABEL = "GRAND TOTAL"


class RowKind(StrEnum):
    """Kind of a table row."""

    CATEGORY = "category"
    ITEM = "item"
    SUBTOTAL = "subtotal"
    FOOTER = "footer"


@dataclass(frozen=True)
class TableRow:
    """One rendered row of the breakdown table."""

    kind: RowKind
    label: str
    unit: str = ""
    volume: str = ""
    unit_price: str = ""
    amount: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "unit": self.unit,
            "volume": self.volume,
            "unit_price": self.unit_price,
            "amount": self.amount,
        }


def build_table_rows(estimate: NormalizedEstimate) -> list[TableRow]:
    """Build the full list of table rows, footer included."""
    rows: list[TableRow] = []
    for category in estimate.categories:
        rows.append(TableRow(kind=RowKind.CATEGORY, label=category.category_name))
        for item in category.items:
            rows.append(
                TableRow(
                    kind=RowKind.ITEM,
                    label=item.description,
                    unit=item.unit,
                    volume=format_volume(item.volume),
                    unit_price=format_rupiah(item.unit_price),
                    amount=format_rupiah(item.total_price),
                )
            )
        rows.append(
            TableRow(
                kind=RowKind.SUBTOTAL,
                label="Subtotal",
                amount=format_rupiah(category.subtotal),
            )
        )
    rows.extend(build_footer_rows(estimate))
    return rows


def build_footer_rows(estimate: NormalizedEstimate) -> list[TableRow]:
    """The physical cost, tax and grand total rows."""
    return [
        TableRow(
            kind=RowKind.FOOTER,
            label=CONSTRUCTION_COST_LABEL,
            amount=format_rupiah(estimate.construction_cost),
        ),
        TableRow(
            kind=RowKind.FOOTER,
            label=TAX_LABEL,
            amount=format_rupiah(estimate.tax_amount),
        ),
        TableRow(
            kind=RowKind.FOOTER,
            label=GRAND_TOTAL_LABEL,
            amount=format_rupiah(estimate.grand_total),
        ),
    ]
