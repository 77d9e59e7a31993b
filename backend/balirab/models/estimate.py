"""Display-ready estimate produced by the result normalizer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from balirab.models.rab import RABCategory  # noqa: TCH001 (pydantic resolves at runtime)

TAX_RATE_PERCENT = 11


class NormalizedEstimate(BaseModel):
    """A RAB result with categories in canonical order and derived totals.

    ``construction_cost`` is the sum of category subtotals (Biaya Fisik) and
    ``tax_amount`` is whatever remains of ``grand_total`` after it. Both are
    derived from the values the generation service returned and may be
    inconsistent with a nominal 11% PPN; ``warnings`` lists what the
    reconciliation pass noticed.
    """

    project_summary: str
    estimated_duration: str
    categories: list[RABCategory]
    construction_cost: float
    tax_amount: float
    grand_total: float
    warnings: list[str] = Field(default_factory=list)

    @property
    def item_count(self) -> int:
        return sum(len(c.items) for c in self.categories)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict of formatted strings for the UI cards."""
        from balirab.formatting import format_rupiah, format_rupiah_short

        return {
            "grand_total_formatted": format_rupiah(self.grand_total),
            "grand_total_short": format_rupiah_short(self.grand_total),
            "grand_total_label": f"Total Biaya (Inc. PPN {TAX_RATE_PERCENT}%)",
            "construction_cost_formatted": format_rupiah(self.construction_cost),
            "tax_amount_formatted": format_rupiah(self.tax_amount),
            "estimated_duration": self.estimated_duration,
            "num_categories": len(self.categories),
            "num_categories_label": f"{len(self.categories)} Tahapan",
            "num_items": self.item_count,
            "project_summary": self.project_summary,
            "num_warnings": len(self.warnings),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed dict with full nested data for export documents."""
        return {
            "project_summary": self.project_summary,
            "estimated_duration": self.estimated_duration,
            "categories": [
                {
                    "category_name": c.category_name,
                    "subtotal": c.subtotal,
                    "items": [i.model_dump() for i in c.items],
                }
                for c in self.categories
            ],
            "construction_cost": self.construction_cost,
            "tax_rate_percent": TAX_RATE_PERCENT,
            "tax_amount": self.tax_amount,
            "grand_total": self.grand_total,
            "warnings": list(self.warnings),
        }
