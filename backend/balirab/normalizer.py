"""Result normalizer — canonical category order and derived totals.

Categories are ordered by the Roman numeral that prefixes their name
(``"II. Pekerjaan Tanah"``). Names without a recognised numeral sort last.
The sort is stable, and item order inside a category is never touched.

Derived totals are recomputed from the sorted categories every time:

* ``construction_cost`` (Biaya Fisik) = sum of category subtotals
* ``tax_amount`` = ``grand_total - construction_cost``

Values are displayed as returned. :func:`find_inconsistencies` reports
arithmetic that does not add up without changing anything.
"""

from __future__ import annotations

import logging
import math
import re
from typing import TYPE_CHECKING

from balirab.data.pricing import TAX_PERCENT
from balirab.models.estimate import NormalizedEstimate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from balirab.models.rab import RABCategory, RABResult

logger = logging.getLogger(__name__)

ROMAN_NUMERALS: dict[str, int] = {
    "I": 1,
    "II": 2,
    "III": 3,
    "IV": 4,
    "V": 5,
    "VI": 6,
    "VII": 7,
    "VIII": 8,
    "IX": 9,
    "X": 10,
    "XI": 11,
    "XII": 12,
    "XIII": 13,
    "XIV": 14,
    "XV": 15,
}

# Sort key for names without a recognised numeral prefix
UNNUMBERED_SORT_KEY = 999

_NUMERAL_PREFIX = re.compile(r"^([IVX]+)\.")

# Tolerances for the reconciliation pass (rounded volumes are common)
_REL_TOLERANCE = 0.005
_ABS_TOLERANCE = 1.0


def category_sort_key(category_name: str) -> int:
    """Return the ordinal of the numeral prefix, or ``UNNUMBERED_SORT_KEY``."""
    match = _NUMERAL_PREFIX.match(category_name.strip())
    if match is None:
        return UNNUMBERED_SORT_KEY
    return ROMAN_NUMERALS.get(match.group(1), UNNUMBERED_SORT_KEY)


def sort_categories(categories: Iterable[RABCategory]) -> list[RABCategory]:
    """Return categories in numeral order; ties keep their input order."""
    return sorted(categories, key=lambda c: category_sort_key(c.category_name))


def construction_cost(categories: Iterable[RABCategory]) -> float:
    """Physical construction cost: the sum of category subtotals."""
    return sum(c.subtotal for c in categories)


def tax_amount(grand_total: float, categories: Iterable[RABCategory]) -> float:
    """Tax implied by the grand total; may be negative if the input is inconsistent."""
    return grand_total - construction_cost(categories)


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=_REL_TOLERANCE, abs_tol=_ABS_TOLERANCE)


def find_inconsistencies(result: RABResult) -> list[str]:
    """Report arithmetic in *result* that does not reconcile.

    Checks item totals against ``volume x unitPrice``, category subtotals
    against their items, and the implied tax against the nominal PPN rate.
    Returns human-readable warnings; an empty list means everything adds up.
    """
    warnings: list[str] = []

    for category in result.categories:
        for item in category.items:
            expected = item.volume * item.unit_price
            if not _close(item.total_price, expected):
                warnings.append(
                    f"{category.category_name} / {item.description}: "
                    f"total {item.total_price:,.0f} != volume x harga satuan "
                    f"{expected:,.0f}"
                )
        items_sum = sum(i.total_price for i in category.items)
        if not _close(category.subtotal, items_sum):
            warnings.append(
                f"{category.category_name}: subtotal {category.subtotal:,.0f} "
                f"!= jumlah item {items_sum:,.0f}"
            )

    physical = construction_cost(result.categories)
    tax = result.grand_total - physical
    expected_tax = physical * TAX_PERCENT / 100
    if tax < 0:
        warnings.append(
            f"Grand total {result.grand_total:,.0f} lebih kecil dari biaya fisik "
            f"{physical:,.0f}"
        )
    elif not _close(tax, expected_tax):
        warnings.append(
            f"PPN {tax:,.0f} tidak sesuai {TAX_PERCENT}% dari biaya fisik "
            f"({expected_tax:,.0f})"
        )

    return warnings


def normalize_result(result: RABResult) -> NormalizedEstimate:
    """Produce the display view of *result* without mutating it."""
    categories = sort_categories(result.categories)
    physical = construction_cost(categories)

    warnings = find_inconsistencies(result)
    for warning in warnings:
        logger.warning("RAB arithmetic mismatch: %s", warning)

    return NormalizedEstimate(
        project_summary=result.project_summary,
        estimated_duration=result.estimated_duration,
        categories=categories,
        construction_cost=physical,
        tax_amount=result.grand_total - physical,
        grand_total=result.grand_total,
        warnings=warnings,
    )
