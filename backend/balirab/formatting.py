"""Formatting helpers for RAB output.

Rupiah amounts follow the Indonesian convention: ``.`` as the thousands
separator, ``,`` for decimals and no fractional Rupiah
(e.g. ``'Rp 51.948.000'``).
"""

from __future__ import annotations

import math


def _swap_separators(text: str) -> str:
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_rupiah(amount: float) -> str:
    """Format an amount as whole Rupiah, e.g. ``'Rp 1.234.567'``.

    Negative amounts keep their sign in front of the symbol (``'-Rp 5.000'``).
    """
    sign = "-" if amount < 0 else ""
    whole = f"{abs(amount):,.0f}"
    if whole == "0":
        sign = ""
    return f"{sign}Rp {_swap_separators(whole)}"


def format_rupiah_short(amount: float) -> str:
    """Format an amount compactly.

    - Billions (>= 1 M): ``'Rp 1,2 M'`` (miliar)
    - Millions (>= 1 jt): ``'Rp 350 jt'``
    - Below a million: the full amount

    Halves round up, and the unit is picked after rounding so
    ``999.600.000`` reads ``'Rp 1,0 M'`` rather than ``'Rp 1000 jt'``.
    Negative amounts keep their sign in front of the symbol.
    """
    value = abs(amount)
    if value < 1_000_000:
        return format_rupiah(amount)

    sign = "-" if amount < 0 else ""
    millions = _round_half_up(value / 1_000_000)
    if millions >= 1_000:
        tenths = _round_half_up(value / 100_000_000)
        return f"{sign}Rp {_swap_separators(f'{tenths / 10:,.1f}')} M"
    return f"{sign}Rp {millions} jt"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_volume(volume: float) -> str:
    """Format a work volume with up to two decimals, e.g. ``'2,4'``."""
    text = f"{volume:,.2f}".rstrip("0").rstrip(".")
    return _swap_separators(text)
