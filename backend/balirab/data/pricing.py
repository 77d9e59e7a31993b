"""Fixed pricing factors embedded in the costing directive.

Location markups are percentages over the base unit price (HSD), keyed by
regency. Regencies outside the table carry no markup.
"""

from __future__ import annotations

from balirab.models.enums import BaliLocation
from balirab.models.estimate import TAX_RATE_PERCENT

# Maps regency -> markup percent on top of the base price.
LOCATION_MARKUPS: dict[BaliLocation, int] = {
    # High living and logistics cost
    BaliLocation.BADUNG: 10,
    BaliLocation.DENPASAR: 10,
    # Mid
    BaliLocation.GIANYAR: 5,
    BaliLocation.TABANAN: 5,
    # Standard price
    BaliLocation.BULELENG: 0,
    BaliLocation.JEMBRANA: 0,
    BaliLocation.BANGLI: 0,
    BaliLocation.KLUNGKUNG: 0,
    BaliLocation.KARANGASEM: 0,
}

DEFAULT_LOCATION_MARKUP: int = 0

OVERHEAD_PERCENT = 5
PROFIT_PERCENT = 10
CONTRACTOR_MARGIN_PERCENT = OVERHEAD_PERCENT + PROFIT_PERCENT

# PPN (value added tax) applied on the physical construction cost
TAX_PERCENT = TAX_RATE_PERCENT
