"""Static pricing factors and form options for the RAB estimator."""

from balirab.data.form_options import NOTE_SUGGESTIONS, add_note_suggestion
from balirab.data.pricing import (
    CONTRACTOR_MARGIN_PERCENT,
    DEFAULT_LOCATION_MARKUP,
    LOCATION_MARKUPS,
    TAX_PERCENT,
)

__all__ = [
    "CONTRACTOR_MARGIN_PERCENT",
    "DEFAULT_LOCATION_MARKUP",
    "LOCATION_MARKUPS",
    "NOTE_SUGGESTIONS",
    "TAX_PERCENT",
    "add_note_suggestion",
]
