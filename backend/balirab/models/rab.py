"""RAB (Rencana Anggaran Biaya) result models.

These mirror the JSON shape returned by the generation service. Wire keys
are camelCase; the Python attributes are snake_case. Values are taken as
provided: no arithmetic is recomputed on construction.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    allow_inf_nan=False,
)

# Numbers must arrive as JSON numbers; numeric strings are rejected
WireNumber = Annotated[float, Field(strict=True)]


class RABItem(BaseModel):
    """A single work item line (uraian pekerjaan)."""

    model_config = _WIRE_CONFIG

    description: str
    unit: str
    volume: WireNumber
    unit_price: WireNumber
    total_price: WireNumber


class RABCategory(BaseModel):
    """A group of work items, e.g. ``"II. Pekerjaan Tanah"``."""

    model_config = _WIRE_CONFIG

    category_name: str
    items: list[RABItem]
    subtotal: WireNumber


class RABResult(BaseModel):
    """Complete estimate as returned by the generation service."""

    model_config = _WIRE_CONFIG

    project_summary: str
    categories: list[RABCategory]
    grand_total: WireNumber
    estimated_duration: str
