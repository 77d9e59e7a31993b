"""Cost-proportion chart: one segment per category, value = subtotal."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from PIL import Image, ImageDraw

from balirab.formatting import format_rupiah

if TYPE_CHECKING:
    from balirab.models.estimate import NormalizedEstimate

PALETTE: tuple[str, ...] = (
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#EC4899",
    "#6366F1",
    "#14B8A6",
)


@dataclass(frozen=True)
class ChartSegment:
    """A single slice of the proportion chart."""

    name: str
    value: float
    percent: float
    color: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "value_formatted": format_rupiah(self.value),
            "percent": self.percent,
            "color": self.color,
        }


def build_chart_segments(estimate: NormalizedEstimate) -> list[ChartSegment]:
    """Build chart segments in category display order.

    Percentages are relative to the physical cost; when that is not positive
    every segment gets 0%.
    """
    total = estimate.construction_cost
    segments: list[ChartSegment] = []
    for index, category in enumerate(estimate.categories):
        percent = round(category.subtotal / total * 100, 1) if total > 0 else 0.0
        segments.append(
            ChartSegment(
                name=category.category_name,
                value=category.subtotal,
                percent=percent,
                color=PALETTE[index % len(PALETTE)],
            )
        )
    return segments


def render_pie_chart_png(
    segments: list[ChartSegment],
    size: int = 480,
) -> bytes:
    """Render a donut chart with a legend underneath as PNG bytes."""
    legend_line = 18
    padding = 20
    height = size + padding + legend_line * len(segments)
    img = Image.new("RGB", (size, height), "white")
    draw = ImageDraw.Draw(img)

    box = (padding, padding, size - padding, size - padding)
    total = sum(s.value for s in segments if s.value > 0)
    start = -90.0
    if total > 0:
        for seg in segments:
            if seg.value <= 0:
                continue
            sweep = seg.value / total * 360
            draw.pieslice(box, start, start + sweep, fill=seg.color)
            start += sweep

    # Donut hole
    inset = (size - 2 * padding) * 0.2
    draw.ellipse(
        (box[0] + inset, box[1] + inset, box[2] - inset, box[3] - inset),
        fill="white",
    )

    y = size
    for seg in segments:
        draw.rectangle((padding, y + 3, padding + 12, y + 15), fill=seg.color)
        draw.text((padding + 20, y + 3), f"{seg.name} ({seg.percent:g}%)", fill="#1E293B")
        y += legend_line

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
