"""Output formatters and exporters for boxes."""

from __future__ import annotations

import json
from typing import Any, Sequence

from pudelko.application.dtos import LabeledBox
from pudelko.domain import Box, compress


class BoxTableFormatter:
    """Formats labeled boxes as a fixed-width table.

    Dimensions are shown in the formatter's unit; volume and surface area
    are always in cubic and square meters.
    """

    def __init__(self, unit_code: str = "m") -> None:
        """Initialize formatter.

        Args:
            unit_code: Unit used for the dimensions column ("m", "cm", "mm").
        """
        self._unit_code = unit_code

    def format(self, boxes: Sequence[LabeledBox]) -> str:
        """Format boxes as a table with a totals line."""
        if not boxes:
            return "No boxes."

        rows = [(item.label, item.box.format(self._unit_code)) for item in boxes]
        label_width = max(len("Label"), *(len(label) for label, _ in rows))
        dims_width = max(len("Dimensions"), *(len(dims) for _, dims in rows))
        line_width = label_width + dims_width + 30

        lines = [
            "BOXES",
            "=" * line_width,
            f"{'Label':<{label_width}}  {'Dimensions':<{dims_width}}  {'Volume (m³)':>13}  {'Area (m²)':>11}",
            "-" * line_width,
        ]

        total_volume = 0.0
        for item, (label, dims) in zip(boxes, rows):
            lines.append(
                f"{label:<{label_width}}  {dims:<{dims_width}}  "
                f"{item.box.volume:>13.6f}  {item.box.surface_area:>11.4f}"
            )
            total_volume += item.box.volume

        count = f"{len(boxes)} box(es)"
        lines.append("-" * line_width)
        lines.append(
            f"{'TOTAL':<{label_width}}  {count:<{dims_width}}  {total_volume:>13.6f}"
        )
        return "\n".join(lines)

    def format_compression(self, box: Box) -> str:
        """Describe a box next to its equal-volume cube."""
        cube = compress(box)
        return "\n".join(
            [
                f"Original Box: {box.format(self._unit_code)}",
                f"Compressed Box (cube with same volume): {cube.format(self._unit_code)}",
            ]
        )


class JsonExporter:
    """Exports boxes as JSON.

    Dimensions are written in meters, together with the unit the box was
    created with and its text form.
    """

    def box_to_dict(self, box: Box) -> dict[str, Any]:
        """Convert a box to a JSON-serializable dictionary."""
        return {
            "a": box.a,
            "b": box.b,
            "c": box.c,
            "unit": box.unit.value,
            "volume": box.volume,
            "surface_area": box.surface_area,
            "text": str(box),
        }

    def export_box(self, box: Box) -> str:
        """Export a single box as a JSON string."""
        return json.dumps(self.box_to_dict(box), indent=2, ensure_ascii=False)

    def export(self, boxes: Sequence[LabeledBox]) -> str:
        """Export labeled boxes as a JSON string."""
        data = {
            "boxes": [{"label": item.label, **self.box_to_dict(item.box)} for item in boxes],
            "total_volume": round(sum(item.box.volume for item in boxes), 9),
        }
        return json.dumps(data, indent=2, ensure_ascii=False)
