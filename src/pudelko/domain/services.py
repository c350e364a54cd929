"""Domain services operating on boxes.

This module provides the operations that are not part of the Box value
object itself:

- compress: derive a cube with the same volume as a box
- compare_boxes / box_sort_key / sort_boxes: order boxes by volume, then
  surface area, then the sum of their dimensions
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable

from .box import Box

logger = logging.getLogger(__name__)


def compress(box: Box) -> Box:
    """Return a cube with the same volume as ``box``.

    The cube keeps the unit of ``box``. Its side is the cube root of the
    volume, passed through regular construction (and rounding), so the
    volume is preserved up to the three-decimal precision of dimensions.

    Args:
        box: Box to compress.

    Returns:
        A cube whose three dimensions are equal.

    Raises:
        DimensionOutOfRangeError: If the cube side rounds outside (0, 10] m.
    """
    side = box.volume ** (1 / 3)
    in_unit = box.unit.from_meters(side)
    logger.debug(f"Compressing {box} into a cube with side {side:.6f} m")
    return Box(in_unit, in_unit, in_unit, unit=box.unit)


def box_sort_key(box: Box) -> tuple[float, float, float]:
    """Sort key ordering boxes by volume, surface area, then dimension sum."""
    return (box.volume, box.surface_area, box.a + box.b + box.c)


def compare_boxes(first: Box, second: Box) -> int:
    """Three-way comparison of two boxes.

    Returns:
        -1 if ``first`` sorts before ``second``, 1 if after, 0 if neither.
    """
    left = box_sort_key(first)
    right = box_sort_key(second)
    return (left > right) - (left < right)


def sort_boxes(boxes: Iterable[Box], reverse: bool = False) -> list[Box]:
    """Return the boxes sorted with compare_boxes (stable)."""
    return sorted(boxes, key=cmp_to_key(compare_boxes), reverse=reverse)
