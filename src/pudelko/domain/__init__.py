"""Domain layer - the Box value object and its services."""

from .box import Box
from .exceptions import (
    BoxError,
    BoxParseError,
    DimensionOutOfRangeError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidUnitError,
    MalformedInputError,
    UnsupportedFormatError,
)
from .services import box_sort_key, compare_boxes, compress, sort_boxes
from .value_objects import MAX_DIMENSION, UnitOfMeasure

__all__ = [
    "Box",
    "BoxError",
    "BoxParseError",
    "DimensionOutOfRangeError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "InvalidUnitError",
    "MAX_DIMENSION",
    "MalformedInputError",
    "UnitOfMeasure",
    "UnsupportedFormatError",
    "box_sort_key",
    "compare_boxes",
    "compress",
    "sort_boxes",
]
