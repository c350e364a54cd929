"""Exceptions raised by the box domain.

Every error derives from BoxError, and additionally from the matching
built-in exception (ValueError or IndexError) so that callers which only
know the standard hierarchy still catch them.
"""

from __future__ import annotations

from typing import Sequence


class BoxError(Exception):
    """Base class for all box domain errors."""

    pass


class InvalidUnitError(BoxError, ValueError):
    """Raised when a unit of measure is not recognized."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Invalid unit of measure: {unit!r}")


class DimensionOutOfRangeError(BoxError, ValueError):
    """Raised when one or more dimensions fall outside (0, 10] meters.

    Attributes:
        dimensions: Names of the offending dimensions ("a", "b", "c").
        values: The converted values (in meters) that failed validation.
    """

    def __init__(self, dimensions: Sequence[str], values: Sequence[float]) -> None:
        self.dimensions = tuple(dimensions)
        self.values = tuple(values)
        details = ", ".join(f"{name}={value!r}" for name, value in zip(self.dimensions, self.values))
        super().__init__(
            f"Dimensions must be positive and at most 10 meters (invalid: {details})"
        )


class BoxParseError(BoxError, ValueError):
    """Base class for errors raised while parsing a box from text."""

    pass


class EmptyInputError(BoxParseError):
    """Raised when the text to parse is None or blank."""

    def __init__(self) -> None:
        super().__init__("Input string cannot be null or empty")


class MalformedInputError(BoxParseError):
    """Raised when the text to parse does not follow the box grammar."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Input string is not in the correct format ({reason}): {text!r}")


class UnsupportedFormatError(BoxError, ValueError):
    """Raised when a box is formatted with an unknown format code."""

    def __init__(self, format_code: str) -> None:
        self.format_code = format_code
        super().__init__(f"The format '{format_code}' is not supported.")


class IndexOutOfRangeError(BoxError, IndexError):
    """Raised when a box is indexed outside of 0, 1, 2."""

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"Index must be 0, 1, or 2 (got {index!r})")
