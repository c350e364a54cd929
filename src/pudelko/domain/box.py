"""The Box value object."""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass, field
from typing import Iterator

from .exceptions import (
    DimensionOutOfRangeError,
    EmptyInputError,
    IndexOutOfRangeError,
    MalformedInputError,
    UnsupportedFormatError,
)
from .value_objects import (
    DEFAULT_DIMENSION,
    DIMENSION_PRECISION,
    MAX_DIMENSION,
    SURFACE_AREA_PRECISION,
    VOLUME_PRECISION,
    UnitOfMeasure,
)

logger = logging.getLogger(__name__)

DIMENSION_NAMES = ("a", "b", "c")
SEPARATOR = "×"

# Absorbs binary noise from unit conversion and addition near the upper bound.
_BOUND_TOLERANCE = 1e-9

_SEGMENT_SPLIT = re.compile(r"[×xX]")
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _as_real(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Dimension {name} must be a real number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True, eq=False, init=False)
class Box:
    """Immutable rectangular box with three dimensions.

    Dimensions are given in ``unit`` and stored in meters, rounded to three
    decimal places with ``round()``. An omitted dimension is 0.1 m no matter
    which unit is given. Every stored dimension lies in (0, 10] meters.

    ``unit`` only records how the box was built. The fields are meters, so
    ``repr()`` and ``dataclasses.replace()`` work in meters and the copy is
    a meter box.

    Two boxes are equal when their sorted dimensions are equal, so a
    1 x 2 x 3 box equals a 3 x 1 x 2 box. The unit does not take part in
    equality.

    Example:
        >>> box = Box(2.5, 9.321)
        >>> str(box)
        '2.500 m × 9.321 m × 0.100 m'
        >>> f"{box:mm}"
        '2500 mm × 9321 mm × 100 mm'

    Raises:
        TypeError: If a dimension is not a real number.
        InvalidUnitError: If ``unit`` is not a known unit of measure.
        DimensionOutOfRangeError: If a dimension is outside (0, 10] meters.
    """

    a: float
    b: float
    c: float
    unit: UnitOfMeasure = field(default=UnitOfMeasure.METER, init=False, repr=False)

    def __init__(
        self,
        a: float | None = None,
        b: float | None = None,
        c: float | None = None,
        unit: UnitOfMeasure | str = UnitOfMeasure.METER,
    ) -> None:
        unit = UnitOfMeasure.from_code(unit)
        object.__setattr__(self, "unit", unit)

        raw = [
            DEFAULT_DIMENSION if value is None else unit.to_meters(_as_real(name, value))
            for name, value in zip(DIMENSION_NAMES, (a, b, c))
        ]
        rounded = [round(value, DIMENSION_PRECISION) for value in raw]

        invalid = [
            (name, value)
            for name, value, exact in zip(DIMENSION_NAMES, rounded, raw)
            if not math.isfinite(exact)
            or exact - MAX_DIMENSION > _BOUND_TOLERANCE
            or value <= 0
        ]
        if invalid:
            names, values = zip(*invalid)
            raise DimensionOutOfRangeError(names, values)

        for name, value in zip(DIMENSION_NAMES, rounded):
            object.__setattr__(self, name, value)

    @classmethod
    def from_millimeters(cls, a: int, b: int, c: int) -> Box:
        """Create a box from three whole-millimeter dimensions."""
        return cls(a / 1000, b / 1000, c / 1000, unit=UnitOfMeasure.METER)

    @classmethod
    def parse(cls, text: str | None) -> Box:
        """Parse a box from its text form.

        The text holds three ``<value> <unit>`` segments separated by ``×``
        (ASCII ``x`` and ``X`` are accepted too). Each segment may use its
        own unit; values use a period as decimal separator.

        Example:
            >>> Box.parse("2.5 m × 932.1 cm × 100 mm") == Box(2.5, 9.321, 0.1)
            True

        Raises:
            EmptyInputError: If ``text`` is None or blank.
            MalformedInputError: If ``text`` does not follow the grammar.
            DimensionOutOfRangeError: If a parsed dimension is out of range.
        """
        if text is None or not text.strip():
            raise EmptyInputError()

        segments = [s.strip() for s in _SEGMENT_SPLIT.split(text) if s.strip()]
        if len(segments) != 3:
            raise MalformedInputError(text, f"expected 3 segments, got {len(segments)}")

        meters: list[float] = []
        for segment in segments:
            tokens = segment.split()
            if len(tokens) != 2:
                raise MalformedInputError(text, f"expected '<value> <unit>', got {segment!r}")
            number, code = tokens
            if not _NUMBER.fullmatch(number):
                raise MalformedInputError(text, f"invalid number {number!r}")
            try:
                unit = UnitOfMeasure(code)
            except ValueError:
                raise MalformedInputError(text, f"invalid unit {code!r}") from None
            meters.append(unit.to_meters(float(number)))

        logger.debug(f"Parsed {text!r} as {meters} m")
        return cls(*meters, unit=UnitOfMeasure.METER)

    @property
    def volume(self) -> float:
        """Volume in cubic meters, rounded to 9 decimal places."""
        return round(self.a * self.b * self.c, VOLUME_PRECISION)

    @property
    def surface_area(self) -> float:
        """Surface area in square meters, rounded to 6 decimal places."""
        return round(
            2 * (self.a * self.b + self.b * self.c + self.a * self.c),
            SURFACE_AREA_PRECISION,
        )

    def format(self, unit_code: str | None = "m") -> str:
        """Format the box as ``"<A> <u> × <B> <u> × <C> <u>"``.

        Args:
            unit_code: "m", "cm" or "mm". Empty or None means "m".

        Raises:
            UnsupportedFormatError: If the code is not a supported unit.
        """
        if not unit_code:
            unit = UnitOfMeasure.METER
        else:
            try:
                unit = UnitOfMeasure(unit_code)
            except ValueError:
                raise UnsupportedFormatError(unit_code) from None

        return f" {SEPARATOR} ".join(
            f"{unit.from_meters(value):.{unit.decimals}f} {unit.value}" for value in self
        )

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format(UnitOfMeasure.METER)

    def _sorted_dimensions(self) -> tuple[float, float, float]:
        return tuple(sorted((self.a, self.b, self.c)))  # type: ignore[return-value]

    def equals(self, other: object) -> bool:
        """Return True if ``other`` is a box with the same sorted dimensions."""
        if not isinstance(other, Box):
            return False
        return self._sorted_dimensions() == other._sorted_dimensions()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._sorted_dimensions())

    def add(self, other: Box) -> Box:
        """Return a box whose dimensions are the position-wise sums.

        Raises:
            DimensionOutOfRangeError: If a summed dimension exceeds 10 meters.
        """
        return Box(self.a + other.a, self.b + other.b, self.c + other.c, unit=UnitOfMeasure.METER)

    def __add__(self, other: object) -> Box:
        if not isinstance(other, Box):
            return NotImplemented
        return self.add(other)

    def to_array(self) -> list[float]:
        """Return the dimensions in meters as ``[a, b, c]``."""
        return [self.a, self.b, self.c]

    def __getitem__(self, index: int) -> float:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 2:
            raise IndexOutOfRangeError(index)
        return getattr(self, DIMENSION_NAMES[index])

    def __iter__(self) -> Iterator[float]:
        yield self.a
        yield self.b
        yield self.c

    def __len__(self) -> int:
        return 3
