"""Units of measure and dimension limits for boxes."""

from __future__ import annotations

from enum import Enum

from .exceptions import InvalidUnitError

# All dimensions are stored in meters.
DEFAULT_DIMENSION = 0.1
MAX_DIMENSION = 10.0
DIMENSION_PRECISION = 3
VOLUME_PRECISION = 9
SURFACE_AREA_PRECISION = 6


class UnitOfMeasure(str, Enum):
    """Units a box can be constructed and formatted with.

    The value of each member is the suffix used in the text format.

    Attributes:
        MILLIMETER: 1/1000 of a meter.
        CENTIMETER: 1/100 of a meter.
        METER: The base unit.
    """

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"

    @property
    def factor(self) -> int:
        """Number of this unit in one meter."""
        return _FACTORS[self]

    @property
    def decimals(self) -> int:
        """Decimal places needed to show a meter value rounded to 3 places."""
        return _DECIMALS[self]

    def to_meters(self, value: float) -> float:
        """Convert a value expressed in this unit to meters."""
        if self is UnitOfMeasure.METER:
            return value
        return value / self.factor

    def from_meters(self, value: float) -> float:
        """Convert a value in meters to this unit."""
        return value * self.factor

    @classmethod
    def from_code(cls, code: "str | UnitOfMeasure") -> UnitOfMeasure:
        """Resolve a unit from a member or its suffix ("m", "cm", "mm").

        Raises:
            InvalidUnitError: If the code does not name a unit.
        """
        if isinstance(code, cls):
            return code
        try:
            return cls(code)
        except ValueError:
            raise InvalidUnitError(code) from None


_FACTORS: dict[UnitOfMeasure, int] = {
    UnitOfMeasure.MILLIMETER: 1000,
    UnitOfMeasure.CENTIMETER: 100,
    UnitOfMeasure.METER: 1,
}

_DECIMALS: dict[UnitOfMeasure, int] = {
    UnitOfMeasure.MILLIMETER: 0,
    UnitOfMeasure.CENTIMETER: 1,
    UnitOfMeasure.METER: 3,
}
