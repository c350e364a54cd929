"""Pydantic models for box catalog files.

A catalog is a JSON document listing boxes, either by their dimensions or
by their text form, plus output preferences used by the CLI.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# Version 1.0: Boxes by dimensions or text, output unit and sort order
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

UnitCode = Literal["m", "cm", "mm"]


class BoxEntryConfig(BaseModel):
    """A single box in a catalog.

    An entry gives either ``text`` (the "<n> <u> × <n> <u> × <n> <u>" form)
    or dimensions ``a``, ``b``, ``c`` in ``unit``. Omitted dimensions fall
    back to the 0.1 m box default, and an omitted unit falls back to the
    catalog's ``default_unit``.

    Attributes:
        label: Optional name shown in listings.
        a: First dimension.
        b: Second dimension.
        c: Third dimension.
        unit: Unit of the dimensions.
        text: Text form of the box.
    """

    model_config = ConfigDict(extra="forbid")

    label: str | None = Field(default=None, min_length=1, max_length=64)
    a: float | None = None
    b: float | None = None
    c: float | None = None
    unit: UnitCode | None = None
    text: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def check_text_or_dimensions(self) -> "BoxEntryConfig":
        """Ensure an entry uses exactly one of text or dimensions."""
        has_dimensions = any(v is not None for v in (self.a, self.b, self.c))
        if self.text is not None and (has_dimensions or self.unit is not None):
            raise ValueError("Specify either 'text' or dimensions, not both")
        if self.text is None and not has_dimensions:
            raise ValueError("Specify 'text' or at least one of 'a', 'b', 'c'")
        return self


class OutputConfig(BaseModel):
    """Output preferences for listing a catalog.

    Attributes:
        unit: Unit used to format boxes.
        sort: Whether to order boxes by volume, surface area, dimension sum.
        reverse: Whether to reverse the order.
    """

    model_config = ConfigDict(extra="forbid")

    unit: UnitCode = "m"
    sort: bool = True
    reverse: bool = False


class CatalogConfiguration(BaseModel):
    """Root model of a box catalog file.

    Attributes:
        schema_version: Catalog format version.
        default_unit: Unit for entries that give dimensions without a unit.
        boxes: Boxes in the catalog (1 to 1000).
        output: Output preferences.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    default_unit: UnitCode = "m"
    boxes: list[BoxEntryConfig] = Field(..., min_length=1, max_length=1000)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def check_schema_version(cls, value: str) -> str:
        """Reject unknown catalog versions."""
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version {value!r}. Supported: {supported}")
        return value
