"""Adapter to convert a CatalogConfiguration into domain boxes.

Entries are turned into Box instances through the regular constructor or
parser, so catalogs obey the same validation as code. Domain failures are
reported as ConfigError pointing at the offending entry.
"""

import logging

from pudelko.application.config.loader import ConfigError
from pudelko.application.config.schema import BoxEntryConfig, CatalogConfiguration
from pudelko.application.dtos import LabeledBox
from pudelko.domain import Box, BoxError, UnitOfMeasure, box_sort_key

logger = logging.getLogger(__name__)


def entry_label(entry: BoxEntryConfig, index: int) -> str:
    """Label of an entry, defaulting to its 1-based position."""
    return entry.label or f"box {index + 1}"


def entry_to_box(entry: BoxEntryConfig, default_unit: str = "m") -> Box:
    """Build a Box from a catalog entry.

    Raises:
        BoxError: If the entry does not describe a valid box.
    """
    if entry.text is not None:
        return Box.parse(entry.text)
    unit = UnitOfMeasure.from_code(entry.unit or default_unit)
    return Box(entry.a, entry.b, entry.c, unit=unit)


def config_to_boxes(config: CatalogConfiguration) -> list[LabeledBox]:
    """Convert every catalog entry to a labeled box.

    Boxes are ordered as requested by ``config.output``.

    Raises:
        ConfigError: With error_type "domain" for the first invalid entry.
    """
    labeled: list[LabeledBox] = []
    for index, entry in enumerate(config.boxes):
        try:
            box = entry_to_box(entry, config.default_unit)
        except BoxError as e:
            raise ConfigError(
                message=f"boxes[{index}]: {e}",
                error_type="domain",
                details=[{"path": f"boxes[{index}]", "message": str(e), "value": None}],
            ) from e
        labeled.append(LabeledBox(label=entry_label(entry, index), box=box))

    logger.debug(f"Built {len(labeled)} boxes from catalog")
    if not config.output.sort:
        return labeled

    return sorted(
        labeled,
        key=lambda item: box_sort_key(item.box),
        reverse=config.output.reverse,
    )
