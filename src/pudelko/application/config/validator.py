"""Domain checks for a loaded catalog.

The schema only knows about types and field combinations. These checks
build every entry as a real Box: an entry that cannot be built is an
error, and an entry equal to an earlier one (in any orientation) is a
warning.
"""

from dataclasses import dataclass, field
from typing import Any

from pudelko.application.config.adapter import entry_label, entry_to_box
from pudelko.application.config.schema import BoxEntryConfig, CatalogConfiguration
from pudelko.domain import Box, BoxError


@dataclass(frozen=True)
class ValidationError:
    """An entry that does not describe a valid box.

    ``value`` is the entry's text, or its ``[a, b, c]`` list.
    """

    path: str
    message: str
    value: Any = None


@dataclass(frozen=True)
class ValidationWarning:
    """An entry that is usable but probably a mistake."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """1 when there are errors, 2 for warnings only, 0 otherwise."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0


def _entry_value(entry: BoxEntryConfig) -> Any:
    return entry.text if entry.text is not None else [entry.a, entry.b, entry.c]


def validate_config(config: CatalogConfiguration) -> ValidationResult:
    """Build every entry of ``config`` and report what went wrong."""
    result = ValidationResult()
    labels: dict[Box, str] = {}

    for index, entry in enumerate(config.boxes):
        path = f"boxes[{index}]"
        try:
            box = entry_to_box(entry, config.default_unit)
        except BoxError as e:
            result.errors.append(ValidationError(path, str(e), _entry_value(entry)))
            continue

        label = entry_label(entry, index)
        if box not in labels:
            labels[box] = label
            continue
        result.warnings.append(
            ValidationWarning(
                path,
                f"'{label}' ({box}) is the same box as '{labels[box]}'",
                suggestion="Remove the duplicate or change its dimensions",
            )
        )

    return result
