"""Loading of JSON box catalogs.

A catalog goes through three stages: the file is read, its text is decoded
as JSON, and the resulting data is validated against CatalogConfiguration.
A failure at any stage is reported as a ConfigError whose ``error_type``
names the stage that failed.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pudelko.application.config.schema import CatalogConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A catalog could not be loaded or turned into boxes.

    Attributes:
        message: Summary of the failure.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation or domain.
        path: The catalog file, when loading from disk.
        details: One dictionary per problem. Validation and domain
            problems carry "path" and "message"; JSON problems carry
            "line", "column" and "message".
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _location(loc: tuple[str | int, ...]) -> str:
    # ("boxes", 1, "a") -> "boxes[1].a"
    text = "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc)
    return text.lstrip(".")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        error_type, reason = "file_not_found", "not found"
    except PermissionError:
        error_type, reason = "permission_denied", "permission denied"
    except OSError as e:
        error_type, reason = "file_read_error", str(e)
    raise ConfigError(f"Catalog file {path}: {reason}", error_type=error_type, path=path)


def _decode(text: str, path: Path) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Catalog file {path} is not valid JSON: {e}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def load_config(path: Path) -> CatalogConfiguration:
    """Read, decode and validate the catalog stored at ``path``.

    Raises:
        ConfigError: If any stage fails; see ``ConfigError.error_type``.
    """
    data = _decode(_read_text(path), path)
    logger.debug(f"Decoded catalog {path}")
    return load_config_from_dict(data, path=path)


def load_config_from_dict(data: Any, path: Path | None = None) -> CatalogConfiguration:
    """Validate already decoded catalog data.

    Every schema problem is listed in the error's details and message,
    not only the first one.

    Raises:
        ConfigError: With error_type "validation".
    """
    try:
        return CatalogConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [
            {"path": _location(err["loc"]), "message": err["msg"], "value": err.get("input")}
            for err in e.errors()
        ]
        lines = [f"  - {d['path'] or '<root>'}: {d['message']}" for d in details]
        raise ConfigError(
            "\n".join(["Catalog validation failed:", *lines]),
            error_type="validation",
            path=path,
            details=details,
        ) from e
