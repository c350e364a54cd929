"""Catalog schema and loading system for box listings.

This package provides JSON-based catalog loading and validation. It
includes Pydantic models for schema validation, a loader with
comprehensive error handling, an adapter to domain boxes, and domain
checks on the loaded entries.

Public API:
    - CatalogConfiguration: Root catalog model
    - BoxEntryConfig: A single box entry
    - OutputConfig: Output preferences
    - SUPPORTED_VERSIONS: Accepted schema versions
    - load_config: Load a catalog from a JSON file
    - load_config_from_dict: Load a catalog from a dictionary
    - ConfigError: Exception for catalog errors
    - config_to_boxes: Convert a catalog to labeled boxes
    - validate_config: Check entries against the box domain
    - ValidationResult: Container for validation results

Example:
    >>> from pathlib import Path
    >>> from pudelko.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("boxes.json"))
    ...     print(f"{len(config.boxes)} boxes")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from pudelko.application.config.adapter import config_to_boxes, entry_to_box
from pudelko.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from pudelko.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoxEntryConfig,
    CatalogConfiguration,
    OutputConfig,
)
from pudelko.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "BoxEntryConfig",
    "CatalogConfiguration",
    "ConfigError",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_boxes",
    "entry_to_box",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
