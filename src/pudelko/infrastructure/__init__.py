"""Infrastructure layer - output formatters."""

from .formatters import BoxTableFormatter, JsonExporter

__all__ = [
    "BoxTableFormatter",
    "JsonExporter",
]
