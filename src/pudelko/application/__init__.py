"""Application layer - catalogs and data transfer objects."""

from .dtos import LabeledBox

__all__ = ["LabeledBox"]
