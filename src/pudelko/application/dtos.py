"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from pudelko.domain import Box


@dataclass(frozen=True)
class LabeledBox:
    """A box together with the name it is listed under."""

    label: str
    box: Box
