"""Pytest configuration and shared fixtures for box tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from pudelko.domain import Box

# Dimensions are compared to three decimal places
ACCURACY = 0.001


def _assert_box(box: Box, a: float, b: float, c: float) -> None:
    assert box.a == pytest.approx(a, abs=ACCURACY)
    assert box.b == pytest.approx(b, abs=ACCURACY)
    assert box.c == pytest.approx(c, abs=ACCURACY)


@pytest.fixture
def assert_box() -> Callable[[Box, float, float, float], None]:
    """Assert the stored dimensions of a box within ACCURACY."""
    return _assert_box


@pytest.fixture
def sample_box() -> Box:
    """A 2.5 m x 9.321 m x 0.1 m box."""
    return Box(2.5, 9.321)


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    """A valid catalog mixing dimension and text entries."""
    return {
        "schema_version": "1.0",
        "default_unit": "m",
        "boxes": [
            {"label": "large", "a": 5, "b": 5, "c": 5},
            {"label": "small", "a": 1, "b": 2, "c": 3},
            {"label": "parsed", "text": "250.0 cm × 932.1 cm × 10.0 cm"},
        ],
        "output": {"unit": "m", "sort": True, "reverse": False},
    }


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a catalog (dict or raw text) to a temporary JSON file."""

    def _write(content: Any, name: str = "boxes.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
