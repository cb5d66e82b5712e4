"""Unit tests for planet_spatial.models.extent.

Key coverage:
    - Derived geometry (center, width, height, area).
    - Construction invariant on each axis, including the failing axis name.
    - Immutability and bbox tuple conversion.
"""

from __future__ import annotations

import dataclasses

import pytest

from planet_spatial.core import errors
from planet_spatial.models import extent as extent_models


def test_extent_derived_geometry() -> None:
    """Center, size, and area are computed from the bounds."""
    extent = extent_models.Extent(10, 20, 30, 40)
    assert extent.center_x == 20
    assert extent.center_y == 30
    assert extent.width == 20
    assert extent.height == 20
    assert extent.area == 400


def test_extent_rejects_inverted_x() -> None:
    """min_x > max_x names the X axis."""
    with pytest.raises(errors.ConstructionInvariantError) as exc_info:
        extent_models.Extent(30, 20, 10, 40)
    assert exc_info.value.axis == "X"


def test_extent_rejects_inverted_y() -> None:
    """min_y > max_y names the Y axis."""
    with pytest.raises(errors.ConstructionInvariantError) as exc_info:
        extent_models.Extent(10, 40, 30, 20)
    assert exc_info.value.axis == "Y"


def test_extent_allows_degenerate_bounds() -> None:
    """A zero-size extent is valid."""
    extent = extent_models.Extent(5, 5, 5, 5)
    assert extent.width == 0
    assert extent.area == 0


def test_extent_is_immutable() -> None:
    """Bounds cannot be reassigned after construction."""
    extent = extent_models.Extent(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        extent.min_x = 2  # type: ignore[misc]


def test_extent_bbox_conversion() -> None:
    """Extents convert to and from (minx, miny, maxx, maxy) tuples."""
    bbox = (-1.0, -2.0, 3.0, 4.0)
    extent = extent_models.Extent.from_bbox(bbox)
    assert extent.to_bbox() == bbox


def test_extent_contains_boundary() -> None:
    """Points on the boundary are contained."""
    extent = extent_models.Extent(0, 0, 10, 10)
    assert extent.contains(0, 10)
    assert extent.contains(5, 5)
    assert not extent.contains(10.5, 5)
