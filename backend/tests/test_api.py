"""API endpoint tests for the coordinate and tile routers.

This module exercises the JSON surface over the Mercator engine:
    - Degree, meter, and pixel conversions,
    - Mapping of spatial errors to 422 responses naming the error type,
    - Tile extents and the tile schema description,
    - Settings injected through dependency overrides (tile size, strict mode).

See Also:
    - backend/planet_spatial/api/coordinates.py,
    - backend/planet_spatial/api/tiles.py.
"""

from __future__ import annotations

import pytest
from fastapi import testclient

from planet_spatial import main
from planet_spatial.core import config

ORIGIN_SHIFT = 20037508.342789244


@pytest.fixture
def client() -> testclient.TestClient:
    """Client over an app with default settings."""
    app = main.create_app()
    app.dependency_overrides[config.get_settings] = lambda: config.Settings()
    return testclient.TestClient(app)


def test_lat_lon_to_meters(client: testclient.TestClient) -> None:
    """Degrees project to meters."""
    response = client.get("/coordinates/meters", params={"lon": 180, "lat": 0})
    assert response.status_code == 200
    body = response.json()
    assert body["x"] == pytest.approx(ORIGIN_SHIFT)
    assert body["y"] == pytest.approx(0, abs=1e-6)


def test_meters_to_geodetic(client: testclient.TestClient) -> None:
    """Meters convert to a position with canonical text."""
    response = client.get("/coordinates/geodetic", params={"mx": 0, "my": 0})
    assert response.status_code == 200
    body = response.json()
    assert body["latitude"] == pytest.approx(0)
    assert body["text"] == "0.00000°, 0.00000°"


def test_meters_to_pixels(client: testclient.TestClient) -> None:
    """Meters convert to pixels at a zoom level."""
    response = client.get(
        "/coordinates/pixels",
        params={"mx": 0, "my": 0, "zoom": 1},
    )
    assert response.status_code == 200
    assert response.json() == pytest.approx({"x": 512, "y": 512})


def test_meters_to_pixels_uses_tile_size(client: testclient.TestClient) -> None:
    """The tile_size query parameter selects the engine."""
    response = client.get(
        "/coordinates/pixels",
        params={"mx": 0, "my": 0, "zoom": 1, "tile_size": 256},
    )
    assert response.json() == pytest.approx({"x": 256, "y": 256})


def test_pixel_to_meters(client: testclient.TestClient) -> None:
    """Pixels convert to meters."""
    response = client.get(
        "/coordinates/meters-from-pixels",
        params={"px": 0, "py": 0, "zoom": 0},
    )
    assert response.status_code == 200
    assert response.json() == pytest.approx({"x": -ORIGIN_SHIFT, "y": -ORIGIN_SHIFT})


def test_negative_zoom_is_422(client: testclient.TestClient) -> None:
    """Range errors surface as 422 with the error name."""
    response = client.get(
        "/coordinates/meters-from-pixels",
        params={"px": 0, "py": 0, "zoom": -1},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "RangeError"


def test_overflow_zoom_is_422(client: testclient.TestClient) -> None:
    """Overflow errors surface as 422 with the error name."""
    response = client.get(
        "/coordinates/pixels",
        params={"mx": 0, "my": 0, "zoom": 60},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "ResolutionOverflowError"


def test_non_positive_tile_size_is_422(client: testclient.TestClient) -> None:
    """Tile size query parameter must be positive."""
    response = client.get(
        "/coordinates/meters",
        params={"lon": 0, "lat": 0, "tile_size": 0},
    )
    assert response.status_code == 422


def test_strict_mode_from_settings() -> None:
    """Strict settings make overscroll a 422."""
    app = main.create_app()
    app.dependency_overrides[config.get_settings] = lambda: config.Settings(
        strict_bounds=True,
    )
    client = testclient.TestClient(app)
    response = client.get(
        "/coordinates/meters-from-pixels",
        params={"px": 4096, "py": 0, "zoom": 1},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "WorldBoundsError"


def test_tile_extent(client: testclient.TestClient) -> None:
    """A zoom-1 tile covers one quadrant of the world."""
    response = client.get("/tiles/1/1/1/extent")
    assert response.status_code == 200
    body = response.json()
    assert body["index"] == {"col": 1, "row": 1, "level": 1}
    assert body["extent"]["max_x"] == pytest.approx(ORIGIN_SHIFT)
    assert body["extent"]["width"] == pytest.approx(ORIGIN_SHIFT)
    assert body["extent"]["center_x"] == pytest.approx(ORIGIN_SHIFT / 2)


def test_tile_schema(client: testclient.TestClient) -> None:
    """The schema lists one resolution per level."""
    response = client.get("/tiles/schema", params={"max_zoom": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["srs"] == "EPSG:3857"
    assert body["format"] == "png"
    assert sorted(body["resolutions"]) == ["0", "1", "2"]
    assert body["resolutions"]["1"]["tile_width"] == 512
    assert body["extent"]["area"] == pytest.approx((2 * ORIGIN_SHIFT) ** 2)
