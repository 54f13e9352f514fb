"""Shared pytest fixtures for stereo-args tests."""

from pathlib import Path

import numpy as np
import pytest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test inside an empty temporary directory so relative paths resolve there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_files(workdir: Path):
    """Create empty files with the given relative names."""

    def _make(*names: str) -> list[str]:
        for name in names:
            path = workdir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"")
        return list(names)

    return _make


@pytest.fixture
def geotiff(workdir: Path) -> Path:
    """Write a small georeferenced GeoTIFF to act as a DEM."""
    rasterio = pytest.importorskip("rasterio")
    from rasterio.transform import from_origin

    path = workdir / "terrain.tif"
    data = np.linspace(100.0, 200.0, 16 * 16, dtype=np.float32).reshape(16, 16)
    with rasterio.open(
        path, "w", driver="GTiff", height=16, width=16, count=1,
        dtype="float32", crs="EPSG:32611", transform=from_origin(500000.0, 4000000.0, 30.0, 30.0),
    ) as dst:
        dst.write(data, 1)
    return path


@pytest.fixture
def plain_tiff(workdir: Path) -> Path:
    """Write a GeoTIFF-format image that carries no georeference."""
    rasterio = pytest.importorskip("rasterio")

    path = workdir / "plain.tif"
    data = np.zeros((8, 8), dtype=np.uint8)
    with rasterio.open(
        path, "w", driver="GTiff", height=8, width=8, count=1, dtype="uint8",
    ) as dst:
        dst.write(data, 1)
    return path
