"""Check whether a path is a readable georeferenced raster."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import rasterio
from rasterio.errors import NotGeoreferencedWarning, RasterioError

from .contracts import GeoHeader

logger = logging.getLogger(__name__)


def try_load_georeference(path: str) -> GeoHeader | None:
    """Read the georeference of ``path`` without loading any pixels.

    Returns None when the file cannot be opened as a raster or carries
    no coordinate reference system. The dataset is always closed before
    returning.
    """
    if not path or not Path(path).is_file():
        return None
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NotGeoreferencedWarning)
            with rasterio.open(path) as ds:
                if ds.crs is None:
                    logger.debug(f"{path} is a raster without a georeference")
                    return None
                return GeoHeader(
                    path=path,
                    crs=ds.crs.to_string(),
                    transform=tuple(ds.transform)[:6],
                    width=ds.width,
                    height=ds.height,
                )
    except RasterioError as e:
        logger.debug(f"{path} did not load as a raster: {e}")
        return None
