"""Parse the positional arguments shared by the multiview tools.

The format is::

    <N image paths> [N camera model paths] <output prefix> [input DEM path]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from .contracts import GeoHeader, ParsedPositionalArgs
from .exceptions import PathValidationError, UsageError
from .georef import try_load_georeference
from .paths import has_cam_extension, has_image_extension
from .separator import separate_images_from_cameras

logger = logging.getLogger(__name__)

GeoLoader = Callable[[str], GeoHeader | None]


def parse_multiview_cmd_files(
    tokens: Sequence[str],
    load_georef: GeoLoader = try_load_georeference,
) -> ParsedPositionalArgs:
    """Recover images, cameras, output prefix and DEM from ``tokens``.

    ``load_georef`` decides whether the last token is a georeferenced raster;
    if so it is taken as the DEM and removed before anything else.
    """
    files = list(tokens)

    dem_path = ""
    if files and load_georef(files[-1]) is not None:
        dem_path = files.pop()
        logger.debug(f"Using {dem_path} as the input DEM")

    if len(files) < 3:
        raise UsageError("Expecting at least three inputs to stereo.\n")

    # The DEM, if any, was already popped off the back
    prefix = files.pop()
    if not prefix or has_image_extension(prefix) or has_cam_extension(prefix):
        raise UsageError(f"Invalid output prefix: {prefix}.\n")

    inputs = separate_images_from_cameras(files, ensure_equal_sizes=False)

    if Path(prefix).exists():
        logger.warning(
            f"It appears that the output prefix exists as a file: {prefix}. "
            "Perhaps this was not intended.\n"
        )

    # Catch missing files here rather than when a reader first opens them
    for image in inputs.images:
        if not Path(image).exists():
            raise PathValidationError(f"Cannot find the image file: {image}.\n")
    for camera in inputs.cameras:
        if not Path(camera).exists():
            raise PathValidationError(f"Cannot find the camera file: {camera}.\n")

    return ParsedPositionalArgs(
        images=inputs.images,
        cameras=inputs.cameras,
        prefix=prefix,
        dem_path=dem_path,
    )
