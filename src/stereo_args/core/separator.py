"""Split a flat list of positional paths into images and cameras.

There are N images and possibly N cameras. The supported layouts are:
1. img1.cub ... imgN.cub                       (ISIS, non-projected)
2. img1.tif ... imgN.tif img1.cub ... imgN.cub (ISIS, projected images)
3. img1.tif ... imgN.tif                       (RPC embedded in the images)
4. img1.tif ... imgN.tif cam1 ... camN         (everything else)

Cameras may share an extension with images (.cub), so the split in case
2 and 4 is made by count: the first half are images, the second half
cameras.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .contracts import ClassifiedInputs
from .exceptions import UsageError
from .paths import get_extension, has_cam_extension, has_image_extension

logger = logging.getLogger(__name__)


def _images_first(inputs: Sequence[str]) -> list[str]:
    """Stable reorder: images, then everything else. Undoes interleaving."""
    images = [p for p in inputs if has_image_extension(p)]
    others = [p for p in inputs if not has_image_extension(p)]
    return images + others


def separate_images_from_cameras(
    inputs: Sequence[str],
    ensure_equal_sizes: bool = False,
) -> ClassifiedInputs:
    """Put images and cameras from ``inputs`` into separate lists.

    With ``ensure_equal_sizes`` the camera list is padded with empty
    strings up to the number of images.
    """
    ordered = _images_first(inputs)

    has_cub = any(get_extension(p) == ".cub" for p in ordered)
    has_nocub = any(get_extension(p) != ".cub" for p in ordered)
    has_cam = any(has_cam_extension(p) for p in ordered)

    if (has_cub and not has_nocub) or not has_cam:
        # Only cubes, or no camera files at all: cases 1 and 3
        logger.debug(f"Treating all {len(ordered)} inputs as images")
        images, cameras = ordered, []
    else:
        if len(ordered) % 2 != 0:
            raise UsageError("Expecting as many images as cameras.\n")
        half = len(ordered) // 2
        images, cameras = ordered[:half], ordered[half:]
        logger.debug(f"Pairing {half} images with {half} cameras")

    for image in images:
        if not has_image_extension(image):
            raise UsageError(f"Expecting an image, got: {image}.\n")

    for camera in cameras:
        if not has_cam_extension(camera):
            raise UsageError(f"Expecting a camera, got: {camera}.\n")

    if cameras and len(images) != len(cameras):
        raise UsageError("Expecting the number of images and cameras to agree.\n")

    if ensure_equal_sizes:
        cameras = cameras + [""] * (len(images) - len(cameras))

    return ClassifiedInputs(images=images, cameras=cameras)
