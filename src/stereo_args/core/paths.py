"""Path categories derived from file extensions.

Category membership is an exact, case-sensitive match of the extension
(``PurePath.suffix``) against the tables below, so ``A.TIF`` is not an
image. Bulk filtering by extension (``all_files_have_extension``,
``get_files_with_ext``) is a case-insensitive ends-with check instead.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Iterable

from .contracts import Category

IMAGE_EXTENSIONS = frozenset({
    ".tif", ".tiff", ".ntf", ".png", ".jpeg", ".jpg", ".jp2",
    ".img", ".cub", ".bip", ".bil", ".bsq",
})
PINHOLE_EXTENSIONS = frozenset({
    ".cahvor", ".cahv", ".pin", ".pinhole", ".tsai", ".cmod", ".cahvore",
})
# .cub is both an image and a camera (ISIS cubes carry their own model)
CAMERA_EXTENSIONS = PINHOLE_EXTENSIONS | {".xml", ".dim", ".rpb", ".json", ".isd", ".cub"}
SHAPEFILE_EXTENSIONS = frozenset({".shp"})


def get_extension(path: str) -> str:
    """Return the extension of ``path`` including the dot, or ``""``."""
    return PurePath(path).suffix


def has_image_extension(path: str) -> bool:
    return get_extension(path) in IMAGE_EXTENSIONS


def has_pinhole_extension(path: str) -> bool:
    return get_extension(path) in PINHOLE_EXTENSIONS


def has_cam_extension(path: str) -> bool:
    """True for camera model files, including ISIS cubes."""
    return get_extension(path) in CAMERA_EXTENSIONS


def has_tif_or_ntf_extension(path: str) -> bool:
    return get_extension(path) in (".tif", ".ntf")


def has_shp_extension(path: str) -> bool:
    return get_extension(path) in SHAPEFILE_EXTENSIONS


def classify(path: str) -> Category:
    """Map a path to its category. Images win over cameras for ``.cub``."""
    if has_image_extension(path):
        return Category.IMAGE
    if has_cam_extension(path):
        return Category.CAMERA
    if has_shp_extension(path):
        return Category.SHAPEFILE
    return Category.UNKNOWN


def all_files_have_extension(files: Iterable[str], ext: str) -> bool:
    ext = ext.lower()
    return all(f.lower().endswith(ext) for f in files)


def get_files_with_ext(files: list[str], ext: str, prune_input_list: bool = False) -> list[str]:
    """Collect the files ending in ``ext`` (any case).

    With ``prune_input_list`` the matches are also removed from ``files``
    in place, leaving only the non-matching entries behind.
    """
    ext = ext.lower()
    matches = [f for f in files if f.lower().endswith(ext)]
    if prune_input_list:
        files[:] = [f for f in files if not f.lower().endswith(ext)]
    return matches
