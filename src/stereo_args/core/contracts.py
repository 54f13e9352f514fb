"""Common Pydantic models shared by the argument parsers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Category of a path, derived from its textual suffix."""

    IMAGE = "image"
    CAMERA = "camera"
    SHAPEFILE = "shapefile"
    UNKNOWN = "unknown"


class ClassifiedInputs(BaseModel):
    """Images and cameras recovered from a flat list of positional paths."""

    images: list[str] = Field(default_factory=list)
    cameras: list[str] = Field(default_factory=list)


class ParsedPositionalArgs(BaseModel):
    """Result of parsing ``<images> [<cameras>] <prefix> [<dem>]``."""

    images: list[str] = Field(default_factory=list)
    cameras: list[str] = Field(default_factory=list)
    prefix: str = Field(..., min_length=1, description="Output prefix")
    dem_path: str = Field("", description="Terrain model path, empty when not supplied")


class GeoHeader(BaseModel):
    """Header of a raster that loaded with a georeference."""

    model_config = ConfigDict(frozen=True)

    path: str
    crs: str
    transform: tuple[float, float, float, float, float, float]
    width: int
    height: int


# ── Structured option values ─────────────────────────────────────────

class Point2I(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class Point2F(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class Point3F(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


class Box2I(BaseModel):
    """Integer box. ``min`` and ``max`` are the corners as given, not sorted."""

    model_config = ConfigDict(frozen=True)

    min: Point2I
    max: Point2I


class Box2F(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: Point2F
    max: Point2F


class Box3F(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: Point3F
    max: Point3F


StructuredValue = Point2I | Point2F | Box2I | Box2F | Box3F
