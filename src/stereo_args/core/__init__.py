"""stereo-args core: path categories, positional parsing, structured option values."""

from .contracts import (
    Box2F,
    Box2I,
    Box3F,
    Category,
    ClassifiedInputs,
    GeoHeader,
    ParsedPositionalArgs,
    Point2F,
    Point2I,
    Point3F,
)
from .exceptions import (
    ArgumentError,
    InvalidValue,
    MissingParameter,
    ParseError,
    PathValidationError,
    UsageError,
)
from .paths import classify
from .separator import separate_images_from_cameras
from .positional import parse_multiview_cmd_files
from .georef import try_load_georeference
from .option_values import VALUE_KINDS, parse_fixed_arity, parse_structured_value
from .logging import setup_logging

__all__ = [
    "Box2F",
    "Box2I",
    "Box3F",
    "Category",
    "ClassifiedInputs",
    "GeoHeader",
    "ParsedPositionalArgs",
    "Point2F",
    "Point2I",
    "Point3F",
    "ArgumentError",
    "InvalidValue",
    "MissingParameter",
    "ParseError",
    "PathValidationError",
    "UsageError",
    "classify",
    "separate_images_from_cameras",
    "parse_multiview_cmd_files",
    "try_load_georeference",
    "VALUE_KINDS",
    "parse_fixed_arity",
    "parse_structured_value",
    "setup_logging",
]
