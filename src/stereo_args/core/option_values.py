"""Fixed-arity numeric option values: points and boxes.

A value may be spread over several command-line tokens and may use
commas, spaces or both as separators, so ``"1,2"``, ``"1 2"`` and
``["1", "2"]`` all give the same point. Each kind is described by a
``ValueKind`` entry in ``VALUE_KINDS``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from .contracts import Box2F, Box2I, Box3F, Point2F, Point2I, Point3F, StructuredValue
from .exceptions import InvalidValue, MissingParameter, ParseError

_SEPARATORS = re.compile(r"[,\s]+")
_INTEGER = re.compile(r"[+-]?\d+")

Number = int | float


def _to_int(token: str) -> int:
    if not _INTEGER.fullmatch(token):
        raise ValueError(token)
    return int(token)


def _to_float(token: str) -> float:
    if "_" in token:
        raise ValueError(token)
    return float(token)


ELEMENT_PARSERS: dict[type, Callable[[str], Number]] = {int: _to_int, float: _to_float}


def split_values(raw_tokens: Sequence[str]) -> list[str]:
    """Join the raw tokens with a space, then split on runs of commas and whitespace."""
    return _SEPARATORS.split(" ".join(raw_tokens))


def parse_fixed_arity(raw_tokens: Sequence[str], arity: int, element: type = int) -> list[Number]:
    """Parse exactly ``arity`` numbers of type ``element`` from ``raw_tokens``."""
    values = split_values(raw_tokens)
    if len(values) != arity:
        raise MissingParameter(
            f"Expecting {arity} values, got {len(values)}: {' '.join(raw_tokens)}"
        )

    to_number = ELEMENT_PARSERS[element]
    try:
        return [to_number(v) for v in values]
    except ValueError:
        raise InvalidValue(
            f"Invalid {element.__name__} value in: {' '.join(raw_tokens)}"
        ) from None


@dataclass(frozen=True)
class ValueKind:
    name: str
    arity: int
    element: type
    build: Callable[[list[Number]], StructuredValue]


VALUE_KINDS: dict[str, ValueKind] = {
    "point2i": ValueKind("point2i", 2, int, lambda v: Point2I(x=v[0], y=v[1])),
    "point2f": ValueKind("point2f", 2, float, lambda v: Point2F(x=v[0], y=v[1])),
    "box2i": ValueKind(
        "box2i", 4, int,
        lambda v: Box2I(min=Point2I(x=v[0], y=v[1]), max=Point2I(x=v[2], y=v[3])),
    ),
    "box2f": ValueKind(
        "box2f", 4, float,
        lambda v: Box2F(min=Point2F(x=v[0], y=v[1]), max=Point2F(x=v[2], y=v[3])),
    ),
    "box3f": ValueKind(
        "box3f", 6, float,
        lambda v: Box3F(min=Point3F(x=v[0], y=v[1], z=v[2]), max=Point3F(x=v[3], y=v[4], z=v[5])),
    ),
}


def parse_structured_value(raw_tokens: Sequence[str], kind: str) -> StructuredValue:
    """Parse one option occurrence into the point or box named by ``kind``."""
    try:
        value_kind = VALUE_KINDS[kind]
    except KeyError:
        raise ParseError(f"Unknown value kind: {kind}") from None
    values = parse_fixed_arity(raw_tokens, value_kind.arity, value_kind.element)
    return value_kind.build(values)
