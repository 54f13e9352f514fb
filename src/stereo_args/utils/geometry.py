"""Planet-scale numeric helpers."""

from __future__ import annotations

import numpy as np

from stereo_args.core.exceptions import ArgumentError


def get_rounding_error(shift: list[float] | np.ndarray, rounding_error: float = 0.0) -> float:
    """Rounding error for points near ``shift`` on a planet's surface.

    Unless the user set one, this is an inverse power of two: 1/2^10 for
    Earth and proportionally less for smaller bodies.
    """
    if rounding_error > 0.0:
        return rounding_error

    length = float(np.linalg.norm(np.asarray(shift, dtype=float)))
    if length <= 0:
        raise ArgumentError("Expecting positive length in get_rounding_error().")
    return float(2.0 ** np.round(np.log2(1.5e-10 * length)))
