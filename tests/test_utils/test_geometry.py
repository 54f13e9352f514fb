"""Tests for the rounding error helper."""

import numpy as np
import pytest

from stereo_args.core.exceptions import ArgumentError
from stereo_args.utils.geometry import get_rounding_error


class TestRoundingError:
    def test_user_value_kept(self):
        """An explicit rounding error is returned as given."""
        assert get_rounding_error([1.0, 0.0, 0.0], 0.25) == 0.25

    def test_earth(self):
        """An Earth-sized shift gives 2^-10."""
        shift = np.array([6378137.0, 0.0, 0.0])
        assert get_rounding_error(shift) == 2.0 ** -10

    def test_smaller_body(self):
        """A smaller body gives a smaller power of two."""
        moon = get_rounding_error([1737400.0, 0.0, 0.0])
        assert moon < 2.0 ** -10
        assert np.log2(moon) == np.round(np.log2(moon))

    def test_zero_shift(self):
        """A zero shift is rejected."""
        with pytest.raises(ArgumentError, match="positive length"):
            get_rounding_error([0.0, 0.0, 0.0])
