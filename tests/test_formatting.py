"""
Tests for text rendering of values.
"""

import math
import torch

from hyperquat.algebra import HYPERBOLIC, SPLIT, inf, nan, new, zero
from hyperquat.utils import format_quaternion


class TestFormatQuaternion:
    """Display strings use the unit symbols of the signature."""

    def test_elliptic(self):
        assert str(new(1, 2, 3, 4)) == "(1+2i+3j+4k)"

    def test_symbols_per_signature(self):
        assert str(new(1, 2, 3, 4, SPLIT)) == "(1+2i+3t+4u)"
        assert str(new(1, 2, 3, 4, HYPERBOLIC)) == "(1+2s+3t+4u)"

    def test_negative_components(self):
        assert format_quaternion(new(-1, -2, -3, -4)) == "(-1-2i-3j-4k)"

    def test_fractional_and_small_numbers(self):
        assert str(new(1.5, 1e-10, 0.25, 100)) == "(1.5+1e-10i+0.25j+100k)"

    def test_signed_zero(self):
        assert str(new(1, -2, 0, -0.0)) == "(1-2i+0j-0k)"
        assert str(-zero()) == "(-0-0i-0j-0k)"

    def test_infinities(self):
        assert str(inf(-1, 0, 0, 0, signature=SPLIT)) == "(-Inf+Infi+Inft+Infu)"
        assert str(inf(1, -1, 1, -1)) == "(+Inf-Infi+Infj-Infk)"

    def test_positive_infinity_is_signed_in_every_slot(self):
        assert str(inf()) == "(+Inf+Infi+Infj+Infk)"
        assert str(new(math.inf, 1, 0, 0, HYPERBOLIC)) == "(+Inf+1s+0t+0u)"

    def test_nan(self):
        assert str(nan(HYPERBOLIC)) == "(NaN+NaNs+NaNt+NaNu)"
        assert str(new(1, math.nan, 0, 0)) == "(1+NaNi+0j+0k)"

    def test_batched(self):
        z = new(torch.tensor([1.0, 2.0]), 0, 0, 0)
        assert format_quaternion(z) == "[(1+0i+0j+0k), (2+0i+0j+0k)]"

    def test_batched_2d_is_flattened(self):
        z = new(torch.ones(2, 2), 0, 0, 0, SPLIT)
        assert format_quaternion(z).count("(1+0i+0t+0u)") == 4
