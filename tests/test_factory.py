"""
Tests for the signature-bound QuaternionAlgebra factory.
"""

import math
import pytest
import torch

from hyperquat.algebra import SPLIT, QuaternionAlgebra, multiply


class TestQuaternionAlgebra:
    """Constructors and bound predicates."""

    def test_name_and_repr(self, algebra):
        assert algebra.name == algebra.signature.name
        assert algebra.name in repr(algebra)

    def test_constants(self, algebra):
        assert algebra.zero().tolist() == [0.0, 0.0, 0.0, 0.0]
        assert algebra.one().tolist() == [1.0, 0.0, 0.0, 0.0]
        assert algebra.one().signature is algebra.signature

    def test_units(self, algebra):
        e1, e2, e3 = algebra.units()
        assert e1.tolist() == [0.0, 1.0, 0.0, 0.0]
        assert e2.tolist() == [0.0, 0.0, 1.0, 0.0]
        assert e3.tolist() == [0.0, 0.0, 0.0, 1.0]

    def test_unit_squares(self, algebra):
        for e, square in zip(algebra.units(), algebra.signature.squares):
            assert multiply(e, e).equals(algebra.new(square, 0, 0, 0))

    def test_random_shape(self, algebra, generator):
        z = algebra.random(3, 7, generator=generator)
        assert z.shape == torch.Size([3, 7])
        assert z.q.shape == torch.Size([3, 7, 4])
        assert z.dtype == torch.float64

    def test_random_is_reproducible(self, algebra):
        a = algebra.random(5, generator=torch.Generator().manual_seed(7))
        b = algebra.random(5, generator=torch.Generator().manual_seed(7))
        assert torch.equal(a.q, b.q)

    def test_inf_and_nan(self, algebra):
        assert algebra.inf().is_inf()
        assert algebra.inf(-1, 1, 1, 1).tolist()[0] == -math.inf
        assert algebra.nan().is_nan()

    def test_rect(self, algebra):
        if algebra.signature.is_definite:
            z = algebra.rect(2.0, 0.0, 0.0, 0.0)
            assert z.equals(algebra.new(2, 0, 0, 0))
        else:
            z = algebra.rect(2.0, 0.0, 0.0, 0.0, 1)
            assert z.equals(algebra.new(2, 0, 0, 0))

    def test_dtype_propagates(self):
        algebra = QuaternionAlgebra('split', dtype=torch.float32)
        assert algebra.new(1, 2, 3, 4).dtype == torch.float32
        assert algebra.units()[0].dtype == torch.float32
        assert algebra.random(2).dtype == torch.float32


class TestBoundPredicates:
    """equals/is_nilpotent use the algebra's tolerance and depth."""

    def test_equals_uses_algebra_eps(self):
        loose = QuaternionAlgebra('elliptic', eps=1e-3)
        assert loose.equals(loose.new(1, 2, 3, 4), loose.new(1.0005, 2, 3, 4))
        strict = QuaternionAlgebra('elliptic')
        assert not strict.equals(strict.new(1, 2, 3, 4), strict.new(1.0005, 2, 3, 4))

    def test_nilpotent_default_depth(self, split):
        z = split.new(0, 1, 1, 0)
        assert split.is_nilpotent(z)
        assert not split.is_nilpotent(split.one())

    def test_nilpotent_depth_from_constructor(self):
        shallow = QuaternionAlgebra(SPLIT, max_nilpotent_power=1)
        assert not shallow.is_nilpotent(shallow.new(0, 1, 1, 0))
        assert shallow.is_nilpotent(shallow.new(0, 1, 1, 0), 2)

    def test_explicit_depth_overrides_default(self, split):
        assert not split.is_nilpotent(split.new(0, 1, 1, 0), 1)

    @pytest.mark.slow
    def test_random_values_are_not_nilpotent(self, algebra, generator):
        z = algebra.random(256, generator=generator)
        keep = z.quadrance().abs() > 0.5
        assert not torch.any(algebra.is_nilpotent(z, 16)[keep])
