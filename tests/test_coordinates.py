"""
Tests for curvilinear coordinates.

The three charts (positive quadrance, negative quadrance, null cone) of the
split and hyperbolic signatures, and the spherical chart of the elliptic
signature, must be exact inverses of the rect_* constructors.
"""

import math
import pytest
import torch

from hyperquat.algebra import (
    ELLIPTIC,
    SPLIT,
    HYPERBOLIC,
    HyperbolicCoordinates,
    Quaternion,
    SphericalCoordinates,
    curvilinear,
    from_curvilinear,
    new,
    rect_elliptic,
    rect_hyperbolic,
    rect_split,
    zero,
)


def _assert_close(actual, expected, atol=1e-8):
    assert torch.allclose(
        torch.as_tensor(actual, dtype=torch.float64),
        torch.as_tensor(expected, dtype=torch.float64),
        atol=atol,
    ), f"{actual} != {expected}"


# =============================================================================
# Elliptic Chart
# =============================================================================

class TestEllipticCoordinates:
    """Spherical coordinates (r, θ1, θ2, θ3)."""

    def test_returns_spherical_coordinates(self):
        coords = curvilinear(new(1, 2, 3, 4))
        assert isinstance(coords, SphericalCoordinates)

    def test_radius_is_root_quadrance(self):
        coords = new(1, 2, 3, 4).curvilinear()
        _assert_close(coords.r, math.sqrt(30))

    @pytest.mark.parametrize("r,t1,t2,t3", [
        (2.0, 0.7, 1.1, -2.0),
        (0.5, 2.9, 0.2, 3.0),
        (10.0, 1.5707963, 1.5707963, 0.0),
    ])
    def test_round_trip(self, r, t1, t2, t3):
        coords = curvilinear(rect_elliptic(r, t1, t2, t3))
        _assert_close(coords.r, r)
        _assert_close(coords.theta1, t1)
        _assert_close(coords.theta2, t2)
        _assert_close(coords.theta3, t3)

    def test_rect_of_curvilinear(self, elliptic, generator):
        z = elliptic.random(32, generator=generator)
        back = rect_elliptic(*curvilinear(z))
        assert torch.all(back.equals(z))

    def test_unit_values(self):
        coords = curvilinear(new(0, 0, 0, 1))
        _assert_close(coords.r, 1.0)
        _assert_close(coords.theta1, math.pi / 2)
        _assert_close(coords.theta2, math.pi / 2)
        _assert_close(coords.theta3, math.pi / 2)

    def test_origin_has_undefined_angles(self):
        coords = curvilinear(zero(ELLIPTIC))
        assert coords.r.item() == 0.0
        assert math.isnan(coords.theta1.item())
        assert math.isnan(coords.theta2.item())
        assert math.isnan(coords.theta3.item())

    def test_zero_radius_gives_zero(self):
        assert rect_elliptic(0.0, math.nan, math.nan, math.nan).equals(zero(ELLIPTIC))
        assert rect_elliptic(1e-12, 0.3, 0.2, 0.1).tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_batched(self):
        r = torch.tensor([1.0, 2.0, 3.0])
        z = rect_elliptic(r, 0.4, 0.5, 0.6)
        assert z.shape == torch.Size([3])
        _assert_close(curvilinear(z).r, r)


# =============================================================================
# Split Chart
# =============================================================================

class TestSplitCoordinates:
    """Paired-layout chart (r, ξ, θ1, θ2, sign)."""

    def test_returns_hyperbolic_coordinates(self):
        coords = curvilinear(new(2, 0, 1, 0, SPLIT))
        assert isinstance(coords, HyperbolicCoordinates)

    @pytest.mark.parametrize("r,xi,t1,t2,sign", [
        (1.5, 0.4, 0.3, -1.2, 1),
        (0.8, 0.9, 2.0, 0.5, -1),
        (3.0, 2.5, -2.5, 3.1, 1),
    ])
    def test_round_trip(self, r, xi, t1, t2, sign):
        coords = curvilinear(rect_split(r, xi, t1, t2, sign))
        _assert_close(coords.r, r)
        _assert_close(coords.xi, xi)
        _assert_close(coords.theta1, t1)
        _assert_close(coords.theta2, t2)
        assert coords.sign.item() == sign

    def test_null_branch_round_trip(self):
        z = rect_split(1.3, math.nan, 0.2, -0.4, 0)
        assert z.is_zero_divisor()
        coords = curvilinear(z)
        assert coords.sign.item() == 0
        assert math.isnan(coords.xi.item())
        _assert_close(coords.r, 1.3)
        _assert_close(coords.theta1, 0.2)
        _assert_close(coords.theta2, -0.4)

    def test_null_branch_is_polar(self):
        """With sign 0 each half is ordinary polar form."""
        z = rect_split(2.0, 0.0, math.pi / 2, 0.0, 0)
        assert z.equals(new(0, 2, 2, 0, SPLIT))

    def test_sign_follows_quadrance(self):
        assert curvilinear(new(2, 0, 1, 0, SPLIT)).sign.item() == 1
        assert curvilinear(new(1, 0, 2, 0, SPLIT)).sign.item() == -1
        assert curvilinear(new(1, 0, 1, 0, SPLIT)).sign.item() == 0

    def test_rect_of_curvilinear(self, split, generator):
        z = split.random(32, generator=generator)
        z = Quaternion(z.q[z.quadrance().abs() > 0.1], SPLIT)
        back = rect_split(*curvilinear(z))
        assert torch.all(back.equals(z))


# =============================================================================
# Hyperbolic Chart
# =============================================================================

class TestHyperbolicCoordinates:
    """Scalar/spatial chart (r, ξ, θ1, θ2, sign)."""

    @pytest.mark.parametrize("r,xi,t1,t2,sign", [
        (2.0, 0.5, 1.0, 0.3, 1),
        (1.0, 0.7, 2.5, -2.0, -1),
        (0.3, 1.2, 0.1, 2.9, -1),
    ])
    def test_round_trip(self, r, xi, t1, t2, sign):
        coords = curvilinear(rect_hyperbolic(r, xi, t1, t2, sign))
        _assert_close(coords.r, r)
        _assert_close(coords.xi, xi)
        _assert_close(coords.theta1, t1)
        _assert_close(coords.theta2, t2)
        assert coords.sign.item() == sign

    def test_null_branch_round_trip(self):
        z = rect_hyperbolic(1.5, math.nan, 0.6, 1.7, 0)
        assert z.is_zero_divisor()
        coords = curvilinear(z)
        assert coords.sign.item() == 0
        assert math.isnan(coords.xi.item())
        _assert_close(coords.r, 1.5)
        _assert_close(coords.theta1, 0.6)
        _assert_close(coords.theta2, 1.7)

    def test_positive_branch_components(self):
        z = rect_hyperbolic(1.0, 0.5, 0.0, 0.0, 1)
        assert z.equals(new(math.cosh(0.5), math.sinh(0.5), 0, 0, HYPERBOLIC))

    def test_negative_branch_components(self):
        z = rect_hyperbolic(1.0, 0.5, 0.0, 0.0, -1)
        assert z.equals(new(math.sinh(0.5), math.cosh(0.5), 0, 0, HYPERBOLIC))
        assert z.quadrance().item() == pytest.approx(-1.0)

    def test_rect_of_curvilinear(self, hyperbolic, generator, batch_size):
        z = hyperbolic.random(batch_size, generator=generator)
        z = Quaternion(z.q[z.quadrance().abs() > 0.1], HYPERBOLIC)
        assert torch.any(z.scalar() < 0)
        back = rect_hyperbolic(*curvilinear(z))
        assert torch.all(back.equals(z))

    @pytest.mark.parametrize("components,sign", [
        ((-2, 1, 0, 0), 1),
        ((-3, 1, -1, 2), 1),
        ((-1, 2, 0, 0), -1),
        ((-1, 0.5, 1, -2), -1),
        ((-1, 1, 0, 0), 0),
        ((-3, 1, 2, -2), 0),
    ])
    def test_negative_scalar_part(self, components, sign):
        """r takes the sign of the scalar part and ξ stays non-negative."""
        z = new(*components, signature=HYPERBOLIC)
        coords = curvilinear(z)
        assert coords.sign.item() == sign
        assert coords.r.item() < 0
        if sign != 0:
            assert coords.xi.item() > 0
        assert rect_hyperbolic(*coords).equals(z)

    def test_batched_mixed_branches(self):
        sign = torch.tensor([1, -1, 0])
        z = rect_hyperbolic(torch.tensor([1.0, 2.0, 3.0]), 0.4, 0.8, 0.2, sign)
        coords = curvilinear(z)
        assert coords.sign.tolist() == [1, -1, 0]
        _assert_close(coords.r, [1.0, 2.0, 3.0])
        _assert_close(coords.xi[:2], [0.4, 0.4])
        assert math.isnan(coords.xi[2].item())


# =============================================================================
# Dispatch
# =============================================================================

class TestFromCurvilinear:
    """from_curvilinear picks the chart of the signature."""

    def test_dispatch(self):
        assert from_curvilinear(ELLIPTIC, 1.0, 0.1, 0.2, 0.3).signature is ELLIPTIC
        assert from_curvilinear('klein', 1.0, 0.1, 0.2, 0.3, 1).signature is SPLIT
        assert from_curvilinear('macfarlane', 1.0, 0.1, 0.2, 0.3, -1).signature is HYPERBOLIC

    def test_round_trip_through_algebra(self, algebra):
        if algebra.signature is ELLIPTIC:
            coords = (1.2, 0.4, 0.9, -0.6)
        else:
            coords = (1.2, 0.4, 0.9, -0.6, 1)
        z = algebra.rect(*coords)
        assert algebra.rect(*z.curvilinear()).equals(z)
