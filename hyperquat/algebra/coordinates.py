"""
Curvilinear coordinates.

Each signature has its own radius/angle parameterization:

- Elliptic: nested spherical coordinates (r, θ1, θ2, θ3) with r = √Q.
- Split: the paired layout z0 = a + bi, z1 = c + di is written as
      Q > 0:  z0 = r cosh ξ e^{iθ1},  z1 = r sinh ξ e^{iθ2}
      Q < 0:  z0 = r sinh ξ e^{iθ1},  z1 = r cosh ξ e^{iθ2}
      Q = 0:  z0 = r e^{iθ1},         z1 = r e^{iθ2}
- Hyperbolic: with n(θ1, θ2) = (cos θ1, sin θ1 cos θ2, sin θ1 sin θ2),
      Q > 0:  a = r cosh ξ,  (b, c, d) = r sinh ξ n
      Q < 0:  a = r sinh ξ,  (b, c, d) = r cosh ξ n
      Q = 0:  a = r,         (b, c, d) = r n

The indefinite charts carry a sign (+1, -1, 0) naming the branch. On the
null cone ξ is undefined and returned as NaN; at the origin of the elliptic
chart all angles are NaN. NaN outputs mean "angle undefined", not failure.

In the hyperbolic chart r takes the sign of the scalar part a, so ξ >= 0 and
the whole space is covered. The round trip curvilinear(rect(...)) recovers
its inputs for r != 0 (r > 0 for the elliptic and split charts), ξ > 0,
θ1 in (0, π) and θ2 in (-π, π].
"""

from typing import NamedTuple, Optional, Union
import math
import torch

from ..core.constants import (
    DEFAULT_DTYPE,
    DEFAULT_EPS,
    SIGNATURE_ELLIPTIC,
    SIGNATURE_SPLIT,
    SIGNATURE_HYPERBOLIC,
)
from ..core.types import ScalarLike, SignLike
from .signature import ELLIPTIC, HYPERBOLIC, SPLIT, Signature, get_signature
from .value import Quaternion, zero


class SphericalCoordinates(NamedTuple):
    """Elliptic chart: radius and three nested angles."""
    r: torch.Tensor
    theta1: torch.Tensor
    theta2: torch.Tensor
    theta3: torch.Tensor


class HyperbolicCoordinates(NamedTuple):
    """Split/hyperbolic chart: radius, rapidity, two angles and branch sign."""
    r: torch.Tensor
    xi: torch.Tensor
    theta1: torch.Tensor
    theta2: torch.Tensor
    sign: torch.Tensor


def _as_tensors(*values, dtype: torch.dtype, device: Optional[torch.device]):
    tensors = [torch.as_tensor(v, dtype=dtype, device=device) for v in values]
    return torch.broadcast_tensors(*tensors)


def _branches(quad: torch.Tensor, eps: float):
    null = quad.abs() <= eps
    return (quad > 0) & ~null, (quad < 0) & ~null, null


def _branch_sign(positive: torch.Tensor, negative: torch.Tensor) -> torch.Tensor:
    sign = torch.zeros(positive.shape, dtype=torch.long, device=positive.device)
    sign = torch.where(positive, torch.ones_like(sign), sign)
    return torch.where(negative, -torch.ones_like(sign), sign)


# =============================================================================
# Rectangular -> curvilinear
# =============================================================================

def curvilinear(z: Quaternion, eps: float = DEFAULT_EPS):
    """
    Curvilinear coordinates of a value.

    Returns:
        SphericalCoordinates for the elliptic signature,
        HyperbolicCoordinates for the split and hyperbolic signatures
    """
    name = z.signature.name
    if name == SIGNATURE_ELLIPTIC:
        return _curvilinear_elliptic(z, eps)
    if name == SIGNATURE_SPLIT:
        return _curvilinear_split(z, eps)
    if name == SIGNATURE_HYPERBOLIC:
        return _curvilinear_hyperbolic(z, eps)
    raise ValueError(f"No curvilinear chart for signature {name}")


def _curvilinear_elliptic(z: Quaternion, eps: float) -> SphericalCoordinates:
    a, b, c, d = z.components
    h = torch.hypot(c, d)
    r = torch.sqrt(z.quadrance())
    theta1 = torch.atan2(torch.hypot(b, h), a)
    theta2 = torch.atan2(h, b)
    theta3 = torch.atan2(d, c)

    origin = z.equals(zero(z.signature, z.dtype, z.device), eps)
    nan = torch.full_like(r, math.nan)
    return SphericalCoordinates(
        r=torch.where(origin, torch.zeros_like(r), r),
        theta1=torch.where(origin, nan, theta1),
        theta2=torch.where(origin, nan, theta2),
        theta3=torch.where(origin, nan, theta3),
    )


def _curvilinear_split(z: Quaternion, eps: float) -> HyperbolicCoordinates:
    a, b, c, d = z.components
    m0 = torch.hypot(a, b)
    m1 = torch.hypot(c, d)
    theta1 = torch.atan2(b, a)
    theta2 = torch.atan2(d, c)

    quad = z.quadrance()
    positive, negative, null = _branches(quad, eps)
    r = torch.where(null, m0, torch.sqrt(quad.abs()))
    nan = torch.full_like(quad, math.nan)
    xi = torch.where(positive, torch.atanh(m1 / m0), nan)
    xi = torch.where(negative, torch.atanh(m0 / m1), xi)
    return HyperbolicCoordinates(r, xi, theta1, theta2, _branch_sign(positive, negative))


def _curvilinear_hyperbolic(z: Quaternion, eps: float) -> HyperbolicCoordinates:
    a, b, c, d = z.components
    # r carries the sign of a; the angles describe the spatial part divided by that sign
    s = torch.where(a < 0, -torch.ones_like(a), torch.ones_like(a))
    b, c, d = s * b, s * c, s * d
    h = torch.hypot(c, d)
    rho = torch.hypot(b, h)
    theta1 = torch.atan2(h, b)
    theta2 = torch.atan2(d, c)

    quad = z.quadrance()
    positive, negative, null = _branches(quad, eps)
    r = torch.where(null, a, s * torch.sqrt(quad.abs()))
    nan = torch.full_like(quad, math.nan)
    xi = torch.where(positive, torch.atanh(rho / a.abs()), nan)
    xi = torch.where(negative, torch.atanh(a.abs() / rho), xi)
    return HyperbolicCoordinates(r, xi, theta1, theta2, _branch_sign(positive, negative))


# =============================================================================
# Curvilinear -> rectangular
# =============================================================================

def rect_elliptic(
    r: ScalarLike,
    theta1: ScalarLike,
    theta2: ScalarLike,
    theta3: ScalarLike,
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
    eps: float = DEFAULT_EPS,
) -> Quaternion:
    """
    Elliptic value from spherical coordinates.

    A radius within tolerance of zero gives the zero value whatever the
    angles are.
    """
    r, theta1, theta2, theta3 = _as_tensors(r, theta1, theta2, theta3, dtype=dtype, device=device)
    s1 = r * torch.sin(theta1)
    s2 = s1 * torch.sin(theta2)
    components = torch.stack([
        r * torch.cos(theta1),
        s1 * torch.cos(theta2),
        s2 * torch.cos(theta3),
        s2 * torch.sin(theta3),
    ], dim=-1)
    origin = (r.abs() <= eps).unsqueeze(-1)
    components = torch.where(origin, torch.zeros_like(components), components)
    return Quaternion(components, ELLIPTIC)


def _radial_pair(r, xi, sign):
    """(first, second) radial factors for the three indefinite branches."""
    cosh, sinh = r * torch.cosh(xi), r * torch.sinh(xi)
    first = torch.where(sign > 0, cosh, torch.where(sign < 0, sinh, r))
    second = torch.where(sign > 0, sinh, torch.where(sign < 0, cosh, r))
    return first, second


def rect_split(
    r: ScalarLike,
    xi: ScalarLike,
    theta1: ScalarLike,
    theta2: ScalarLike,
    sign: SignLike,
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """
    Split value from curvilinear coordinates and quadrance sign.

    On the null-cone branch (sign == 0) ξ is ignored.
    """
    r, xi, theta1, theta2, sign = _as_tensors(r, xi, theta1, theta2, sign, dtype=dtype, device=device)
    # ξ is NaN on the null cone and must not leak into the selected branch
    xi = torch.where(sign == 0, torch.zeros_like(xi), xi)
    m0, m1 = _radial_pair(r, xi, sign)
    components = torch.stack([
        m0 * torch.cos(theta1),
        m0 * torch.sin(theta1),
        m1 * torch.cos(theta2),
        m1 * torch.sin(theta2),
    ], dim=-1)
    return Quaternion(components, SPLIT)


def rect_hyperbolic(
    r: ScalarLike,
    xi: ScalarLike,
    theta1: ScalarLike,
    theta2: ScalarLike,
    sign: SignLike,
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """
    Hyperbolic value from curvilinear coordinates and quadrance sign.

    On the null-cone branch (sign == 0) ξ is ignored. A negative r gives a
    negative scalar part.
    """
    r, xi, theta1, theta2, sign = _as_tensors(r, xi, theta1, theta2, sign, dtype=dtype, device=device)
    xi = torch.where(sign == 0, torch.zeros_like(xi), xi)
    scalar, radial = _radial_pair(r, xi, sign)
    s1 = radial * torch.sin(theta1)
    components = torch.stack([
        scalar,
        radial * torch.cos(theta1),
        s1 * torch.cos(theta2),
        s1 * torch.sin(theta2),
    ], dim=-1)
    return Quaternion(components, HYPERBOLIC)


def from_curvilinear(signature: Union[Signature, str], *coords, **kwargs) -> Quaternion:
    """
    Dispatch to the rect_* constructor of a signature.

    Args:
        signature: Target signature
        *coords: (r, θ1, θ2, θ3) for elliptic, (r, ξ, θ1, θ2, sign) otherwise
        **kwargs: dtype/device forwarded to the constructor
    """
    signature = get_signature(signature)
    if signature.name == SIGNATURE_ELLIPTIC:
        return rect_elliptic(*coords, **kwargs)
    if signature.name == SIGNATURE_SPLIT:
        return rect_split(*coords, **kwargs)
    return rect_hyperbolic(*coords, **kwargs)
