"""
Quadratic form and divisibility.

The quadrance Q(z) is the scalar part of z * conj(z):

    Q(a + b e1 + c e2 + d e3) = a² - q1 b² - q2 c² - q3 d²

where q1, q2, q3 are the unit squares of the signature. It is a sum of
squares for the elliptic signature and indefinite for the split and
hyperbolic ones, whose zero set (the null cone) consists of zero divisors.

Division is x * conj(y) / Q(y). It fails with DegenerateDivisionError when
the divisor has no inverse: the zero value for the elliptic signature, any
null-cone value for the others.
"""

import logging
import torch

from ..core.constants import DEFAULT_EPS
from ..core.errors import DegenerateDivisionError
from .value import Quaternion, multiply, one, zero

logger = logging.getLogger(__name__)


def quadrance(z: Quaternion) -> torch.Tensor:
    """
    Compute Q(z) = ⟨z conj(z)⟩₀.

    Returns:
        Tensor of the batch shape
    """
    return multiply(z, z.conjugate()).scalar()


def is_zero_divisor(z: Quaternion, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """True where the quadrance is zero within tolerance."""
    return quadrance(z).abs() <= eps


def _is_degenerate(z: Quaternion, eps: float) -> torch.Tensor:
    if z.signature.is_definite:
        return z.equals(zero(z.signature, z.dtype, z.device), eps)
    return is_zero_divisor(z, eps)


def inverse(x: Quaternion, eps: float = DEFAULT_EPS) -> Quaternion:
    """
    Multiplicative inverse: x^{-1} = conj(x) / Q(x)

    Raises:
        DegenerateDivisionError: If x (or any element of a batch) is a zero
            divisor
    """
    if bool(_is_degenerate(x, eps).any()):
        logger.debug(f"Inverse of zero divisor in {x.signature.name} algebra")
        raise DegenerateDivisionError("inverse of zero divisor")
    return x.conjugate() / quadrance(x)


def quotient(x: Quaternion, y: Quaternion, eps: float = DEFAULT_EPS) -> Quaternion:
    """
    Quotient: x / y = x * conj(y) / Q(y)

    Raises:
        DegenerateDivisionError: If y (or any element of a batch) is a zero
            divisor
    """
    x._check(y)
    if bool(_is_degenerate(y, eps).any()):
        logger.debug(f"Division by zero divisor in {y.signature.name} algebra")
        raise DegenerateDivisionError("denominator is zero divisor")
    return multiply(x, y.conjugate()) / quadrance(y)


def is_idempotent(z: Quaternion, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """True where z equals z * z."""
    return z.equals(multiply(z, z), eps)


def is_nilpotent(z: Quaternion, n: int, eps: float = DEFAULT_EPS) -> torch.Tensor:
    """
    Bounded nilpotence search.

    True where z is zero, or where one of z, z², ..., zⁿ vanishes within
    tolerance. No closed-form test is attempted; callers choose n.

    Args:
        z: Value to test
        n: Highest power examined
        eps: Equality tolerance
    """
    if n < 0:
        raise ValueError(f"Nilpotent search depth must be non-negative, got {n}")
    null = zero(z.signature, z.dtype, z.device)
    result = z.equals(null, eps)
    power = one(z.signature, z.dtype, z.device)
    for _ in range(n):
        if bool(result.all()):
            break
        power = multiply(power, z)
        result = result | power.equals(null, eps)
    return result
