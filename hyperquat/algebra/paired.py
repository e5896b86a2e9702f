"""
Paired complex layout of an algebra value.

The value a + b·e1 + c·e2 + d·e3 is viewed as two complex numbers

    z0 = a + b i,    z1 = c + d i

For the Cayley-Dickson signatures the product has the closed form

    (x0, x1) * (y0, y1) = (x0 y0 + s conj(y1) x1,  x0 y1 + x1 conj(y0))

with s = -1 for the elliptic signature and s = +1 for the split signature.
The hyperbolic signature has e1² = +1, so its first pair is not an ordinary
complex number and no such identity exists.

The four-real layout is canonical; this view exists for complex scaling and
for cross-checking the Cayley table.
"""

from typing import Union
import torch

from ..core.constants import DEFAULT_COMPLEX_DTYPE
from ..core.types import ComplexLike
from .signature import Signature, get_signature
from .value import Quaternion


def to_pairs(z: Quaternion) -> torch.Tensor:
    """
    Paired view of a value.

    Args:
        z: Value with components of shape (..., 4)

    Returns:
        Complex tensor of shape (..., 2) as [a + bi, c + di]
    """
    a, b, c, d = z.components
    return torch.stack([torch.complex(a, b), torch.complex(c, d)], dim=-1)


def from_pairs(pairs: torch.Tensor, signature: Union[Signature, str] = 'elliptic') -> Quaternion:
    """
    Build a value from its paired view.

    Args:
        pairs: Complex tensor of shape (..., 2)
        signature: Signature of the resulting value
    """
    if pairs.shape[-1] != 2:
        raise ValueError(f"Expected 2 complex components, got {pairs.shape[-1]}")
    if not pairs.is_complex():
        pairs = pairs.to(DEFAULT_COMPLEX_DTYPE)
    z0, z1 = pairs[..., 0], pairs[..., 1]
    components = torch.stack([z0.real, z0.imag, z1.real, z1.imag], dim=-1)
    return Quaternion(components, signature)


def paired_multiply(x: Quaternion, y: Quaternion) -> Quaternion:
    """
    Product computed through the paired identity.

    Agrees with hyperquat.algebra.value.multiply to tolerance.

    Raises:
        ValueError: If the signature has no Cayley-Dickson form
    """
    x._check(y)
    signature = get_signature(x.signature)
    if not signature.has_paired_form:
        raise ValueError(f"Signature {signature.name} has no paired product")

    p, q = to_pairs(x), to_pairs(y)
    x0, x1 = p[..., 0], p[..., 1]
    y0, y1 = q[..., 0], q[..., 1]

    z0 = x0 * y0 + signature.pair_sign * (y1.conj() * x1)
    z1 = x0 * y1 + x1 * y0.conj()
    return from_pairs(torch.stack([z0, z1], dim=-1), signature)


def scale_pairs(z: Quaternion, k: ComplexLike) -> Quaternion:
    """
    Multiply both halves of the paired view by a complex factor.

    A tensor factor is broadcast over the batch shape.
    """
    pairs = to_pairs(z)
    if isinstance(k, torch.Tensor):
        k = k.to(pairs.dtype).unsqueeze(-1)
    scaled = from_pairs(pairs * k, z.signature)
    return Quaternion(scaled.q.to(z.dtype), z.signature)
