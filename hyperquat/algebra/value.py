"""
Algebra values for the elliptic, split and hyperbolic quaternion algebras.

A value is a + b·e1 + c·e2 + d·e3 stored as a tensor of shape (..., 4),
together with the signature that fixes how e1, e2 and e3 multiply.

Component ordering:
[s, e1, e2, e3]
 0   1   2   3

Values are immutable: every operation returns a new value.
"""

from __future__ import annotations
from typing import List, Optional, Tuple, Union
import torch

from ..core.constants import DEFAULT_DTYPE, DEFAULT_EPS, NUM_COMPONENTS
from ..core.types import ComplexLike, Components, ScalarLike
from .signature import (
    CONJUGATION_SIGNS,
    IDX_S,
    VECTOR_MASK,
    Signature,
    cayley_table,
    get_signature,
)


class Quaternion:
    """
    A value of one of the 4-dimensional algebras.

    Components are stored as a tensor of shape (..., 4) where the last
    dimension contains the coefficients of [1, e1, e2, e3].

    The algebra supports:
    - Addition, subtraction, scaling and negation
    - Conjugation and the signature-dependent product
    - Commutator, associator and alternators
    - Quadrance, inverse and quotient
    - Curvilinear coordinates
    - Infinity/NaN predicates
    """

    def __init__(self, components: Components, signature: Union[Signature, str] = 'elliptic'):
        """
        Initialize a value from its components.

        Args:
            components: Tensor (or nested sequence) of shape (..., 4) with the coefficients
                        of [1, e1, e2, e3]
            signature: Signature instance or name
        """
        if not isinstance(components, torch.Tensor):
            components = torch.as_tensor(components, dtype=DEFAULT_DTYPE)
        if components.dim() == 0 or components.shape[-1] != NUM_COMPONENTS:
            got = 0 if components.dim() == 0 else components.shape[-1]
            raise ValueError(f"Expected {NUM_COMPONENTS} components, got {got}")
        self._q = components
        self.signature = get_signature(signature)

    @property
    def q(self) -> torch.Tensor:
        """Component tensor of shape (..., 4)."""
        return self._q

    @property
    def shape(self) -> torch.Size:
        """Batch shape (excluding the 4 components)."""
        return self._q.shape[:-1]

    @property
    def device(self) -> torch.device:
        return self._q.device

    @property
    def dtype(self) -> torch.dtype:
        return self._q.dtype

    @property
    def components(self) -> Tuple[torch.Tensor, torch.Tensor, torch.Tensor, torch.Tensor]:
        """The four components (a, b, c, d) in fixed order."""
        return tuple(self._q.unbind(dim=-1))

    def tolist(self) -> List:
        return self._q.tolist()

    def to(self, device: torch.device) -> 'Quaternion':
        """Move to specified device."""
        return Quaternion(self._q.to(device), self.signature)

    def clone(self) -> 'Quaternion':
        """Create a copy."""
        return Quaternion(self._q.clone(), self.signature)

    def _new(self, components: torch.Tensor) -> 'Quaternion':
        return Quaternion(components, self.signature)

    def _check(self, other: 'Quaternion') -> None:
        if other.signature != self.signature:
            raise ValueError(
                f"Signature mismatch: {self.signature.name} and {other.signature.name}"
            )

    # === Component extraction ===

    def scalar(self) -> torch.Tensor:
        """Extract scalar component."""
        return self._q[..., IDX_S]

    def vector(self) -> torch.Tensor:
        """Extract unit components: [e1, e2, e3]."""
        return self._q[..., VECTOR_MASK]

    # === Equality ===

    def equals(self, other: 'Quaternion', eps: float = DEFAULT_EPS) -> torch.Tensor:
        """
        Componentwise equality within an absolute tolerance.

        Equal infinities compare equal, NaN never does.
        """
        self._check(other)
        return torch.isclose(self._q, other._q, rtol=0.0, atol=eps).all(dim=-1)

    # === Unary operations ===

    def conjugate(self) -> 'Quaternion':
        """Negate the three unit components, keep the scalar."""
        signs = CONJUGATION_SIGNS.to(device=self.device, dtype=self.dtype)
        return self._new(self._q * signs)

    def scale(self, k: Union[ScalarLike, ComplexLike]) -> 'Quaternion':
        """
        Scale by a real or complex factor.

        A real factor (float or tensor of the batch shape) multiplies every
        component. A complex factor multiplies both halves (a + bi) and
        (c + di) of the paired layout.
        """
        if isinstance(k, complex) or (isinstance(k, torch.Tensor) and k.is_complex()):
            from .paired import scale_pairs
            return scale_pairs(self, k)
        if isinstance(k, torch.Tensor):
            return self._new(self._q * k.to(self.dtype).unsqueeze(-1))
        return self._new(self._q * k)

    def __neg__(self) -> 'Quaternion':
        """Negation."""
        return self.scale(-1)

    # === Binary operations ===

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        """Addition."""
        if isinstance(other, Quaternion):
            self._check(other)
            return self._new(self._q + other._q)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        """Subtraction."""
        if isinstance(other, Quaternion):
            self._check(other)
            return self._new(self._q - other._q)
        return NotImplemented

    def __mul__(self, other: Union['Quaternion', float, torch.Tensor]) -> 'Quaternion':
        """Algebra product, or scaling by a real/complex factor."""
        if isinstance(other, Quaternion):
            return multiply(self, other)
        if isinstance(other, (int, float, complex, torch.Tensor)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Union[float, torch.Tensor]) -> 'Quaternion':
        """Left multiplication by a scalar."""
        if isinstance(other, (int, float, complex, torch.Tensor)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: Union['Quaternion', float, torch.Tensor]) -> 'Quaternion':
        """Quotient by a value, or division by a real scalar."""
        if isinstance(other, Quaternion):
            from .quadrance import quotient
            return quotient(self, other)
        if isinstance(other, (int, float)):
            return self._new(self._q / other)
        if isinstance(other, torch.Tensor):
            return self._new(self._q / other.to(self.dtype).unsqueeze(-1))
        return NotImplemented

    def commutator(self, other: 'Quaternion') -> 'Quaternion':
        return commutator(self, other)

    def associator(self, x: 'Quaternion', y: 'Quaternion') -> 'Quaternion':
        return associator(self, x, y)

    def alternator_left(self, other: 'Quaternion') -> 'Quaternion':
        return alternator_left(self, other)

    def alternator_right(self, other: 'Quaternion') -> 'Quaternion':
        return alternator_right(self, other)

    # === Quadratic form and divisibility ===

    def quadrance(self) -> torch.Tensor:
        """Scalar part of z * conj(z). Signed for the indefinite signatures."""
        from .quadrance import quadrance
        return quadrance(self)

    def is_zero_divisor(self, eps: float = DEFAULT_EPS) -> torch.Tensor:
        from .quadrance import is_zero_divisor
        return is_zero_divisor(self, eps)

    def inverse(self, eps: float = DEFAULT_EPS) -> 'Quaternion':
        """Multiplicative inverse; raises DegenerateDivisionError on zero divisors."""
        from .quadrance import inverse
        return inverse(self, eps)

    def is_idempotent(self, eps: float = DEFAULT_EPS) -> torch.Tensor:
        from .quadrance import is_idempotent
        return is_idempotent(self, eps)

    def is_nilpotent(self, n: int, eps: float = DEFAULT_EPS) -> torch.Tensor:
        from .quadrance import is_nilpotent
        return is_nilpotent(self, n, eps)

    # === Special values ===

    def is_inf(self) -> torch.Tensor:
        from .special import is_inf
        return is_inf(self)

    def is_nan(self) -> torch.Tensor:
        from .special import is_nan
        return is_nan(self)

    # === Coordinates ===

    def curvilinear(self, eps: float = DEFAULT_EPS):
        """Curvilinear coordinates, see hyperquat.algebra.coordinates."""
        from .coordinates import curvilinear
        return curvilinear(self, eps)

    def pairs(self) -> torch.Tensor:
        """Paired complex view (a + bi, c + di) of shape (..., 2)."""
        from .paired import to_pairs
        return to_pairs(self)

    def __str__(self) -> str:
        from ..utils.formatting import format_quaternion
        return format_quaternion(self)

    def __repr__(self) -> str:
        if self.shape == torch.Size([]):
            return f"Quaternion({self.tolist()}, signature={self.signature.name!r})"
        return f"Quaternion(shape={self.shape}, signature={self.signature.name!r})"


# =============================================================================
# Products
# =============================================================================

def multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    """
    Compute the product a * b.

    Uses the Cayley table of the shared signature. Each term a_i * b_j is
    accumulated into the component named by the table, so no term with a
    zero structure constant is ever formed.
    """
    a._check(b)
    signs, indices = cayley_table(a.signature, device=a.device, dtype=a.dtype)

    # Expand for broadcasting: a is (..., 4, 1), b is (..., 1, 4)
    products = a.q.unsqueeze(-1) * b.q.unsqueeze(-2) * signs
    flat_products = products.flatten(start_dim=-2)

    result = torch.zeros(*flat_products.shape[:-1], NUM_COMPONENTS, device=a.device, dtype=a.dtype)
    result.index_add_(result.dim() - 1, indices.flatten(), flat_products)
    return Quaternion(result, a.signature)


def commutator(x: Quaternion, y: Quaternion) -> Quaternion:
    """[x, y] = x*y - y*x"""
    return multiply(x, y) - multiply(y, x)


def associator(w: Quaternion, x: Quaternion, y: Quaternion) -> Quaternion:
    """
    [w, x, y] = (w*x)*y - w*(x*y)

    Zero (within tolerance) for the associative signatures.
    """
    return multiply(multiply(w, x), y) - multiply(w, multiply(x, y))


def alternator_left(x: Quaternion, y: Quaternion) -> Quaternion:
    """[x, x, y]"""
    return associator(x, x, y)


def alternator_right(x: Quaternion, y: Quaternion) -> Quaternion:
    """[x, y, y]"""
    return associator(x, y, y)


# =============================================================================
# Constructors
# =============================================================================

def new(
    a: ScalarLike,
    b: ScalarLike,
    c: ScalarLike,
    d: ScalarLike,
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """
    Create a + b·e1 + c·e2 + d·e3.

    Components may be floats or broadcastable tensors.
    """
    parts = [torch.as_tensor(v, dtype=dtype, device=device) for v in (a, b, c, d)]
    return Quaternion(torch.stack(torch.broadcast_tensors(*parts), dim=-1), signature)


def zero(
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """Fresh additive identity."""
    return Quaternion(torch.zeros(NUM_COMPONENTS, dtype=dtype, device=device), signature)


def one(
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """Fresh multiplicative identity."""
    return unit(0, signature, dtype, device)


def unit(
    index: int,
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """
    Fresh basis element: 0 is the scalar unit, 1..3 are e1..e3.
    """
    if index not in range(NUM_COMPONENTS):
        raise ValueError(f"Unit index must be in 0..3, got {index}")
    components = torch.zeros(NUM_COMPONENTS, dtype=dtype, device=device)
    components[index] = 1.0
    return Quaternion(components, signature)
