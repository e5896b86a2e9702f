"""
hyperquat: elliptic, split and hyperbolic quaternion algebras in PyTorch

Four related 4-dimensional algebras over the reals, grouped into three
signatures that differ only in how the basis units e1, e2, e3 square:

- Elliptic (Hamilton): e1² = e2² = e3² = -1
- Split (Cockle, Klein): e1² = -1, e2² = e3² = +1
- Hyperbolic (Macfarlane, Minkowski): e1² = e2² = e3² = +1, non-associative

Key Features:
- One value type driven by a per-signature Cayley table
- Quadrance, zero-divisor detection, inverse and quotient
- Idempotent and bounded nilpotent classification
- Curvilinear coordinates with hyperbolic branches across the null cone
- Infinity/NaN predicates with infinity taking precedence
- Batched components of shape (..., 4)

Example:
    >>> import hyperquat
    >>> H = hyperquat.QuaternionAlgebra('elliptic')
    >>> z = H.new(1, 2, 3, 4)
    >>> float(z.quadrance())
    30.0
    >>> print(z * z.conjugate())
    (30+0i+0j+0k)
"""

__version__ = "0.1.0"
__author__ = "hyperquat Contributors"

from . import core
from . import algebra
from . import utils

from .core import DegenerateDivisionError
from .algebra import (
    Quaternion,
    QuaternionAlgebra,
    Signature,
    ELLIPTIC,
    SPLIT,
    HYPERBOLIC,
    get_signature,
)
from .utils import AlgebraConfig, load_config, save_config, format_quaternion

__all__ = [
    "core",
    "algebra",
    "utils",
    "DegenerateDivisionError",
    "Quaternion",
    "QuaternionAlgebra",
    "Signature",
    "ELLIPTIC",
    "SPLIT",
    "HYPERBOLIC",
    "get_signature",
    "AlgebraConfig",
    "load_config",
    "save_config",
    "format_quaternion",
]
