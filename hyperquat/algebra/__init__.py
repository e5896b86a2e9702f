"""
Algebra module.

Implements the elliptic, split and hyperbolic quaternion algebras as one
value type parameterized by a signature table.
"""

from .signature import (
    Signature,
    ELLIPTIC,
    SPLIT,
    HYPERBOLIC,
    SIGNATURES,
    get_signature,
    cayley_table,
)

from .value import (
    Quaternion,
    multiply,
    commutator,
    associator,
    alternator_left,
    alternator_right,
    new,
    zero,
    one,
    unit,
)

from .paired import (
    to_pairs,
    from_pairs,
    paired_multiply,
    scale_pairs,
)

from .quadrance import (
    quadrance,
    is_zero_divisor,
    inverse,
    quotient,
    is_idempotent,
    is_nilpotent,
)

from .coordinates import (
    SphericalCoordinates,
    HyperbolicCoordinates,
    curvilinear,
    rect_elliptic,
    rect_split,
    rect_hyperbolic,
    from_curvilinear,
)

from .special import (
    is_inf,
    is_nan,
    inf,
    nan,
)

from .factory import QuaternionAlgebra

__all__ = [
    # Signatures
    "Signature",
    "ELLIPTIC",
    "SPLIT",
    "HYPERBOLIC",
    "SIGNATURES",
    "get_signature",
    "cayley_table",
    # Values and products
    "Quaternion",
    "multiply",
    "commutator",
    "associator",
    "alternator_left",
    "alternator_right",
    "new",
    "zero",
    "one",
    "unit",
    # Paired layout
    "to_pairs",
    "from_pairs",
    "paired_multiply",
    "scale_pairs",
    # Quadratic form and divisibility
    "quadrance",
    "is_zero_divisor",
    "inverse",
    "quotient",
    "is_idempotent",
    "is_nilpotent",
    # Coordinates
    "SphericalCoordinates",
    "HyperbolicCoordinates",
    "curvilinear",
    "rect_elliptic",
    "rect_split",
    "rect_hyperbolic",
    "from_curvilinear",
    # Special values
    "is_inf",
    "is_nan",
    "inf",
    "nan",
    # Factory
    "QuaternionAlgebra",
]
