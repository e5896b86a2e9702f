"""
Core module for hyperquat.

Contains:
- Constants: Centralized default values and numeric constants
- Types: Type aliases for component tensors
- Errors: Exceptions raised by the algebra
"""

from .constants import (
    # Numeric constants
    DEFAULT_EPS,
    DEFAULT_DTYPE,
    DEFAULT_COMPLEX_DTYPE,
    DEFAULT_DEVICE,
    NUM_COMPONENTS,
    # Divisibility defaults
    DEFAULT_NILPOTENT_POWER,
    # Signature names
    SIGNATURE_ELLIPTIC,
    SIGNATURE_SPLIT,
    SIGNATURE_HYPERBOLIC,
)

from .types import (
    ScalarLike,
    ComplexLike,
    Components,
    SignLike,
    COMPONENT_SHAPE_CONVENTION,
    PAIRED_SHAPE_CONVENTION,
)

from .errors import DegenerateDivisionError

__all__ = [
    # Constants
    "DEFAULT_EPS",
    "DEFAULT_DTYPE",
    "DEFAULT_COMPLEX_DTYPE",
    "DEFAULT_DEVICE",
    "NUM_COMPONENTS",
    "DEFAULT_NILPOTENT_POWER",
    "SIGNATURE_ELLIPTIC",
    "SIGNATURE_SPLIT",
    "SIGNATURE_HYPERBOLIC",
    # Types
    "ScalarLike",
    "ComplexLike",
    "Components",
    "SignLike",
    "COMPONENT_SHAPE_CONVENTION",
    "PAIRED_SHAPE_CONVENTION",
    # Errors
    "DegenerateDivisionError",
]
