"""
Centralized constants for hyperquat.

This module defines the default values and numeric constants used throughout
the library. Using these constants keeps tolerances consistent between the
value type, the divisibility predicates and the coordinate charts.

Usage:
    from hyperquat.core.constants import DEFAULT_EPS

    def my_predicate(z, eps: float = DEFAULT_EPS):
        ...
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for componentwise equality and zero-quadrance tests
DEFAULT_EPS: float = 1e-8

# All values are double precision unless a config says otherwise
DEFAULT_DTYPE: torch.dtype = torch.float64

# Complex dtype matching DEFAULT_DTYPE for the paired layout
DEFAULT_COMPLEX_DTYPE: torch.dtype = torch.complex128

DEFAULT_DEVICE: str = 'cpu'

# Number of components of every algebra value
NUM_COMPONENTS: int = 4


# =============================================================================
# Divisibility Defaults
# =============================================================================

# Powers examined by the bounded nilpotence search when none is given
DEFAULT_NILPOTENT_POWER: int = 8


# =============================================================================
# Signature Names
# =============================================================================

SIGNATURE_ELLIPTIC: str = 'elliptic'
SIGNATURE_SPLIT: str = 'split'
SIGNATURE_HYPERBOLIC: str = 'hyperbolic'
