"""
Type aliases and shape conventions for hyperquat.

Shape Conventions:
==================

Every algebra value stores its components in a tensor of shape (..., 4):
    - ...: optional batch dimensions
    - 4: the components (a, b, c, d) of a + b·e1 + c·e2 + d·e3

Predicates (is_inf, is_zero_divisor, equals, ...) return boolean tensors of
the batch shape. For a single value the result is a 0-d tensor, which can be
used directly in `if` statements and assertions.

The paired layout is a complex tensor of shape (..., 2):
    pairs[..., 0] = a + b i
    pairs[..., 1] = c + d i
"""

from typing import Sequence, Union
import torch


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Anything that can be turned into a real component or a batch of them
ScalarLike = Union[float, int, torch.Tensor]

# Complex scalar accepted by the paired-layout scaling
ComplexLike = Union[complex, torch.Tensor]

# Raw components as accepted by the constructors
Components = Union[torch.Tensor, Sequence[float]]

# Sign argument of the infinity constructor and the indefinite charts
SignLike = Union[int, torch.Tensor]


# =============================================================================
# Shape Documentation
# =============================================================================

COMPONENT_SHAPE_CONVENTION = """
Component Tensor Shape: (..., 4)
    index 0: scalar part a
    index 1: coefficient of e1
    index 2: coefficient of e2
    index 3: coefficient of e3
"""

PAIRED_SHAPE_CONVENTION = """
Paired Tensor Shape: (..., 2), complex
    index 0: a + b i
    index 1: c + d i
"""
