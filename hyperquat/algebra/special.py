"""
Infinity and NaN values.

Infinity takes precedence over NaN: a value with an infinite component is
never reported as NaN, even if another component is NaN.
"""

from typing import Optional, Union
import math
import torch

from ..core.constants import DEFAULT_DTYPE
from ..core.types import SignLike
from .signature import Signature
from .value import Quaternion, new


def is_inf(z: Quaternion) -> torch.Tensor:
    """True where any component is +inf or -inf."""
    return torch.isinf(z.q).any(dim=-1)


def is_nan(z: Quaternion) -> torch.Tensor:
    """True where any component is NaN and no component is infinite."""
    return torch.isnan(z.q).any(dim=-1) & ~is_inf(z)


def _signed_inf(sign: SignLike) -> Union[float, torch.Tensor]:
    if isinstance(sign, torch.Tensor):
        return torch.where(sign >= 0, math.inf, -math.inf)
    return math.inf if sign >= 0 else -math.inf


def inf(
    s1: SignLike = 1,
    s2: SignLike = 1,
    s3: SignLike = 1,
    s4: SignLike = 1,
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """
    Infinite value with one signed infinity per component.

    Component i is +inf when si >= 0 and -inf when si < 0.
    """
    return new(*(_signed_inf(s) for s in (s1, s2, s3, s4)), signature=signature, dtype=dtype, device=device)


def nan(
    signature: Union[Signature, str] = 'elliptic',
    dtype: torch.dtype = DEFAULT_DTYPE,
    device: Optional[torch.device] = None,
) -> Quaternion:
    """Value with every component NaN."""
    return new(math.nan, math.nan, math.nan, math.nan, signature=signature, dtype=dtype, device=device)
