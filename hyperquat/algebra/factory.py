"""
Signature-bound algebra factory.

QuaternionAlgebra selects a signature once and produces values of it, so
callers never pass the signature to every constructor.
"""

from typing import Optional, Tuple, Union
import logging
import torch

from ..core.constants import (
    DEFAULT_DEVICE,
    DEFAULT_DTYPE,
    DEFAULT_EPS,
    DEFAULT_NILPOTENT_POWER,
    NUM_COMPONENTS,
)
from ..core.types import ScalarLike, SignLike
from .coordinates import from_curvilinear
from .quadrance import is_nilpotent
from .signature import Signature, get_signature
from .special import inf, nan
from .value import Quaternion, new, one, unit, zero

logger = logging.getLogger(__name__)


class QuaternionAlgebra:
    """
    One of the elliptic, split or hyperbolic algebras.

    Example:
        >>> split = QuaternionAlgebra('split')
        >>> z = split.new(1, 0, 1, 0)
        >>> bool(z.is_zero_divisor())
        True
    """

    def __init__(
        self,
        signature: Union[Signature, str] = 'elliptic',
        dtype: torch.dtype = DEFAULT_DTYPE,
        device: Union[str, torch.device] = DEFAULT_DEVICE,
        eps: float = DEFAULT_EPS,
        max_nilpotent_power: int = DEFAULT_NILPOTENT_POWER,
    ):
        """
        Args:
            signature: Signature instance or name (aliases accepted)
            dtype: Component dtype
            device: Component device
            eps: Equality tolerance used by the bound predicates
            max_nilpotent_power: Default depth of the nilpotence search
        """
        self.signature = get_signature(signature)
        self.dtype = dtype
        self.device = torch.device(device)
        self.eps = eps
        self.max_nilpotent_power = max_nilpotent_power
        logger.debug(f"Created {self.signature.name} algebra ({dtype}, {self.device})")

    @classmethod
    def from_config(cls, config) -> 'QuaternionAlgebra':
        """Build from an AlgebraConfig."""
        return cls(
            signature=config.signature,
            dtype=config.torch_dtype(),
            device=config.device,
            eps=config.eps,
            max_nilpotent_power=config.max_nilpotent_power,
        )

    @property
    def name(self) -> str:
        return self.signature.name

    # === Constructors ===

    def new(self, a: ScalarLike, b: ScalarLike, c: ScalarLike, d: ScalarLike) -> Quaternion:
        """Create a + b·e1 + c·e2 + d·e3."""
        return new(a, b, c, d, self.signature, self.dtype, self.device)

    def zero(self) -> Quaternion:
        return zero(self.signature, self.dtype, self.device)

    def one(self) -> Quaternion:
        return one(self.signature, self.dtype, self.device)

    def unit(self, index: int) -> Quaternion:
        return unit(index, self.signature, self.dtype, self.device)

    def units(self) -> Tuple[Quaternion, Quaternion, Quaternion]:
        """The three basis units e1, e2, e3."""
        return tuple(self.unit(i) for i in range(1, NUM_COMPONENTS))

    def inf(self, s1: SignLike = 1, s2: SignLike = 1, s3: SignLike = 1, s4: SignLike = 1) -> Quaternion:
        return inf(s1, s2, s3, s4, self.signature, self.dtype, self.device)

    def nan(self) -> Quaternion:
        return nan(self.signature, self.dtype, self.device)

    def rect(self, *coords) -> Quaternion:
        """Value from curvilinear coordinates of this signature."""
        return from_curvilinear(self.signature, *coords, dtype=self.dtype, device=self.device)

    def random(self, *shape: int, generator: Optional[torch.Generator] = None) -> Quaternion:
        """Values with standard-normal components and batch shape `shape`."""
        components = torch.randn(
            *shape, NUM_COMPONENTS, generator=generator, dtype=self.dtype, device=self.device
        )
        return Quaternion(components, self.signature)

    # === Bound predicates ===

    def equals(self, x: Quaternion, y: Quaternion) -> torch.Tensor:
        return x.equals(y, self.eps)

    def is_nilpotent(self, z: Quaternion, n: Optional[int] = None) -> torch.Tensor:
        """Bounded nilpotence search, `max_nilpotent_power` deep by default."""
        if n is None:
            n = self.max_nilpotent_power
        return is_nilpotent(z, n, self.eps)

    def __repr__(self) -> str:
        return f"QuaternionAlgebra({self.signature.name!r}, dtype={self.dtype}, device={self.device})"
