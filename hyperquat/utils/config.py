"""
Configuration management for hyperquat.

Provides the configuration class used to build a QuaternionAlgebra and
utilities for reading and writing it as JSON.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any
from pathlib import Path
import torch

from ..core.constants import (
    DEFAULT_DEVICE,
    DEFAULT_EPS,
    DEFAULT_NILPOTENT_POWER,
    SIGNATURE_ELLIPTIC,
)

logger = logging.getLogger(__name__)

_DTYPES = {
    'float64': torch.float64,
    'float32': torch.float32,
}


@dataclass
class AlgebraConfig:
    """
    Configuration of an algebra instance.

    Attributes:
        signature: Signature name ('elliptic', 'split', 'hyperbolic' or an
                   alias such as 'hamilton' or 'macfarlane')
        dtype: Component dtype name ('float64' or 'float32')
        device: Device to use ('cpu', 'cuda', 'mps')
        eps: Absolute tolerance of equality and zero-quadrance tests
        max_nilpotent_power: Default depth of the nilpotence search
    """

    signature: str = SIGNATURE_ELLIPTIC
    dtype: str = 'float64'
    device: str = DEFAULT_DEVICE
    eps: float = DEFAULT_EPS
    max_nilpotent_power: int = DEFAULT_NILPOTENT_POWER

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def torch_dtype(self) -> torch.dtype:
        """Resolve the dtype name."""
        if self.dtype not in _DTYPES:
            raise ValueError(f"Unknown dtype: {self.dtype}. Available: {list(_DTYPES.keys())}")
        return _DTYPES[self.dtype]

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'AlgebraConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(config_dict.get('extra', {}))

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'AlgebraConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return AlgebraConfig.from_dict(config_dict)


def load_config(filepath: str) -> AlgebraConfig:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        AlgebraConfig object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded algebra config from {filepath}")
    return AlgebraConfig.from_dict(config_dict)


def save_config(config: AlgebraConfig, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: AlgebraConfig object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved algebra config to {filepath}")
