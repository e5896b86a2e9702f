"""
Utility functions for hyperquat.

Includes configuration management and text rendering of values.
"""

from .config import AlgebraConfig, load_config, save_config
from .formatting import format_quaternion

__all__ = [
    # Configuration
    "AlgebraConfig",
    "load_config",
    "save_config",
    # Formatting
    "format_quaternion",
]
