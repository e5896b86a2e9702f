"""
Pytest configuration and fixtures for hyperquat tests.
"""

import pytest
import torch

from hyperquat.algebra import SIGNATURES, QuaternionAlgebra


@pytest.fixture(params=SIGNATURES, ids=lambda s: s.name)
def signature(request):
    """Each of the three signatures in turn."""
    return request.param


@pytest.fixture
def algebra(signature):
    """Algebra bound to the parametrized signature."""
    return QuaternionAlgebra(signature)


@pytest.fixture
def elliptic():
    return QuaternionAlgebra('elliptic')


@pytest.fixture
def split():
    return QuaternionAlgebra('split')


@pytest.fixture
def hyperbolic():
    return QuaternionAlgebra('hyperbolic')


@pytest.fixture
def generator():
    """Seeded generator for reproducible random values."""
    return torch.Generator().manual_seed(1234)


@pytest.fixture
def batch_size():
    """Default batch size for randomized tests."""
    return 64


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
