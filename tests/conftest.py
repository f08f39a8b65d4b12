"""Pytest configuration for r1cs_spec tests."""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so the package imports without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from r1cs_spec.primitives.field import GOLDILOCKS_PRIME  # noqa: E402
from r1cs_spec.protocol.builder import Builder  # noqa: E402

# Values spread across the field, including both ends.
SAMPLE_ELEMENTS = [
    0,
    1,
    2,
    3,
    12345,
    2**32 - 1,
    2**32,
    2**63,
    GOLDILOCKS_PRIME // 2,
    GOLDILOCKS_PRIME - 2,
    GOLDILOCKS_PRIME - 1,
]


@pytest.fixture
def mul_circuit():
    """x * y = z with x, y, z allocated as 0, 1, 2."""
    b = Builder()
    x, y, z = b.alloc(3), b.alloc(5), b.alloc(15)
    b.multiplication_gate(x, y, z)
    return b, (x, y, z)


@pytest.fixture
def add_circuit():
    """x + y = z with x, y, z allocated as 0, 1, 2."""
    b = Builder()
    x, y, z = b.alloc(3), b.alloc(5), b.alloc(8)
    b.addition_gate(x, y, z)
    return b, (x, y, z)


@pytest.fixture
def sample_elements():
    """Field elements spread across [0, p)."""
    return list(SAMPLE_ELEMENTS)


@pytest.fixture(params=SAMPLE_ELEMENTS)
def field_element(request):
    """Each of SAMPLE_ELEMENTS in turn."""
    return request.param
