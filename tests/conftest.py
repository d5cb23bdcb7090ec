import pytest

from dlogproof import G, Scalar


@pytest.fixture
def keypair():
    """Random (x, Y = x·G)."""
    x = Scalar.random()
    return x, x * G


@pytest.fixture
def context():
    return "session_1", 1
