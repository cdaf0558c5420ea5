import pytest
import numpy as np


def pytest_configure(config):
    config.addinivalue_line("markers", "fast: quick tests with small data")


@pytest.fixture
def int_data():
    """A 100 x 10 matrix of random integers and 100 binary labels."""
    rng = np.random.RandomState(2332)
    X = rng.randint(0, 10, size=(100, 10))
    y = rng.randint(0, 2, size=100)
    return X, y


@pytest.fixture
def regression_data():
    """Well conditioned regression data with a known linear model."""
    rng = np.random.RandomState(13)
    X = rng.normal(size=(120, 6))
    beta = rng.uniform(-2, 2, size=6)
    y = np.dot(X, beta) + 3. + 0.1 * rng.normal(size=120)
    return X, y, beta
