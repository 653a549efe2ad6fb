import numpy as np
import pytest
from distributions.implementations import GaussianMV, correlated_gaussian_2d


@pytest.fixture
def standard_gaussian():
    return GaussianMV.standard(n_dimensions=2)


@pytest.fixture
def correlated_target():
    return correlated_gaussian_2d(mean=(0.0, 0.0), sd=0.22, rho=-0.9)


@pytest.fixture
def counting_density():
    """Standard normal kernel that records every point it is evaluated at."""
    calls = []

    def density(x):
        calls.append(np.array(x, copy=True))
        return float(np.exp(-0.5 * np.dot(x, x)))

    density.calls = calls
    return density
