from typing import Optional, Sequence
import numpy as np
from scipy.stats import multivariate_normal
from .base import Distribution

class GaussianMV(Distribution):
    def __init__(self, mean: np.ndarray, cov: np.ndarray):
        """
        Multivariate Gaussian distribution.

        Args:
            mean: Mean vector
            cov: Covariance matrix
        """
        self.mean = np.asarray(mean, dtype=float)
        self.cov = np.asarray(cov, dtype=float)
        self.dist = multivariate_normal(mean=self.mean, cov=self.cov, allow_singular=True)

    @property
    def n_dimensions(self) -> int:
        return self.mean.shape[0]

    def pdf(self, x: np.ndarray) -> float:
        return float(self.dist.pdf(x))

    def log_pdf(self, x: np.ndarray) -> float:
        return float(self.dist.logpdf(x))

    @classmethod
    def standard(cls, n_dimensions: int = 2) -> "GaussianMV":
        """Standard normal with zero mean and identity covariance."""
        return cls(mean=np.zeros(n_dimensions), cov=np.eye(n_dimensions))


def correlated_gaussian_2d(mean: Sequence[float] = (0.0, 0.0),
                           sd: float = 0.22,
                           rho: float = -0.9) -> GaussianMV:
    """
    Bivariate Gaussian with equal standard deviations and correlation rho.

    The defaults give the strongly correlated target used to show how a
    random-walk chain struggles along a narrow ridge.
    """
    if sd <= 0:
        raise ValueError(f"sd must be positive, got {sd}")
    if not -1 < rho < 1:
        raise ValueError(f"rho must be in (-1, 1), got {rho}")
    cov = sd ** 2 * np.array([[1.0, rho],
                              [rho, 1.0]])
    return GaussianMV(mean=np.asarray(mean, dtype=float), cov=cov)


class Flat(Distribution):
    """Constant unnormalized density over the whole space."""

    def __init__(self, value: float = 1.0):
        if value <= 0:
            raise ValueError(f"value must be positive, got {value}")
        self.value = value

    def pdf(self, x: np.ndarray) -> float:
        return self.value

    def log_pdf(self, x: np.ndarray) -> float:
        return float(np.log(self.value))


class UniformBox(Distribution):
    """Uniform distribution over the box [low, high]^n."""

    def __init__(self, n_dimensions: int, low: float = 0.0, high: float = 1.0):
        if high <= low:
            raise ValueError(f"high must exceed low, got [{low}, {high}]")
        self.n_dimensions = n_dimensions
        self.low = low
        self.high = high
        self.volume = (high - low) ** n_dimensions

    def _inside(self, x: np.ndarray) -> bool:
        x = np.asarray(x)
        if x.shape != (self.n_dimensions,):
            raise ValueError(f"Input shape {x.shape} does not match distribution dimensions {self.n_dimensions}")
        return bool(np.all((x >= self.low) & (x <= self.high)))

    def pdf(self, x: np.ndarray) -> float:
        return 1.0 / self.volume if self._inside(x) else 0.0

    def log_pdf(self, x: np.ndarray) -> float:
        return -np.log(self.volume) if self._inside(x) else -np.inf


class IslandPopulations(Distribution):
    """
    Unnormalized distribution over islands 1..n given by their populations.

    By default island k has population k.
    """

    def __init__(self, populations: Optional[Sequence[float]] = None, n_islands: int = 10):
        if populations is None:
            populations = np.arange(1, n_islands + 1)
        self.populations = np.asarray(populations, dtype=float)
        if self.populations.ndim != 1 or np.any(self.populations < 0):
            raise ValueError("populations must be a vector of non-negative numbers")

    @property
    def n_islands(self) -> int:
        return self.populations.shape[0]

    @property
    def weights(self) -> np.ndarray:
        """Population share of each island."""
        return self.populations / self.populations.sum()

    def pdf(self, x: np.ndarray) -> float:
        island = int(np.squeeze(x))
        if not 1 <= island <= self.n_islands:
            raise ValueError(f"Island {island} is outside 1..{self.n_islands}")
        return float(self.populations[island - 1])

    def log_pdf(self, x: np.ndarray) -> float:
        with np.errstate(divide="ignore"):
            return float(np.log(self.pdf(x)))
