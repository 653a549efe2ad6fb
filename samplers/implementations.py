import logging
import numpy as np
from .base import BaseSampler
from .exceptions import InvalidConfiguration
from .results import RunResult

logger = logging.getLogger(__name__)


class MetropolisSampler(BaseSampler):
    """
    Random-walk Metropolis sampler with an isotropic Gaussian proposal.

    Every coordinate of the current position is perturbed with independent
    N(0, step_size^2) noise. The proposal is symmetric, so the acceptance
    ratio is just density(candidate) / density(current).
    """

    def __init__(self, step_size: float = 0.1, log_density: bool = False):
        super().__init__(log_density=log_density)
        self.step_size = step_size
        self.validate()

    def validate(self):
        if not np.isfinite(self.step_size) or self.step_size <= 0:
            raise InvalidConfiguration(f"step_size must be positive, got {self.step_size}")

    def prepare_start(self, starting_point) -> np.ndarray:
        try:
            start = np.atleast_1d(np.array(starting_point, dtype=float))
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(f"Invalid starting point {starting_point!r}") from exc
        if start.ndim != 1 or start.size == 0:
            raise InvalidConfiguration(f"Starting point must be a non-empty vector, got shape {start.shape}")
        if not np.all(np.isfinite(start)):
            raise InvalidConfiguration(f"Starting point must be finite, got {start}")
        return start

    def propose(self, current: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        return current + self.step_size * rng.standard_normal(current.shape[0])

    def report(self, result: RunResult):
        rate = result.acceptance_rate
        logger.info("MH acceptance rate: %.2f%% and step size: %.4f", 100 * rate, self.step_size)
        if rate < 0.1:
            logger.warning("Low acceptance rate - sampling may be inefficient. Consider decreasing step size.")
        elif rate > 0.7:
            logger.warning("High acceptance rate - sampling may be too conservative. Consider increasing step size.")


class KingMarkovSampler(BaseSampler):
    """
    King Markov's island tour.

    Islands 1..n_islands sit on a ring. Each week the king flips a coin to
    pick the island on the left or right and moves there with probability
    population(proposal) / population(current). Over a long tour the share of
    weeks spent on each island matches its share of the population.
    """

    def __init__(self, n_islands: int = 10, log_density: bool = False):
        super().__init__(log_density=log_density)
        self.n_islands = n_islands
        self.validate()

    def validate(self):
        if isinstance(self.n_islands, bool) or not isinstance(self.n_islands, (int, np.integer)):
            raise InvalidConfiguration(f"n_islands must be an integer, got {self.n_islands!r}")
        if self.n_islands < 2:
            raise InvalidConfiguration(f"n_islands must be at least 2, got {self.n_islands}")

    def prepare_start(self, starting_point) -> np.ndarray:
        start = np.atleast_1d(np.array(starting_point))
        if start.shape != (1,) or not np.issubdtype(start.dtype, np.integer):
            raise InvalidConfiguration(f"Starting island must be a single integer, got {starting_point!r}")
        if not 1 <= start[0] <= self.n_islands:
            raise InvalidConfiguration(
                f"Starting island must be between 1 and {self.n_islands}, got {start[0]}"
            )
        return start.astype(int)

    def propose(self, current: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        proposal = current[0] + rng.choice((-1, 1))
        # wrap around the ring
        if proposal < 1:
            proposal = self.n_islands
        elif proposal > self.n_islands:
            proposal = 1
        return np.array([proposal], dtype=int)
