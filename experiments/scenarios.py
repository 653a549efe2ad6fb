from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class CorrelatedGaussianScenario:
    """Random-walk chains on a bivariate Gaussian with strong negative correlation."""
    mean: Tuple[float, float] = (0.0, 0.0)
    sd: float = 0.22
    rho: float = -0.9
    starting_point: Tuple[float, float] = (-1.0, 1.0)
    step_sizes: Tuple[float, ...] = (0.1, 0.25)
    num_proposals: int = 50
    seed: int = 42

@dataclass(frozen=True)
class KingMarkovScenario:
    """The king's tour of a ring of islands with populations 1..n_islands."""
    n_islands: int = 10
    starting_island: int = 10
    num_weeks: int = 100_000
    seed: int = 42

CORRELATED_GAUSSIAN = CorrelatedGaussianScenario()
KING_MARKOV = KingMarkovScenario()
