import numpy as np
from dataclasses import dataclass
from samplers.results import RunResult

@dataclass
class ConvergenceData:
    """Container for convergence analysis results."""
    running_means: np.ndarray
    running_variances: np.ndarray
    sample_indices: np.ndarray

class ConvergenceAnalysis:
    """Analyzes convergence of running estimates along a chain."""

    def analyze(self, values: np.ndarray) -> ConvergenceData:
        """
        Analyze convergence of sampling estimates.

        Args:
            values: Array of shape (n_samples,) or (n_samples, n_dimensions),
                usually the realized chain positions

        Returns:
            ConvergenceData containing running means and variances with the
            same shape as values
        """
        values = np.asarray(values, dtype=float)
        n_samples = values.shape[0]
        if n_samples == 0:
            raise ValueError("Cannot analyze an empty chain")
        running_means = np.zeros_like(values)
        running_variances = np.zeros_like(values)

        # Welford updates; stable when the values sit far from zero
        mean = np.zeros_like(values[0])
        m2 = np.zeros_like(values[0])
        for i in range(n_samples):
            delta = values[i] - mean
            mean = mean + delta / (i + 1)
            m2 = m2 + delta * (values[i] - mean)
            running_means[i] = mean
            running_variances[i] = m2 / (i + 1)

        return ConvergenceData(
            running_means=running_means,
            running_variances=running_variances,
            sample_indices=np.arange(1, n_samples + 1)
        )


def visit_frequencies(result: RunResult, n_islands: int) -> np.ndarray:
    """Share of iterations the chain spent on each island 1..n_islands."""
    islands = result.positions[:, 0].astype(int)
    if islands.min() < 1 or islands.max() > n_islands:
        raise ValueError(
            f"Chain visited islands outside 1..{n_islands}: {islands.min()}..{islands.max()}"
        )
    counts = np.bincount(islands, minlength=n_islands + 1)[1:n_islands + 1]
    return counts / len(result)
