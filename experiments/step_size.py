import logging
from typing import Dict, Sequence, Tuple
import numpy as np
import pandas as pd
from distributions.base import Distribution
from samplers.implementations import MetropolisSampler
from samplers.results import RunResult

logger = logging.getLogger(__name__)


def compare_step_sizes(distribution: Distribution,
                       starting_point: Sequence[float],
                       step_sizes: Sequence[float] = (0.1, 0.25),
                       num_proposals: int = 50,
                       seed: int = 42) -> Tuple[pd.DataFrame, Dict[float, RunResult]]:
    """
    Run one Metropolis chain per step size from the same start and seed.

    Small steps are accepted often but move slowly; large steps explore faster
    but are rejected more.

    Returns:
        A summary table with one row per step size, and the run results keyed
        by step size
    """
    if len(set(step_sizes)) != len(step_sizes):
        raise ValueError(f"step_sizes must not repeat, got {list(step_sizes)}")
    rows = []
    results = {}
    for step_size in step_sizes:
        sampler = MetropolisSampler(step_size=step_size)
        result = sampler.run(distribution, starting_point, num_proposals, seed=seed)
        results[step_size] = result

        positions = result.positions
        # total distance covered by the realized chain
        path_length = float(np.sum(np.linalg.norm(np.diff(
            np.vstack([result.starting_point, positions]), axis=0), axis=1)))
        row = {
            "step_size": step_size,
            "acceptance_rate": result.acceptance_rate,
            "n_accepted": result.n_accepted,
            "path_length": path_length,
        }
        for d, coord in enumerate(result.final_position):
            row[f"final_x{d}"] = coord
        rows.append(row)
        logger.debug("step size %.3f: %d of %d accepted", step_size, result.n_accepted, num_proposals)

    return pd.DataFrame(rows), results
