import logging
from typing import Any, Dict, Sequence
import numpy as np
from samplers.base import BaseSampler, TargetDensity
from experiments.convergence import ConvergenceAnalysis, visit_frequencies
from experiments.scenarios import CORRELATED_GAUSSIAN, KING_MARKOV
from experiments.step_size import compare_step_sizes
from distributions.implementations import IslandPopulations, correlated_gaussian_2d
from samplers.implementations import KingMarkovSampler

logger = logging.getLogger(__name__)

def run_sampling_experiment(
    distribution: TargetDensity,
    sampler: BaseSampler,
    starting_point: Sequence[float],
    num_proposals: int,
    seed: int = 42
) -> Dict[str, Any]:
    """
    Run a Markov chain on distribution and summarize the realized chain.

    Args:
        distribution: The target density to sample from
        sampler: Sampling strategy to use
        starting_point: Initial position of the chain
        num_proposals: Number of iterations to run
        seed: Random seed for reproducibility

    Returns:
        Dictionary containing results including:
        - result: The full RunResult trace
        - acceptance_rate: Share of accepted proposals
        - posterior_mean: Mean of the realized chain positions
        - posterior_variance: Variance of the realized chain positions
        - convergence_data: Running means and variances along the chain
    """
    rng = np.random.default_rng(seed)
    result = sampler.run(distribution, starting_point, num_proposals, rng=rng)

    positions = result.positions
    analysis = ConvergenceAnalysis()
    convergence_data = analysis.analyze(positions)

    return {
        "result": result,
        "acceptance_rate": result.acceptance_rate,
        "posterior_mean": np.mean(positions, axis=0),
        "posterior_variance": np.var(positions, axis=0),
        "convergence_data": convergence_data
    }

if __name__ == "__main__":
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.INFO,
    )

    scenario = CORRELATED_GAUSSIAN
    target = correlated_gaussian_2d(scenario.mean, scenario.sd, scenario.rho)
    table, _ = compare_step_sizes(
        target,
        scenario.starting_point,
        step_sizes=scenario.step_sizes,
        num_proposals=scenario.num_proposals,
        seed=scenario.seed,
    )
    logger.info("Step size comparison:\n%s", table.to_string(index=False))

    tour = KING_MARKOV
    populations = IslandPopulations(n_islands=tour.n_islands)
    experiment = run_sampling_experiment(
        populations,
        KingMarkovSampler(n_islands=tour.n_islands),
        tour.starting_island,
        tour.num_weeks,
        seed=tour.seed,
    )
    frequencies = visit_frequencies(experiment["result"], tour.n_islands)
    for island, (share, expected) in enumerate(zip(frequencies, populations.weights), start=1):
        logger.info("Island %2d: visited %.3f of weeks, population share %.3f", island, share, expected)
