import numpy as np
import pandas as pd
import pytest
from distributions.implementations import GaussianMV, IslandPopulations, correlated_gaussian_2d
from experiments.convergence import ConvergenceAnalysis, visit_frequencies
from experiments.scenarios import CORRELATED_GAUSSIAN, KING_MARKOV
from experiments.step_size import compare_step_sizes
from main import run_sampling_experiment
from samplers.implementations import KingMarkovSampler, MetropolisSampler


def test_running_statistics_one_dimensional():
    data = ConvergenceAnalysis().analyze(np.array([1.0, 2.0, 3.0]))
    assert np.allclose(data.running_means, [1.0, 1.5, 2.0])
    assert np.allclose(data.running_variances, [0.0, 0.25, 2.0 / 3.0])
    assert np.array_equal(data.sample_indices, [1, 2, 3])


def test_running_statistics_per_coordinate():
    values = np.array([[0.0, 10.0],
                       [2.0, 10.0],
                       [4.0, 10.0]])
    data = ConvergenceAnalysis().analyze(values)
    assert data.running_means.shape == (3, 2)
    assert np.allclose(data.running_means[-1], [2.0, 10.0])
    assert np.allclose(data.running_variances[:, 1], 0.0)
    assert data.running_variances[-1, 0] == pytest.approx(np.var([0.0, 2.0, 4.0]))


def test_empty_chain_rejected():
    with pytest.raises(ValueError):
        ConvergenceAnalysis().analyze(np.empty((0, 2)))


def test_scenario_defaults():
    assert CORRELATED_GAUSSIAN.starting_point == (-1.0, 1.0)
    assert CORRELATED_GAUSSIAN.step_sizes == (0.1, 0.25)
    assert CORRELATED_GAUSSIAN.num_proposals == 50
    assert KING_MARKOV.n_islands == 10


def test_compare_step_sizes_table():
    scenario = CORRELATED_GAUSSIAN
    target = correlated_gaussian_2d(scenario.mean, scenario.sd, scenario.rho)
    table, results = compare_step_sizes(
        target, scenario.starting_point, scenario.step_sizes, scenario.num_proposals, scenario.seed)

    assert isinstance(table, pd.DataFrame)
    assert list(table["step_size"]) == [0.1, 0.25]
    assert {"acceptance_rate", "n_accepted", "path_length", "final_x0", "final_x1"} <= set(table.columns)
    for _, row in table.iterrows():
        result = results[row["step_size"]]
        assert len(result) == 50
        assert row["acceptance_rate"] == result.acceptance_rate
        assert row["final_x0"] == result.final_position[0]
        assert row["path_length"] >= 0.0


def test_compare_step_sizes_is_reproducible(correlated_target):
    first, _ = compare_step_sizes(correlated_target, (-1.0, 1.0), seed=3)
    second, _ = compare_step_sizes(correlated_target, (-1.0, 1.0), seed=3)
    pd.testing.assert_frame_equal(first, second)


def test_run_sampling_experiment(standard_gaussian):
    results = run_sampling_experiment(
        distribution=standard_gaussian,
        sampler=MetropolisSampler(step_size=1.0),
        starting_point=(0.0, 0.0),
        num_proposals=5000,
        seed=0,
    )

    assert set(results) == {"result", "acceptance_rate", "posterior_mean",
                            "posterior_variance", "convergence_data"}
    assert results["posterior_mean"].shape == (2,)
    assert np.allclose(results["posterior_mean"], 0.0, atol=0.25)
    assert results["convergence_data"].running_means.shape == (5000, 2)
    assert np.allclose(results["convergence_data"].running_means[-1], results["posterior_mean"])


def test_run_sampling_experiment_is_seeded():
    dist = GaussianMV.standard(2)
    first = run_sampling_experiment(dist, MetropolisSampler(step_size=0.5), (1.0, 1.0), 100, seed=4)
    second = run_sampling_experiment(dist, MetropolisSampler(step_size=0.5), (1.0, 1.0), 100, seed=4)
    assert np.array_equal(first["result"].candidates, second["result"].candidates)


def test_visit_frequencies_counts_every_week():
    result = KingMarkovSampler(n_islands=5).run(IslandPopulations(n_islands=5), 1, 1000, seed=0)
    frequencies = visit_frequencies(result, 5)
    assert frequencies.shape == (5,)
    assert frequencies.sum() == pytest.approx(1.0)
    assert np.all(frequencies >= 0)


def test_running_variance_stable_far_from_zero():
    data = ConvergenceAnalysis().analyze(1e8 + np.array([0.0, 1.0, 2.0, 3.0]))
    assert np.allclose(data.running_variances, [0.0, 0.25, 2.0 / 3.0, 1.25])
    assert np.allclose(data.running_means - 1e8, [0.0, 0.5, 1.0, 1.5])


def test_compare_step_sizes_rejects_repeats(correlated_target):
    with pytest.raises(ValueError):
        compare_step_sizes(correlated_target, (-1.0, 1.0), step_sizes=(0.1, 0.25, 0.1))


def test_visit_frequencies_rejects_smaller_ring():
    result = KingMarkovSampler(n_islands=10).run(IslandPopulations(n_islands=10), 10, 50, seed=0)
    with pytest.raises(ValueError):
        visit_frequencies(result, 5)
