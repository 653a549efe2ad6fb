import logging
from distributions.implementations import correlated_gaussian_2d
from experiments.scenarios import CORRELATED_GAUSSIAN
from experiments.step_size import compare_step_sizes

logging.basicConfig(level=logging.INFO)

scenario = CORRELATED_GAUSSIAN
target = correlated_gaussian_2d(scenario.mean, scenario.sd, scenario.rho)

table, results = compare_step_sizes(
    target,
    scenario.starting_point,
    step_sizes=scenario.step_sizes,
    num_proposals=scenario.num_proposals,
    seed=scenario.seed,
)
print(table.to_string(index=False))

# Accepted and rejected candidates, ready to overlay on a density contour
for step_size, result in results.items():
    candidates = result.candidates
    accepted = result.accepted
    print(f"\nstep size {step_size}: {accepted.sum()} accepted, {(~accepted).sum()} rejected")
    print("first accepted:", candidates[accepted][:3].round(3).tolist())
    print("first rejected:", candidates[~accepted][:3].round(3).tolist())
