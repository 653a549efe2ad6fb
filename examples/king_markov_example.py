import logging
from distributions.implementations import IslandPopulations
from experiments.convergence import visit_frequencies
from experiments.scenarios import KING_MARKOV
from samplers.implementations import KingMarkovSampler
from main import run_sampling_experiment

logging.basicConfig(level=logging.INFO)

tour = KING_MARKOV
populations = IslandPopulations(n_islands=tour.n_islands)

results = run_sampling_experiment(
    distribution=populations,
    sampler=KingMarkovSampler(n_islands=tour.n_islands),
    starting_point=tour.starting_island,
    num_proposals=tour.num_weeks,
    seed=tour.seed
)

positions = results["result"].positions[:, 0]
print("First 20 weeks:", positions[:20].tolist())

frequencies = visit_frequencies(results["result"], tour.n_islands)
print(f"{'island':>6} {'visited':>8} {'expected':>8}")
for island, (share, expected) in enumerate(zip(frequencies, populations.weights), start=1):
    print(f"{island:>6} {share:>8.3f} {expected:>8.3f}")
