import logging
import numpy as np
from distributions.implementations import GaussianMV
from samplers.implementations import MetropolisSampler
from main import run_sampling_experiment

logging.basicConfig(level=logging.INFO)

# Setup distribution
dist = GaussianMV.standard(n_dimensions=5)

# Setup sampler
sampler = MetropolisSampler(step_size=0.5)

# Run experiment
results = run_sampling_experiment(
    distribution=dist,
    sampler=sampler,
    starting_point=np.zeros(5),
    num_proposals=10000
)

print(f"Acceptance rate: {results['acceptance_rate']:.4f}")
print(f"Estimated mean: {np.round(results['posterior_mean'], 4)}")
print(f"Estimated variance: {np.round(results['posterior_variance'], 4)}")
