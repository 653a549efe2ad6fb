import numpy as np


class SamplerError(Exception):
    """Base class for errors raised while running a Markov chain."""


class InvalidConfiguration(SamplerError, ValueError):
    """Raised for sampler settings that are rejected before any iteration."""


class DegenerateDensity(SamplerError):
    """Raised when the chain sits on a point with zero (or invalid) density."""


class EvaluationFailure(SamplerError):
    """
    Raised when the target density fails at a point.

    Args:
        iteration: Zero-based iteration index, or None for the starting point
        point: The point at which the target was evaluated
        reason: Human readable description of the failure
    """

    def __init__(self, iteration, point, reason: str):
        self.iteration = iteration
        self.point = np.array(point, copy=True)
        self.reason = reason
        where = "starting point" if iteration is None else f"iteration {iteration}"
        super().__init__(f"Target density failed at {where} {self.point}: {reason}")
