from abc import ABC, abstractmethod
import logging
from typing import Callable, Optional, Union
import numpy as np
from distributions.base import Distribution
from .exceptions import DegenerateDensity, EvaluationFailure, InvalidConfiguration, SamplerError
from .results import ProposalRecord, RunResult

logger = logging.getLogger(__name__)

TargetDensity = Union[Distribution, Callable[[np.ndarray], float]]


class BaseSampler(ABC):
    """
    Base class for Metropolis samplers with a symmetric proposal.

    Subclasses decide how the starting point is validated and how a candidate
    is drawn from the current position; the accept/reject loop lives here.
    Samplers only hold configuration, every call to run() owns its own chain.
    """

    def __init__(self, log_density: bool = False):
        self.log_density = log_density

    def validate(self):
        """Check sampler settings before a run starts."""

    @abstractmethod
    def prepare_start(self, starting_point) -> np.ndarray:
        """Convert and validate the starting point."""

    @abstractmethod
    def propose(self, current: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """Draw a candidate point from the current position."""

    def report(self, result: RunResult):
        logger.info(
            "%s acceptance rate: %.2f%% over %d proposals",
            type(self).__name__, 100 * result.acceptance_rate, len(result),
        )

    def run(
        self,
        target_density: TargetDensity,
        starting_point,
        num_proposals: int,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> RunResult:
        """
        Run the chain for a fixed number of proposals.

        Args:
            target_density: Unnormalized density (or log density when the
                sampler was built with log_density=True), either a callable
                or a Distribution
            starting_point: Initial position of the chain
            num_proposals: Number of iterations, at least 1
            rng: Random generator owned by the caller
            seed: Seed for a fresh generator when rng is not given

        Returns:
            RunResult holding every candidate with its accept flag
        """
        density = self._resolve_density(target_density)
        if isinstance(num_proposals, bool) or not isinstance(num_proposals, (int, np.integer)):
            raise InvalidConfiguration(f"num_proposals must be an integer, got {num_proposals!r}")
        if num_proposals < 1:
            raise InvalidConfiguration(f"num_proposals must be at least 1, got {num_proposals}")
        if rng is not None and seed is not None:
            raise InvalidConfiguration("Pass either rng or seed, not both")
        self.validate()
        current = self.prepare_start(starting_point)
        current.flags.writeable = False

        start_value = self._evaluate(density, current, None)
        if not self._is_positive(start_value):
            raise DegenerateDensity(
                f"Target density at the starting point {current} is {start_value}; "
                "it must be strictly positive"
            )

        if rng is None:
            rng = np.random.default_rng(seed)

        logger.debug(
            "Starting %s at %s for %d proposals", type(self).__name__, current, num_proposals
        )
        start = current
        records = []
        for i in range(num_proposals):
            candidate = self.propose(current, rng)
            candidate.flags.writeable = False

            candidate_value = self._evaluate(density, candidate, i)
            current_value = self._evaluate(density, current, i)
            if not self._is_positive(current_value):
                raise DegenerateDensity(
                    f"Target density at the current position {current} became "
                    f"{current_value} at iteration {i}"
                )

            u = rng.random()
            if self.log_density:
                with np.errstate(divide="ignore"):
                    accepted = bool(np.log(u) < candidate_value - current_value)
            else:
                accepted = bool(u < candidate_value / current_value)

            if accepted:
                current = candidate
            records.append(ProposalRecord(candidate=candidate, accepted=accepted))

        result = RunResult(starting_point=start, proposal_records=tuple(records))
        self.report(result)
        return result

    def _resolve_density(self, target_density: TargetDensity) -> Callable[[np.ndarray], float]:
        if isinstance(target_density, Distribution):
            return target_density.log_pdf if self.log_density else target_density.pdf
        if not callable(target_density):
            raise InvalidConfiguration(
                f"target_density must be callable or a Distribution, got {type(target_density).__name__}"
            )
        return target_density

    def _evaluate(self, density, point: np.ndarray, iteration) -> float:
        try:
            value = float(np.squeeze(density(point)))
        except SamplerError:
            raise
        except Exception as exc:
            raise EvaluationFailure(iteration, point, f"{type(exc).__name__}: {exc}") from exc

        if np.isnan(value):
            reason = "returned NaN"
        elif value == np.inf:
            reason = "returned +inf"
        elif not self.log_density and value < 0:
            reason = f"returned a negative density {value}"
        else:
            return value
        if iteration is None:
            raise DegenerateDensity(f"Target density at the starting point {point} {reason}")
        raise EvaluationFailure(iteration, point, reason)

    def _is_positive(self, value: float) -> bool:
        if self.log_density:
            return value > -np.inf
        return value > 0
