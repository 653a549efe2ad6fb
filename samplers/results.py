from dataclasses import dataclass, field
from typing import Tuple
import numpy as np


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class ProposalRecord:
    """A candidate point and whether the chain moved to it."""
    candidate: np.ndarray
    accepted: bool


@dataclass(frozen=True, eq=False)
class RunResult:
    """
    Trace of a single sampling run.

    Rejected candidates are kept in the trace, so `candidates` shows the
    proposal behaviour while `positions` is the path the chain actually took.
    """
    starting_point: np.ndarray
    proposal_records: Tuple[ProposalRecord, ...]
    acceptance_rate: float = field(init=False)

    def __post_init__(self):
        n_proposals = len(self.proposal_records)
        rate = self.n_accepted / n_proposals if n_proposals else 0.0
        object.__setattr__(self, "acceptance_rate", rate)

    def __len__(self) -> int:
        return len(self.proposal_records)

    @property
    def n_accepted(self) -> int:
        return sum(1 for record in self.proposal_records if record.accepted)

    @property
    def candidates(self) -> np.ndarray:
        """Array of shape (num_proposals, n_dimensions) with every candidate."""
        return _readonly(np.array([r.candidate for r in self.proposal_records]))

    @property
    def accepted(self) -> np.ndarray:
        return _readonly(np.array([r.accepted for r in self.proposal_records], dtype=bool))

    @property
    def positions(self) -> np.ndarray:
        """Chain position after each iteration."""
        positions = []
        current = self.starting_point
        for record in self.proposal_records:
            if record.accepted:
                current = record.candidate
            positions.append(current)
        return _readonly(np.array(positions))

    @property
    def final_position(self) -> np.ndarray:
        for record in reversed(self.proposal_records):
            if record.accepted:
                return record.candidate
        return self.starting_point
