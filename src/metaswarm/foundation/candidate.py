"""
Capability contracts for candidate types.

An engine never constructs a candidate except through ``new_random`` and never
scores one except through ``evaluate``. Everything else about the candidate
(domain, sampling distribution, objective) belongs to the user type.

Positions only need ``+``, ``-`` and multiplication by a real scalar written on
the right (``position * 0.5``), so plain floats and ``numpy`` arrays both work.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Protocol, runtime_checkable

from .exceptions import CandidateContractError
from .random import RandomSource


@runtime_checkable
class Position(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, scalar: float) -> Any: ...


class FireflyCandidate(Protocol):
    """Operations the Firefly engine needs from a candidate type."""

    position: Position

    @classmethod
    def new_random(cls, source: RandomSource) -> FireflyCandidate:
        """Draw a candidate from the type's own sampling domain."""
        ...

    def evaluate(self) -> Any:
        """Objective value of the current position; greater is better."""
        ...

    def distance(self, other: Any) -> float:
        """Symmetric, non-negative distance to another candidate."""
        ...


class ParticleCandidate(Protocol):
    """
    Operations the PSO engine needs from a candidate type.

    ``new_random`` must leave ``velocity`` at the additive identity of the
    position type and ``personal_best`` at ``(position, evaluate())``.
    Candidates must also be totally ordered consistently with ``evaluate()``
    (see :class:`EvaluationOrdering`).
    """

    position: Position
    velocity: Position
    personal_best: tuple[Position, Any]

    @classmethod
    def new_random(cls, source: RandomSource) -> ParticleCandidate: ...

    def evaluate(self) -> Any: ...

    def __ge__(self, other: Any) -> bool: ...


class EvaluationOrdering:
    """Mixin ordering candidates by ``evaluate()``; equality is left alone."""

    def __lt__(self, other: EvaluationOrdering) -> bool:
        return self.evaluate() < other.evaluate()

    def __le__(self, other: EvaluationOrdering) -> bool:
        return self.evaluate() <= other.evaluate()

    def __gt__(self, other: EvaluationOrdering) -> bool:
        return self.evaluate() > other.evaluate()

    def __ge__(self, other: EvaluationOrdering) -> bool:
        return self.evaluate() >= other.evaluate()


_FIREFLY_OPERATIONS = ("new_random", "evaluate", "distance")
_PARTICLE_OPERATIONS = ("new_random", "evaluate")


def _missing(candidate_type: type, names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not callable(getattr(candidate_type, name, None))]


def check_firefly_type(candidate_type: type) -> None:
    missing = _missing(candidate_type, _FIREFLY_OPERATIONS)
    if missing:
        raise CandidateContractError(candidate_type, missing, "Firefly")


def check_particle_type(candidate_type: type) -> None:
    missing = _missing(candidate_type, _PARTICLE_OPERATIONS)
    if getattr(candidate_type, "__ge__", None) is object.__ge__:
        missing.append("__ge__")
    if missing:
        raise CandidateContractError(candidate_type, missing, "PSO")


def is_nan_evaluation(value: Any) -> bool:
    """NaN evaluations are never brighter and never selected as best."""
    return isinstance(value, numbers.Real) and math.isnan(value)


__all__ = [
    "Position",
    "FireflyCandidate",
    "ParticleCandidate",
    "EvaluationOrdering",
    "check_firefly_type",
    "check_particle_type",
    "is_nan_evaluation",
]
