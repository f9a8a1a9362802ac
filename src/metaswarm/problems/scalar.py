"""
One-dimensional benchmark candidates.

Both types score ``polynomial(x) = 1 - ((x - 3) * x + 2) * x**2``, whose
maximum (about 1.62) sits near ``x = 1.64``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from metaswarm.foundation.candidate import EvaluationOrdering
from metaswarm.foundation.random import RandomSource


def polynomial(x: float) -> float:
    return 1.0 - ((x - 3.0) * x + 2.0) * x * x


@dataclass
class ScalarFirefly:
    """Firefly sampled uniformly from [-1.5, 2.5]."""

    position: float

    @classmethod
    def new_random(cls, source: RandomSource) -> ScalarFirefly:
        return cls(position=4.0 * source.uniform01() - 1.5)

    def evaluate(self) -> float:
        return polynomial(self.position)

    def distance(self, other: ScalarFirefly) -> float:
        return abs(self.position - other.position)


@dataclass
class ScalarParticle(EvaluationOrdering):
    """Particle sampled uniformly from [-1, 3], starting at rest."""

    position: float
    velocity: float = 0.0
    personal_best: Tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if self.personal_best is None:
            self.personal_best = (self.position, self.evaluate())

    @classmethod
    def new_random(cls, source: RandomSource) -> ScalarParticle:
        return cls(position=4.0 * source.uniform01() - 1.0)

    def evaluate(self) -> float:
        return polynomial(self.position)


__all__ = ["polynomial", "ScalarFirefly", "ScalarParticle"]
