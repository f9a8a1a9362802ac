from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

import pytest

from metaswarm.foundation.candidate import EvaluationOrdering


class ScriptedSource:
    """Random source replaying a fixed list of draws."""

    def __init__(self, draws: Iterable[float]):
        self.draws = list(draws)
        self.calls = 0

    def uniform01(self) -> float:
        if self.calls >= len(self.draws):
            raise AssertionError(f"ScriptedSource exhausted after {self.calls} draws")
        value = self.draws[self.calls]
        self.calls += 1
        return value


@dataclass
class LinearFirefly:
    """Firefly whose brightness equals its position; draws are used as-is."""

    position: float

    @classmethod
    def new_random(cls, source) -> LinearFirefly:
        return cls(position=source.uniform01())

    def evaluate(self) -> float:
        return self.position

    def distance(self, other: LinearFirefly) -> float:
        return abs(self.position - other.position)


@dataclass
class QuadParticle(EvaluationOrdering):
    """Particle on [-1, 1] maximising -x**2."""

    position: float
    velocity: float = 0.0
    personal_best: Tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if self.personal_best is None:
            self.personal_best = (self.position, self.evaluate())

    @classmethod
    def new_random(cls, source) -> QuadParticle:
        return cls(position=2.0 * source.uniform01() - 1.0)

    def evaluate(self) -> float:
        return -(self.position * self.position)


@pytest.fixture
def scripted():
    """Factory for ScriptedSource instances."""
    return ScriptedSource


@pytest.fixture
def linear_firefly():
    return LinearFirefly


@pytest.fixture
def quad_particle():
    return QuadParticle
