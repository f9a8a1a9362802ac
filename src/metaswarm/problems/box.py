"""
Box-bounded candidates over ``numpy`` vectors.

Subclass and set ``lower``/``upper`` at class level, then override
``objective``. Bounds only shape the initial sample; the update rules are
unconstrained.

Example::

    import numpy as np
    from metaswarm import PSO
    from metaswarm.problems import BoxParticle

    class NegSphere(BoxParticle):
        lower = (-5.0, -5.0, -5.0)
        upper = (5.0, 5.0, 5.0)

        def objective(self, x: np.ndarray) -> float:
            return -float(np.sum(x**2))

    swarm = PSO(NegSphere, pop_size=20, inertia=0.7, c_local=1.5, c_global=1.5, source=1)
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple

import numpy as np

from metaswarm.foundation.candidate import EvaluationOrdering
from metaswarm.foundation.random import RandomSource


class _BoxCandidate:
    lower: Sequence[float] = ()
    upper: Sequence[float] = ()

    def __init__(self, position: Any) -> None:
        self.position = np.asarray(position, dtype=float)

    @classmethod
    def bounds(cls) -> Tuple[np.ndarray, np.ndarray]:
        lower = np.asarray(cls.lower, dtype=float)
        upper = np.asarray(cls.upper, dtype=float)
        if lower.ndim != 1 or lower.shape != upper.shape or lower.size == 0:
            raise ValueError(f"{cls.__name__} needs 1-D lower/upper bounds of equal, non-zero length")
        if np.any(upper < lower):
            raise ValueError(f"{cls.__name__}: every upper bound must be >= the matching lower bound")
        return lower, upper

    @classmethod
    def sample(cls, source: RandomSource) -> np.ndarray:
        lower, upper = cls.bounds()
        draws = np.array([source.uniform01() for _ in range(lower.size)])
        return lower + draws * (upper - lower)

    def objective(self, x: np.ndarray) -> float:
        raise NotImplementedError

    def evaluate(self) -> float:
        return float(self.objective(self.position))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class BoxFirefly(_BoxCandidate):
    """Firefly with a vector position and Euclidean distance."""

    @classmethod
    def new_random(cls, source: RandomSource) -> BoxFirefly:
        return cls(cls.sample(source))

    def distance(self, other: BoxFirefly) -> float:
        return float(np.linalg.norm(self.position - other.position))


class BoxParticle(EvaluationOrdering, _BoxCandidate):
    """Particle with vector position/velocity, starting at rest."""

    def __init__(self, position: Any) -> None:
        super().__init__(position)
        self.velocity = np.zeros_like(self.position)
        self.personal_best = (self.position.copy(), self.evaluate())

    @classmethod
    def new_random(cls, source: RandomSource) -> BoxParticle:
        return cls(cls.sample(source))


__all__ = ["BoxFirefly", "BoxParticle"]
