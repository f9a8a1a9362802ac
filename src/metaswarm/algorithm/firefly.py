"""
Firefly attraction search.

Each sweep compares every ordered pair of fireflies. A firefly moves towards a
strictly brighter one by ``beta * exp(-absorption * d**2)`` of the gap between
them. Moves are computed from the generation being read and written to a
staging copy, so a firefly that sees several brighter neighbours in one sweep
ends up where the last of them (in index order) pulls it; earlier pulls are
overwritten rather than summed. No random jitter is added to the move.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, Sequence, Tuple, TypeVar

import numpy as np

from metaswarm.algorithm.config import FireflyConfig
from metaswarm.foundation.candidate import FireflyCandidate, check_firefly_type, is_nan_evaluation
from metaswarm.foundation.random import RandomSource, resolve_source

C = TypeVar("C", bound=FireflyCandidate)

_logger = logging.getLogger(__name__)


def attractiveness(beta: float, absorption: float, distance: float) -> float:
    return float(beta * np.exp(-absorption * distance * distance))


class Firefly(Generic[C]):
    """
    Firefly engine over a user-supplied candidate type.

    Example::

        engine = Firefly(ScalarFirefly, pop_size=16, beta=0.5, absorption=0.2)
        for _ in range(30):
            engine.update()
        candidate, brightness = engine.best
    """

    def __init__(
        self,
        candidate_type: type[C],
        pop_size: int,
        beta: float,
        absorption: float,
        *,
        source: RandomSource | int | None = None,
    ) -> None:
        self.cfg = FireflyConfig(pop_size=pop_size, beta=beta, absorption=absorption)
        check_firefly_type(candidate_type)
        self.candidate_type = candidate_type
        self.source = resolve_source(source)
        self.step_count = 0

        fireflies: list[Tuple[C, Any]] = []
        for _ in range(self.cfg.pop_size):
            ff = candidate_type.new_random(self.source)
            fireflies.append((ff, ff.evaluate()))
        self._fireflies = fireflies
        _logger.debug(
            "Firefly initialised: %d x %s, beta=%s, absorption=%s",
            self.cfg.pop_size,
            candidate_type.__name__,
            self.cfg.beta,
            self.cfg.absorption,
        )

    @classmethod
    def from_config(
        cls,
        candidate_type: type[C],
        config: FireflyConfig,
        *,
        source: RandomSource | int | None = None,
    ) -> Firefly[C]:
        return cls(candidate_type, config.pop_size, config.beta, config.absorption, source=source)

    @property
    def pop_size(self) -> int:
        return self.cfg.pop_size

    @property
    def beta(self) -> float:
        return self.cfg.beta

    @property
    def absorption(self) -> float:
        return self.cfg.absorption

    @property
    def fireflies(self) -> Sequence[Tuple[C, Any]]:
        """Index-ordered ``(candidate, evaluation)`` pairs of the current generation."""
        return tuple(self._fireflies)

    @property
    def best(self) -> Tuple[C, Any]:
        """
        Brightest ``(candidate, evaluation)`` of the current generation.

        Later indices win ties and NaN evaluations are never selected; if every
        evaluation is NaN the first firefly is returned.
        """
        best_idx = 0
        best_eval = None
        for idx, (_, e) in enumerate(self._fireflies):
            if is_nan_evaluation(e):
                continue
            if best_eval is None or e >= best_eval:
                best_idx, best_eval = idx, e
        return self._fireflies[best_idx]

    def update(self) -> None:
        """Run one full attraction sweep and swap in the new generation."""
        current = self._fireflies
        staged = [(copy.deepcopy(ff), e) for ff, e in current]
        n = len(current)
        moved = 0

        for i in range(n):
            ff_i, e_i = current[i]
            for j in range(n):
                ff_j, e_j = current[j]
                if e_j > e_i:
                    pull = attractiveness(self.cfg.beta, self.cfg.absorption, ff_i.distance(ff_j))
                    target = staged[i][0]
                    # Always from the original positions: the last brighter j overwrites earlier moves.
                    target.position = ff_i.position + (ff_j.position - ff_i.position) * pull
                    staged[i] = (target, target.evaluate())
                    moved += 1

        self._fireflies = staged
        self.step_count += 1
        _logger.debug("Firefly step %d: %d attraction moves", self.step_count, moved)


__all__ = ["Firefly", "attractiveness"]
