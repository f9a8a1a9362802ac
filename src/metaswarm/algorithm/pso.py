"""
Particle Swarm Optimization with a single global best.

One step runs three population-wide passes, each finishing for every particle
before the next begins:

1. position += velocity (velocity left over from the previous step)
2. velocity = inertia * velocity
              + c_local * r1 * (personal_best - position)
              + c_global * r2 * (global_best - position)
   with one (r1, r2) pair per particle, shared by every dimension, and the
   global best frozen at the end of the previous step
3. personal best replaced when the new evaluation is strictly better, or when
   the stored best is NaN and the new evaluation is not

The global best is then recomputed from the current positions and only
replaced when strictly better, so its evaluation never decreases.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Generic, Iterable, Sequence, Tuple, TypeVar

from metaswarm.algorithm.config import PSOConfig
from metaswarm.foundation.candidate import ParticleCandidate, check_particle_type, is_nan_evaluation
from metaswarm.foundation.exceptions import NonFiniteEvaluationError
from metaswarm.foundation.random import RandomSource, resolve_source

C = TypeVar("C", bound=ParticleCandidate)

_logger = logging.getLogger(__name__)


def select_best(particles: Iterable[C]) -> Tuple[C, Any] | None:
    """
    Left-to-right max reduction using the candidates' own ordering.

    Later particles win ties. Particles evaluating to NaN are skipped; returns
    None when nothing is left.
    """
    best = None
    best_eval = None
    for idx, p in enumerate(particles):
        e = p.evaluate()
        if is_nan_evaluation(e):
            _logger.debug("Skipping particle %d with NaN evaluation", idx)
            continue
        if best is None or p >= best:
            best, best_eval = p, e
    if best is None:
        return None
    return best, best_eval


class PSO(Generic[C]):
    """
    Global-best particle swarm over a user-supplied candidate type.

    Example::

        swarm = PSO(ScalarParticle, pop_size=8, inertia=0.9, c_local=0.9, c_global=0.9)
        for _ in range(10):
            swarm.update()
        particle, value = swarm.best
    """

    def __init__(
        self,
        candidate_type: type[C],
        pop_size: int,
        inertia: float,
        c_local: float,
        c_global: float,
        *,
        source: RandomSource | int | None = None,
    ) -> None:
        self.cfg = PSOConfig(pop_size=pop_size, inertia=inertia, c_local=c_local, c_global=c_global)
        check_particle_type(candidate_type)
        self.candidate_type = candidate_type
        self.source = resolve_source(source)
        self.step_count = 0
        self.stagnation_streak = 0

        self._particles: list[C] = [candidate_type.new_random(self.source) for _ in range(self.cfg.pop_size)]
        initial = select_best(self._particles)
        if initial is None:
            raise NonFiniteEvaluationError(self.cfg.pop_size)
        self._best: Tuple[C, Any] = (copy.deepcopy(initial[0]), initial[1])
        _logger.debug(
            "PSO initialised: %d x %s, inertia=%s, c_local=%s, c_global=%s, best=%s",
            self.cfg.pop_size,
            candidate_type.__name__,
            self.cfg.inertia,
            self.cfg.c_local,
            self.cfg.c_global,
            self._best[1],
        )

    @classmethod
    def from_config(
        cls,
        candidate_type: type[C],
        config: PSOConfig,
        *,
        source: RandomSource | int | None = None,
    ) -> PSO[C]:
        return cls(
            candidate_type,
            config.pop_size,
            config.inertia,
            config.c_local,
            config.c_global,
            source=source,
        )

    @property
    def pop_size(self) -> int:
        return self.cfg.pop_size

    @property
    def particles(self) -> Sequence[C]:
        """Live particles in index order."""
        return tuple(self._particles)

    @property
    def best(self) -> Tuple[C, Any]:
        """Snapshot of the best particle found so far and its evaluation."""
        return self._best

    def update(self) -> bool:
        """
        Advance the swarm by one step.

        Returns:
            True when the step failed to strictly improve on the cached global
            best (stagnation), False when the global best was replaced.
        """
        particles = self._particles
        inertia, c_local, c_global = self.cfg.inertia, self.cfg.c_local, self.cfg.c_global

        for p in particles:
            p.position = p.position + p.velocity

        global_pos = self._best[0].position
        for p in particles:
            r1 = self.source.uniform01()
            r2 = self.source.uniform01()
            p.velocity = (
                p.velocity * inertia
                + (p.personal_best[0] - p.position) * (c_local * r1)
                + (global_pos - p.position) * (c_global * r2)
            )

        for p in particles:
            e = p.evaluate()
            stored = p.personal_best[1]
            # a NaN personal best gives way to the first orderable evaluation
            if e > stored or (is_nan_evaluation(stored) and not is_nan_evaluation(e)):
                p.personal_best = (copy.copy(p.position), e)

        self.step_count += 1
        candidate = select_best(particles)
        if candidate is not None and candidate[1] > self._best[1]:
            _logger.debug("PSO step %d: global best %s -> %s", self.step_count, self._best[1], candidate[1])
            self._best = (copy.deepcopy(candidate[0]), candidate[1])
            self.stagnation_streak = 0
            return False

        self.stagnation_streak += 1
        return True


__all__ = ["PSO", "select_best"]
