"""
Step loop shared by both engines.

The engines have no terminal state; ``run`` is a convenience for the common
"step N times, optionally stop after a stagnation streak" loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Protocol, Tuple

from metaswarm.foundation.exceptions import ConfigurationError
from metaswarm.foundation.observer import CompositeObserver, StepObserver


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class SteppableEngine(Protocol):
    pop_size: int

    @property
    def best(self) -> Tuple[Any, Any]: ...

    def update(self) -> bool | None: ...


@dataclass
class RunResult:
    """Outcome of :func:`run`."""

    best: Tuple[Any, Any]
    history: List[Any] = field(default_factory=list)
    steps: int = 0
    stopped_early: bool = False

    @property
    def best_candidate(self) -> Any:
        return self.best[0]

    @property
    def best_evaluation(self) -> Any:
        return self.best[1]


def run(
    engine: SteppableEngine,
    max_steps: int,
    *,
    patience: int | None = None,
    observer: StepObserver | list[StepObserver] | None = None,
) -> RunResult:
    """
    Step ``engine`` up to ``max_steps`` times.

    Args:
        engine: A Firefly or PSO engine (anything with ``update()`` and ``best``).
        max_steps: Upper bound on the number of steps.
        patience: Stop after this many consecutive steps reported as stagnated.
            Only engines whose ``update()`` returns a boolean report stagnation.
        observer: One observer or a list of them.

    Returns:
        RunResult with the final best pair and the best evaluation after every step.
    """
    if isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 0:
        raise ConfigurationError(f"max_steps must be a non-negative integer, got {max_steps!r}.")
    if patience is not None and (isinstance(patience, bool) or not isinstance(patience, int) or patience < 1):
        raise ConfigurationError(
            f"patience must be a positive integer, got {patience!r}.",
            "Pass patience=None to disable early stopping.",
        )
    observers = observer if isinstance(observer, list) else [observer]
    composite = CompositeObserver(observers)

    _logger().info("Starting %s for up to %d steps", type(engine).__name__, max_steps)
    composite.on_start(engine)

    history: List[Any] = []
    streak = 0
    stopped_early = False
    steps = 0
    for steps in range(1, max_steps + 1):
        stagnated = engine.update()
        best_eval = engine.best[1]
        history.append(best_eval)
        composite.on_step(steps, best_eval, stagnated)

        streak = streak + 1 if stagnated is True else 0
        if patience is not None and streak >= patience:
            _logger().info("Stopping after %d stagnated steps (step %d)", streak, steps)
            stopped_early = True
            break
        if composite.should_stop():
            stopped_early = True
            break

    result = RunResult(best=engine.best, history=history, steps=steps, stopped_early=stopped_early)
    composite.on_end(result)
    return result


__all__ = ["RunResult", "SteppableEngine", "run"]
