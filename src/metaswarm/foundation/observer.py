from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@runtime_checkable
class StepObserver(Protocol):
    """
    Observer interface for the run driver.
    Reacts to lifecycle events of a stepped optimization run.
    """

    def on_start(self, engine: Any) -> None:
        """Called once, before the first step."""
        ...

    def on_step(self, step: int, best_evaluation: Any, stagnated: bool | None) -> None:
        """Called after every completed step; ``stagnated`` is None for engines without the signal."""
        ...

    def on_end(self, result: Any) -> None:
        """Called once with the final RunResult."""
        ...


class NullObserver:
    """Observer that ignores every event."""

    def on_start(self, engine: Any) -> None:
        return None

    def on_step(self, step: int, best_evaluation: Any, stagnated: bool | None) -> None:
        return None

    def on_end(self, result: Any) -> None:
        return None


class LoggingObserver:
    """
    Observer that reports run progress through the ``metaswarm`` logger.

    Logs every ``every``-th step at INFO; the first and last steps are always logged.
    """

    def __init__(self, every: int = 1) -> None:
        self.every = max(1, int(every))

    def on_start(self, engine: Any) -> None:
        _logger().info("%s", "-" * 60)
        _logger().info("Engine: %s", type(engine).__name__)
        _logger().info("Population size: %s", getattr(engine, "pop_size", "?"))
        _logger().info("%s", "-" * 60)

    def on_step(self, step: int, best_evaluation: Any, stagnated: bool | None) -> None:
        if step == 1 or step % self.every == 0:
            suffix = " (stagnated)" if stagnated else ""
            _logger().info("step %d: best=%s%s", step, best_evaluation, suffix)

    def on_end(self, result: Any) -> None:
        _logger().info(
            "Finished after %s steps, best=%s%s",
            result.steps,
            result.best_evaluation,
            " (stopped early)" if result.stopped_early else "",
        )


class CompositeObserver:
    """Fans out events to multiple observers."""

    def __init__(self, observers: list[StepObserver | None]):
        self.observers = [o for o in observers if o is not None]

    def on_start(self, engine: Any) -> None:
        for obs in self.observers:
            obs.on_start(engine)

    def on_step(self, step: int, best_evaluation: Any, stagnated: bool | None) -> None:
        for obs in self.observers:
            obs.on_step(step, best_evaluation, stagnated)

    def on_end(self, result: Any) -> None:
        for obs in self.observers:
            obs.on_end(result)

    def should_stop(self) -> bool:
        # should_stop is optional on observers
        for obs in self.observers:
            if hasattr(obs, "should_stop") and obs.should_stop():
                return True
        return False


__all__ = ["StepObserver", "NullObserver", "LoggingObserver", "CompositeObserver"]
