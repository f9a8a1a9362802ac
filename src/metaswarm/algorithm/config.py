from __future__ import annotations

import json
import math
import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Tuple

from metaswarm.foundation.exceptions import (
    ConfigurationError,
    InvalidHyperparameterError,
    InvalidPopulationSizeError,
)


class _SerializableConfig:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            joined = ", ".join(unknown)
            raise ConfigurationError(
                f"{cls.__name__} got unknown fields: {joined}",
                f"Valid fields: {', '.join(sorted(known))}",
            )
        return cls(**dict(data))


def validate_pop_size(value: Any) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidPopulationSizeError(value)
    return int(value)


def validate_real(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InvalidHyperparameterError(name, value)
    return float(value)


def _validate(cfg: _SerializableConfig, reals: Tuple[str, ...]) -> None:
    object.__setattr__(cfg, "pop_size", validate_pop_size(cfg.pop_size))
    for name in reals:
        object.__setattr__(cfg, name, validate_real(name, getattr(cfg, name)))


@dataclass(frozen=True)
class FireflyConfig(_SerializableConfig):
    """
    Firefly engine settings.

    ``beta`` is the attractiveness at zero distance and ``absorption`` the
    light-absorption coefficient in ``beta * exp(-absorption * d**2)``.
    """

    pop_size: int
    beta: float = 1.0
    absorption: float = 1.0

    def __post_init__(self) -> None:
        _validate(self, ("beta", "absorption"))


@dataclass(frozen=True)
class PSOConfig(_SerializableConfig):
    """
    Particle swarm settings.

    ``c_local`` pulls towards each particle's personal best, ``c_global``
    towards the swarm's global best.
    """

    pop_size: int
    inertia: float = 0.7
    c_local: float = 1.5
    c_global: float = 1.5

    def __post_init__(self) -> None:
        _validate(self, ("inertia", "c_local", "c_global"))


__all__ = ["FireflyConfig", "PSOConfig", "validate_pop_size", "validate_real"]
