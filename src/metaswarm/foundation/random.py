"""
Uniform random draws on the closed interval [0, 1].

Engines take one of these as a collaborator instead of seeding anything
themselves; reproducibility is owned by whoever builds the source.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from .exceptions import InvalidRandomSourceError

# 2**53 is the number of evenly spaced doubles a 53-bit mantissa can resolve in [0, 1].
_CLOSED_SCALE = 2**53


@runtime_checkable
class RandomSource(Protocol):
    """Supplies independent uniform draws in the closed interval [0, 1]."""

    def uniform01(self) -> float: ...


class UniformSource:
    """
    Default random source backed by ``numpy.random.Generator``.

    ``Generator.random()`` samples the half-open interval [0, 1), so draws are
    taken as integers in ``[0, 2**53]`` (inclusive) and rescaled, which makes
    both endpoints reachable.
    """

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        if isinstance(seed, np.random.Generator):
            self.rng = seed
        else:
            self.rng = np.random.default_rng(seed)

    def uniform01(self) -> float:
        return int(self.rng.integers(0, _CLOSED_SCALE, endpoint=True)) / _CLOSED_SCALE


def resolve_source(source: RandomSource | int | None) -> RandomSource:
    """Accept a ready source, a seed, or ``None`` (fresh OS entropy)."""
    if source is None or isinstance(source, (int, np.integer, np.random.Generator)):
        return UniformSource(source)
    if not isinstance(source, RandomSource):
        raise InvalidRandomSourceError(source)
    return source


__all__ = ["RandomSource", "UniformSource", "resolve_source"]
