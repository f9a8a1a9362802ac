"""
metaswarm: gradient-free population search engines.

Two engines share one shape: a candidate contract the caller implements, a
fixed-size population, and a synchronous ``update()`` step the caller drives.

- :class:`Firefly`: attraction towards strictly brighter neighbours.
- :class:`PSO`: global-best particle swarm with a stagnation signal.
"""

from .algorithm import PSO, Firefly, FireflyConfig, PSOConfig, RunResult, run
from .foundation import (
    CandidateContractError,
    ConfigurationError,
    EvaluationOrdering,
    InvalidHyperparameterError,
    InvalidPopulationSizeError,
    LoggingObserver,
    MetaswarmError,
    NonFiniteEvaluationError,
    OptimizationError,
    RandomSource,
    UniformSource,
    configure_metaswarm_logging,
)
from .foundation.version import get_version

__all__ = [
    "PSO",
    "Firefly",
    "FireflyConfig",
    "PSOConfig",
    "RunResult",
    "run",
    "CandidateContractError",
    "ConfigurationError",
    "EvaluationOrdering",
    "InvalidHyperparameterError",
    "InvalidPopulationSizeError",
    "LoggingObserver",
    "MetaswarmError",
    "NonFiniteEvaluationError",
    "OptimizationError",
    "RandomSource",
    "UniformSource",
    "configure_metaswarm_logging",
    "get_version",
]
