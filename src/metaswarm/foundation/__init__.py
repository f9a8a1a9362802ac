"""
Foundation layer: candidate contracts, random source, errors and logging.
"""

from .candidate import (
    EvaluationOrdering,
    FireflyCandidate,
    ParticleCandidate,
    Position,
    check_firefly_type,
    check_particle_type,
    is_nan_evaluation,
)
from .exceptions import (
    CandidateContractError,
    ConfigurationError,
    InvalidHyperparameterError,
    InvalidPopulationSizeError,
    InvalidRandomSourceError,
    MetaswarmError,
    NonFiniteEvaluationError,
    OptimizationError,
)
from .logging import configure_metaswarm_logging
from .observer import CompositeObserver, LoggingObserver, NullObserver, StepObserver
from .random import RandomSource, UniformSource, resolve_source

__all__ = [
    "EvaluationOrdering",
    "FireflyCandidate",
    "ParticleCandidate",
    "Position",
    "check_firefly_type",
    "check_particle_type",
    "is_nan_evaluation",
    "CandidateContractError",
    "ConfigurationError",
    "InvalidHyperparameterError",
    "InvalidPopulationSizeError",
    "InvalidRandomSourceError",
    "MetaswarmError",
    "NonFiniteEvaluationError",
    "OptimizationError",
    "configure_metaswarm_logging",
    "CompositeObserver",
    "LoggingObserver",
    "NullObserver",
    "StepObserver",
    "RandomSource",
    "UniformSource",
    "resolve_source",
]
