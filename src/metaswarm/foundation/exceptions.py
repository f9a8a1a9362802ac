"""
metaswarm exception hierarchy.

All metaswarm-specific exceptions inherit from MetaswarmError for easy catching.

Example:
    try:
        engine = PSO(MyParticle, pop_size=0, inertia=0.7, c_local=1.5, c_global=1.5)
    except MetaswarmError as e:
        print(f"Setup failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MetaswarmError(Exception):
    """
    Base exception for all metaswarm errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MetaswarmError):
    """Raised when engine or run configuration is invalid."""

    pass


class InvalidPopulationSizeError(ConfigurationError):
    """Raised when the population size is not a positive integer."""

    def __init__(self, pop_size: Any) -> None:
        message = f"Population size must be a positive integer, got {pop_size!r}."
        suggestion = "Use pop_size >= 1; a swarm needs at least one candidate to select a best from."
        super().__init__(message, suggestion, {"pop_size": pop_size})


class InvalidHyperparameterError(ConfigurationError):
    """Raised when a hyperparameter is not a finite real number."""

    def __init__(self, name: str, value: Any) -> None:
        message = f"Hyperparameter '{name}' must be a finite real number, got {value!r}."
        super().__init__(message, None, {"name": name, "value": value})


class InvalidRandomSourceError(ConfigurationError):
    """Raised when an engine is given something it cannot draw random numbers from."""

    def __init__(self, source: Any) -> None:
        kind = type(source).__name__
        message = f"Expected a RandomSource with uniform01(), got {kind}."
        suggestion = "Pass an object with a uniform01() method, an integer seed, a numpy Generator, or None."
        super().__init__(message, suggestion, {"source_type": kind})


# =============================================================================
# Candidate Errors
# =============================================================================


class CandidateContractError(MetaswarmError):
    """Raised when a candidate type does not provide the operations an engine needs."""

    def __init__(self, candidate_type: Any, missing: list[str], engine: str) -> None:
        name = getattr(candidate_type, "__name__", repr(candidate_type))
        message = f"Candidate type '{name}' cannot be used with {engine}: missing {', '.join(missing)}."
        suggestion = f"Implement {', '.join(missing)} on '{name}' (see metaswarm.foundation.candidate)."
        super().__init__(message, suggestion, {"candidate_type": name, "missing": missing, "engine": engine})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(MetaswarmError):
    """Raised when optimization fails during execution."""

    pass


class NonFiniteEvaluationError(OptimizationError):
    """Raised when no candidate has an orderable (non-NaN) evaluation."""

    def __init__(self, pop_size: int) -> None:
        message = f"All {pop_size} candidates evaluated to NaN; no best candidate can be selected."
        suggestion = "Make the objective return a well-ordered value over the whole sampling domain."
        super().__init__(message, suggestion, {"pop_size": pop_size})


__all__ = [
    "MetaswarmError",
    "ConfigurationError",
    "InvalidPopulationSizeError",
    "InvalidHyperparameterError",
    "InvalidRandomSourceError",
    "CandidateContractError",
    "OptimizationError",
    "NonFiniteEvaluationError",
]
