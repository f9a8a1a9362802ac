"""
Population-based search engines and their configuration.
"""

from .config import FireflyConfig, PSOConfig
from .driver import RunResult, run
from .firefly import Firefly, attractiveness
from .pso import PSO, select_best

__all__ = [
    "FireflyConfig",
    "PSOConfig",
    "RunResult",
    "run",
    "Firefly",
    "attractiveness",
    "PSO",
    "select_best",
]
