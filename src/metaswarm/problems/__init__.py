"""
Ready-made candidate types.
"""

from .box import BoxFirefly, BoxParticle
from .scalar import ScalarFirefly, ScalarParticle, polynomial

__all__ = ["BoxFirefly", "BoxParticle", "ScalarFirefly", "ScalarParticle", "polynomial"]
