"""
Version helpers for metaswarm.
"""

from __future__ import annotations

from importlib import metadata as importlib_metadata

_VERSION: str | None = None


def get_version() -> str:
    global _VERSION
    if _VERSION is not None:
        return _VERSION
    try:
        _VERSION = importlib_metadata.version("metaswarm")
    except importlib_metadata.PackageNotFoundError:  # pragma: no cover
        _VERSION = "0.0.0+unknown"
    return _VERSION


__all__ = ["get_version"]
