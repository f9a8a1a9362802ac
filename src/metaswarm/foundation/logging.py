from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(name)s %(levelname)s: %(message)s"


def configure_metaswarm_logging(*, level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> None:
    """
    Attach a console handler to the "metaswarm" logger.

    Records carry the emitting module (``metaswarm.algorithm.pso``,
    ``metaswarm.algorithm.firefly``, ...) so engine DEBUG output can be told
    apart from driver progress.

    Library code never calls this or logging.basicConfig(); nothing happens
    when the root logger or the "metaswarm" logger already has handlers.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger("metaswarm")

    if root.handlers or package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


__all__ = ["DEFAULT_FORMAT", "configure_metaswarm_logging"]
