"""Shared logging helpers for bindmap."""

from __future__ import annotations

import logging

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def trace(
    logger: logging.Logger | logging.LoggerAdapter[logging.Logger],
    msg: str,
    *args: object,
) -> None:
    """Log ``msg`` below DEBUG, for per-item decisions that are noisy even when debugging."""

    logger.log(TRACE, msg, *args)
