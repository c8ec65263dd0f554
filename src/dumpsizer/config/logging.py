"""Shared logging helpers."""

from __future__ import annotations

import logging

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Initialise the root logger for CLI runs.

    INFO by default, DEBUG with ``verbose``. HTTP client request logs stay at
    WARNING unless ``verbose`` is set. Pass ``force=True`` to reconfigure an
    already initialised root logger.
    """

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if verbose else logging.WARNING)
