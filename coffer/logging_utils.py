"""Mini README: Application-wide logging helpers for Coffer.

Structure:
    * get_logger - factory returning module loggers with shared formatting.
    * configure_root_logger - one-shot root logger setup.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The root handler is
    attached exactly once so reloading modules under ``uvicorn --reload`` does
    not duplicate log lines.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[int] = None) -> None:
    """Attach a timestamped stream handler to the root logger once.

    Later calls only adjust the level, and only when one is given.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def level_for_environment(environment: str) -> int:
    """Map an environment label onto a logging level."""

    if environment.strip().lower() in {"development", "dev", "test"}:
        return logging.DEBUG
    return logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
