"""
Runtime settings and logging setup.

Settings are read from the environment so that the library and the GraphQL
service can be tuned without code changes:
- MCPRICING_TIME_TOLERANCE: tolerance used when matching times to the
  simulation time grid and tenor structure.
- MCPRICING_LOG_LEVEL: level for the package logger (e.g. "DEBUG").
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

PACKAGE_LOGGER = "mcpricing"


@dataclass(frozen=True)
class Settings:
    """Library settings (see module docstring for the environment variables)."""

    time_tolerance: float = 1e-10
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build Settings from the environment, falling back to defaults."""
    tolerance = os.environ.get("MCPRICING_TIME_TOLERANCE")
    level = os.environ.get("MCPRICING_LOG_LEVEL", Settings.log_level)
    if tolerance is None:
        return Settings(log_level=level.upper())
    value = float(tolerance)
    if value < 0:
        raise ValueError("MCPRICING_TIME_TOLERANCE must be >= 0")
    return Settings(time_tolerance=value, log_level=level.upper())


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a timestamped stream handler to the package logger.

    Calling this more than once only updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else load_settings().log_level)
    return logger
