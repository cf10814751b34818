"""Mini README: Application-wide logging helpers for Food Corner.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - attach the shared handler and set the global level.
    * level_for_environment - map the configured environment label to a level.
    * uvicorn_log_config - dictConfig so server logs share the ledger's format.

Usage:
    Modules keep a module-level ``LOGGER = get_logger(__name__)``. The launcher
    calls ``configure_root_logger(level_for_environment(...))`` once settings
    are loaded and passes ``uvicorn_log_config()`` to the server.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ENVIRONMENT_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.INFO,
    "production": logging.WARNING,
}

_HANDLER: Optional[logging.Handler] = None


def level_for_environment(environment: str) -> int:
    """Return the root level for an environment label; unknown labels log at INFO."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: int = logging.INFO) -> None:
    """Set the root level, adding the shared stream handler on first use only."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(_HANDLER)


def uvicorn_log_config(level: int = logging.INFO) -> Dict[str, Any]:
    """Build a ``logging.config.dictConfig`` payload for uvicorn's loggers."""

    level_name = logging.getLevelName(level)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level_name, "propagate": False},
            "uvicorn.error": {"level": level_name},
            "uvicorn.access": {"handlers": ["default"], "level": level_name, "propagate": False},
        },
    }


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger, configuring the root logger if needed."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
