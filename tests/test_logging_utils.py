"""Mini README: Tests for the shared logging helpers."""

from __future__ import annotations

import logging
import logging.config

from foodcorner.logging_utils import (
    LOG_FORMAT,
    configure_root_logger,
    get_logger,
    level_for_environment,
    uvicorn_log_config,
)


def test_level_for_environment_maps_known_labels() -> None:
    assert level_for_environment("development") == logging.DEBUG
    assert level_for_environment(" Production ") == logging.WARNING
    assert level_for_environment("staging") == logging.INFO


def test_configure_root_logger_adds_a_single_handler() -> None:
    """Reconfiguring only changes the level, never stacks handlers."""

    root = logging.getLogger()
    original_level = root.level
    get_logger(__name__)
    handlers_before = list(root.handlers)
    try:
        configure_root_logger(logging.WARNING)
        configure_root_logger(logging.DEBUG)

        assert root.level == logging.DEBUG
        assert root.handlers == handlers_before
    finally:
        root.setLevel(original_level)


def test_uvicorn_log_config_shares_format() -> None:
    config = uvicorn_log_config(logging.WARNING)

    assert config["formatters"]["default"]["format"] == LOG_FORMAT
    assert config["loggers"]["uvicorn.access"]["level"] == "WARNING"
    logging.config.dictConfig(config)
    assert logging.getLogger("uvicorn").level == logging.WARNING
