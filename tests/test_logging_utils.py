"""Mini README: Tests for the shared logging helpers."""

from __future__ import annotations

import logging

from flightnet.logging_utils import LOG_FORMAT, configure_root_logger, get_logger


def _flightnet_handlers():
    return [
        handler
        for handler in logging.getLogger().handlers
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT
    ]


def test_root_handler_installed_once() -> None:
    get_logger("flightnet.a")
    configure_root_logger()
    configure_root_logger(logging.DEBUG)
    get_logger("flightnet.b")

    assert len(_flightnet_handlers()) == 1


def test_reconfigure_adjusts_level() -> None:
    original = logging.getLogger().level
    try:
        configure_root_logger(logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
    finally:
        logging.getLogger().setLevel(original)


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("flightnet.network").name == "flightnet.network"
