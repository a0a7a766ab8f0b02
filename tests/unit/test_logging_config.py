"""Tests for :mod:`menukit.logging_config`."""

from __future__ import annotations

import logging
from io import StringIO

from menukit.config import MenuConfig
from menukit.logging_config import configure_logging, configure_logging_from_config


def test_configure_logging_sets_handler() -> None:
    """Given a custom stream When configure_logging is called Then logs are formatted and directed there."""

    stream = StringIO()
    handler = logging.StreamHandler(stream)

    configure_logging(level=logging.DEBUG, stream=handler)

    logger = logging.getLogger("demo")
    logger.debug("hello")

    contents = stream.getvalue()
    assert "hello" in contents
    assert "demo" in contents
    assert " | DEBUG | " in contents


def test_configure_logging_accepts_level_names() -> None:
    stream = StringIO()

    configure_logging(level="warning", stream=logging.StreamHandler(stream))
    configure_logging(level="warning", stream=logging.StreamHandler(stream))

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_configure_logging_from_config_applies_log_level() -> None:
    """Given a MenuConfig When logging is configured from it Then its log level filters records."""

    stream = StringIO()
    config = MenuConfig(log_level="error")

    configure_logging_from_config(config, stream=logging.StreamHandler(stream))

    logger = logging.getLogger("menukit.demo")
    logger.warning("dropped")
    logger.error("kept")

    assert logging.getLogger().level == logging.ERROR
    assert "dropped" not in stream.getvalue()
    assert "kept" in stream.getvalue()
