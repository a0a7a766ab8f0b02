"""Logging setup for applications embedding menukit."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import MenuConfig


_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


def configure_logging(level: int | str = logging.INFO, stream: Optional[logging.Handler] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Logging level, numeric or a name such as ``"DEBUG"``.
    stream:
        Optional handler. When omitted a handler pointing to ``sys.stdout`` is
        used.
    """

    root_logger = logging.getLogger()
    if stream is None:
        handler: logging.Handler = logging.StreamHandler(sys.stdout)
    else:
        handler = stream

    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    # Repeated calls replace the handler instead of duplicating output.
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    root_logger.addHandler(handler)


def configure_logging_from_config(config: "MenuConfig", stream: Optional[logging.Handler] = None) -> None:
    """Apply ``config.log_level`` to the root logger."""

    configure_logging(config.log_level, stream)


__all__ = ["configure_logging", "configure_logging_from_config"]
