"""Exceptions raised by menukit."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a menu is constructed or rendered with an invalid argument."""


__all__ = ["InvalidArgumentError"]
