"""Declarative menu trees rendered to HTML with depth-aware theming."""

from __future__ import annotations

from .badge import Badge
from .builder import MenuBuilder
from .config import MenuConfig, load_menu_config
from .content import Callback, Component, Text
from .errors import InvalidArgumentError
from .item import Item
from .logging_config import configure_logging, configure_logging_from_config
from .renderer import DEFAULT_MAX_DEPTH, MenuRenderer, RenderPass, RenderSteps
from .theme import Depthwise, Static, Theme, tokens

__all__ = [
    "Badge",
    "Callback",
    "Component",
    "DEFAULT_MAX_DEPTH",
    "Depthwise",
    "InvalidArgumentError",
    "Item",
    "MenuBuilder",
    "MenuConfig",
    "MenuRenderer",
    "RenderPass",
    "RenderSteps",
    "Static",
    "Text",
    "Theme",
    "configure_logging",
    "configure_logging_from_config",
    "load_menu_config",
    "tokens",
]
