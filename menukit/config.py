"""Configuration helpers for menu rendering."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .renderer import DEFAULT_MAX_DEPTH

_LOGGER = logging.getLogger(__name__)

_ENV_PREFIX = "MENUKIT_"


class MenuConfig(BaseModel):
    """Defaults applied when renderers are built from configuration."""

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        description="Number of nested list levels rendered",
    )
    log_level: str = Field(
        default="INFO",
        description="Desired logging verbosity",
    )

    @field_validator("max_depth", mode="before")
    @classmethod
    def _ensure_depth(cls, value: Any) -> int:
        if value is None or value == "":
            return DEFAULT_MAX_DEPTH
        depth = int(value)
        if depth < 1:
            raise ValueError("max_depth must be at least 1")
        return depth

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: str | None) -> str:
        return (value or "INFO").strip().upper()

    @classmethod
    def load(cls, path: Path | None = None, *, env_file: Path | None = None) -> "MenuConfig":
        """Load configuration from an optional JSON file and environment overrides."""

        load_dotenv(env_file or find_dotenv(usecwd=True))
        data: Dict[str, Any] = {}

        if path is not None and path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning("Unable to decode menu config at %s: %s", path, exc)
                data = {}

        for field_name in ("max_depth", "log_level"):
            env_value = os.environ.get(f"{_ENV_PREFIX}{field_name.upper()}")
            if env_value is not None:
                data[field_name] = env_value

        return cls(**{key: data[key] for key in ("max_depth", "log_level") if key in data})


def load_menu_config(path: Path | None = None, *, env_file: Path | None = None) -> MenuConfig:
    """Helper to load the menu configuration."""

    return MenuConfig.load(path, env_file=env_file)


__all__ = ["MenuConfig", "load_menu_config"]
