"""Content values accepted by labels and badges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text, escaped and wrapped by the renderer."""

    value: str


@dataclass(frozen=True, slots=True)
class Component:
    """A pre-built renderable exposing ``__html__``."""

    handle: Any


@dataclass(frozen=True, slots=True)
class Callback:
    """A callable producing content for the active render pass."""

    fn: Callable[[Any], Any]


Content = Text | Component | Callback


def is_renderable(value: Any) -> bool:
    """Return ``True`` when ``value`` is an instance exposing ``__html__``."""

    return not isinstance(value, type) and callable(getattr(value, "__html__", None))


def as_content(value: Any) -> Content | None:
    """Classify ``value`` once, at the point the caller hands it over."""

    if value is None:
        return None
    if isinstance(value, (Text, Component, Callback)):
        return value
    if is_renderable(value):
        return Component(value)
    if isinstance(value, str):
        return Text(value)
    if callable(value):
        return Callback(value)
    return Text(str(value))


def raw_value(content: Content | None) -> Any:
    """Return the value originally supplied for ``content``."""

    if content is None:
        return None
    if isinstance(content, Text):
        return content.value
    if isinstance(content, Component):
        return content.handle
    return content.fn


__all__ = ["Callback", "Component", "Content", "Text", "as_content", "is_renderable", "raw_value"]
