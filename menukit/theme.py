"""Depth-aware theme slots for menu rendering.

A theme maps slot names (``nav``, ``item_label`` ...) to class tokens. Each
slot holds either a static token or a function of the nesting depth::

    class SidebarTheme(Theme):
        slots = {
            "nav": "sidebar",
            "item_label": lambda depth: f"text-gray-{600 + depth * 100}",
        }

Subclasses only declare the slots they customise; everything else is inherited.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping, Sequence, Union

TokenValue = Union[str, Sequence[str], None]


@dataclass(frozen=True, slots=True)
class Static:
    value: TokenValue


@dataclass(frozen=True, slots=True)
class Depthwise:
    fn: Callable[[int], TokenValue]


SlotToken = Union[Static, Depthwise]

BASE_SLOTS: Mapping[str, TokenValue] = MappingProxyType({
    # Containers
    "nav": None,
    "items_container": None,
    # Item structure
    "item_wrapper": None,
    "item_parent": None,  # items with visible children
    "item_link": None,
    "item_span": None,
    "item_label": None,
    # States
    "active": None,
    "hover": None,
    # Badges
    "leading_badge": None,
    "trailing_badge": None,
    "leading_badge_wrapper": None,
    "trailing_badge_wrapper": None,
    # Icons
    "icon": None,
    "icon_wrapper": None,
})


def as_slot_token(value: Any) -> SlotToken:
    """Wrap a declared slot value in its tagged variant."""

    if isinstance(value, (Static, Depthwise)):
        return value
    if callable(value):
        return Depthwise(value)
    if value is None or isinstance(value, str):
        return Static(value)
    return Static(tuple(value))


def tokens(*values: Any) -> str | None:
    """Join class tokens with single spaces, skipping empty values.

    >>> tokens("a", None, ["b", "c"], "")
    'a b c'
    """

    parts: list[str] = []
    for value in values:
        if not value:
            continue
        if isinstance(value, str):
            parts.extend(value.split())
        else:
            parts.extend(str(token) for token in _flatten(value) if token)
    return " ".join(parts) or None


def _flatten(values: Iterable[Any]) -> Iterable[Any]:
    for value in values:
        if isinstance(value, str) or not isinstance(value, Iterable):
            yield value
        else:
            yield from _flatten(value)


class Theme:
    """Resolve slot names to class tokens for a given depth."""

    slots: ClassVar[Mapping[str, Any]] = BASE_SLOTS
    _resolved: ClassVar[Mapping[str, SlotToken]] = MappingProxyType(
        {name: as_slot_token(value) for name, value in BASE_SLOTS.items()}
    )

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        merged = dict(super(cls, cls)._resolved)
        declared = cls.__dict__.get("slots", {})
        merged.update({name: as_slot_token(value) for name, value in declared.items()})
        cls._resolved = MappingProxyType(merged)

    @classmethod
    def theme(cls) -> Mapping[str, SlotToken]:
        """Return the merged slot mapping for this theme class."""

        return cls._resolved

    @classmethod
    def extend(cls, name: str | None = None, **slots: Any) -> type["Theme"]:
        """Return a subclass overriding ``slots``."""

        return type(name or f"{cls.__name__}Extended", (cls,), {"slots": slots})

    @classmethod
    def resolve(cls, slot: str, depth: int = 0) -> TokenValue:
        token = cls._resolved.get(slot)
        if token is None:
            return None
        if isinstance(token, Depthwise):
            return token.fn(depth)
        return token.value


__all__ = [
    "BASE_SLOTS",
    "Depthwise",
    "SlotToken",
    "Static",
    "Theme",
    "TokenValue",
    "as_slot_token",
    "tokens",
]
