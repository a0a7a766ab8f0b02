"""Badge values rendered before or after a menu item's label."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from markupsafe import Markup

from .surface import HtmlSurface

EMPTY_OPTIONS: Mapping[str, Any] = MappingProxyType({})


def freeze_options(options: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Copy ``options`` into a read-only mapping."""

    if not options:
        return EMPTY_OPTIONS
    return MappingProxyType(dict(options))


def split_class(options: Mapping[str, Any]) -> tuple[Any, dict[str, Any]]:
    """Separate the ``class`` option (spelt ``class`` or ``class_``) from the rest."""

    attrs = dict(options)
    css_class = attrs.pop("class", None)
    alias = attrs.pop("class_", None)
    return (css_class if css_class is not None else alias), attrs


class Badge:
    """A small inline element wrapping badge content.

    Examples
    --------
    >>> str(Badge("New!", class_="badge-primary"))
    '<span class="badge-primary">New!</span>'

    Any option other than ``class``/``class_`` is emitted as an attribute.
    """

    surface = HtmlSurface()

    def __init__(self, content: Any, **options: Any) -> None:
        self._content = content
        self._options = freeze_options(options)

    @property
    def content(self) -> Any:
        return self._content

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    def __html__(self) -> Markup:
        css_class, attrs = split_class(self._options)
        return self.surface.element("span", self._content, class_=css_class, **attrs)

    def __str__(self) -> str:
        return str(self.__html__())

    def __repr__(self) -> str:
        return f"Badge({self._content!r}, options={dict(self._options)!r})"


__all__ = ["Badge", "EMPTY_OPTIONS", "freeze_options", "split_class"]
