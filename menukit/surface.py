"""Minimal HTML emission used by the menu renderer."""

from __future__ import annotations

from typing import Any, Iterable

from markupsafe import Markup, escape


def _attribute_name(name: str) -> str:
    # ``class_`` and ``for_`` sidestep Python keywords, ``aria_label`` maps to ``aria-label``.
    return name.rstrip("_").replace("_", "-")


def render_attributes(attrs: dict[str, Any]) -> Markup:
    """Serialise ``attrs`` skipping ``None`` and ``False`` values."""

    parts: list[Markup] = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        key = _attribute_name(name)
        if value is True:
            parts.append(Markup(" {}").format(Markup(key)))
        else:
            parts.append(Markup(' {}="{}"').format(Markup(key), value))
    return Markup("").join(parts)


class HtmlSurface:
    """Emit tagged elements as :class:`markupsafe.Markup`."""

    def text(self, value: Any) -> Markup:
        """Escape ``value`` unless it already renders itself."""

        if value is None:
            return Markup("")
        return escape(value)

    def join(self, fragments: Iterable[Any]) -> Markup:
        return Markup("").join(self.text(fragment) for fragment in fragments)

    def element(self, tag: str, *children: Any, **attrs: Any) -> Markup:
        """Return ``<tag attrs>children</tag>``."""

        opening = Markup("<{}{}>").format(Markup(tag), render_attributes(attrs))
        return opening + self.join(children) + Markup("</{}>").format(Markup(tag))

    def link(self, href: str, *children: Any, **attrs: Any) -> Markup:
        return self.element("a", *children, href=href, **attrs)


__all__ = ["HtmlSurface", "render_attributes"]
