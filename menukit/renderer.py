"""Render menu trees to HTML."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Sequence

from markupsafe import Markup

from .badge import Badge, split_class
from .content import Callback, Component, Content
from .errors import InvalidArgumentError
from .item import Item
from .surface import HtmlSurface
from .theme import Theme, TokenValue, tokens

if TYPE_CHECKING:
    from .config import MenuConfig

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3

IconRenderer = Callable[[Any, Optional[str]], Any]


def default_icon_renderer(icon: Any, css_class: Optional[str]) -> Any:
    """Instantiate an icon factory with the themed class."""

    return icon(class_name=css_class)


def _page_matcher(page: Any) -> Optional[Callable[[str], bool]]:
    if page is None:
        return None
    method = getattr(page, "current_page", None)
    if callable(method):
        return method
    if callable(page):
        return page
    raise InvalidArgumentError(
        "Page matcher must be callable or provide a current_page(url) method"
    )


class RenderSteps:
    """Default implementation of every rendering step.

    Override individual steps by subclassing, or wrap an instance to decorate
    its output. Each step receives the active :class:`RenderPass`.
    """

    def nav(self, rp: "RenderPass") -> Markup:
        return rp.surface.element("nav", rp.render_items(rp.menu.items), class_=tokens(rp.themed("nav")))

    def wrapper(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        return rp.surface.element(
            "li",
            self.content(rp, item, depth),
            rp.render_nested_items(item, depth),
            class_=self.wrapper_classes(rp, item, depth),
        )

    def wrapper_classes(self, rp: "RenderPass", item: Item, depth: int) -> Optional[str]:
        return tokens(
            rp.themed("item_wrapper", depth),
            rp.themed("item_parent", depth) if rp.nested(item, depth) else None,
            rp.themed("active", depth) if rp.active(item) else None,
        )

    def content(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        if item.url:
            return self.link(rp, item, depth)
        return self.span(rp, item, depth)

    def link(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        css_class = tokens(
            rp.themed("item_link", depth),
            rp.themed("active", depth) if rp.active(item) else None,
        )
        return rp.surface.link(item.url, self.interior(rp, item, depth), class_=css_class)

    def span(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        return rp.surface.element(
            "span", self.interior(rp, item, depth), class_=tokens(rp.themed("item_span", depth))
        )

    def interior(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        parts = []
        if item.leading_badge_content is not None:
            parts.append(self.leading_badge(rp, item, depth))
        if item.icon is not None:
            parts.append(self.icon(rp, item.icon, depth))
        parts.append(self.label(rp, item.label_content, depth))
        if item.trailing_badge_content is not None:
            parts.append(self.trailing_badge(rp, item, depth))
        return Markup("").join(parts)

    def label(self, rp: "RenderPass", label: Content, depth: int) -> Markup:
        return rp.render_content(
            label,
            lambda: rp.surface.element(
                "span", label.value, class_=tokens(rp.themed("item_label", depth))
            ),
        )

    def leading_badge(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        return rp.surface.element(
            "div",
            self.badge(rp, item.leading_badge_content, item.leading_badge_options, "leading_badge", depth),
            class_=tokens(rp.themed("leading_badge_wrapper", depth)),
        )

    def trailing_badge(self, rp: "RenderPass", item: Item, depth: int) -> Markup:
        return rp.surface.element(
            "div",
            self.badge(rp, item.trailing_badge_content, item.trailing_badge_options, "trailing_badge", depth),
            class_=tokens(rp.themed("trailing_badge_wrapper", depth)),
        )

    def badge(
        self,
        rp: "RenderPass",
        badge: Optional[Content],
        options: Mapping[str, Any],
        slot: str,
        depth: int,
    ) -> Markup:
        def _default() -> Badge:
            extra_class, attrs = split_class(options)
            return rp.badge_class(
                badge.value, class_=tokens(rp.themed(slot, depth), extra_class), **attrs
            )

        return rp.render_content(badge, _default)

    def icon(self, rp: "RenderPass", icon: Any, depth: int) -> Markup:
        rendered = rp.icon_renderer(icon, tokens(rp.themed("icon", depth)))
        return rp.surface.element(
            "div", rendered, class_=tokens(rp.themed("icon_wrapper", depth))
        )


class RenderPass:
    """State shared by the steps of a single render.

    Custom ``active`` predicates receive the pass as their context: ``page``
    is the page matcher given to :meth:`MenuRenderer.render` and ``options``
    holds the renderer's extra keyword arguments.
    """

    def __init__(self, renderer: "MenuRenderer", page: Any = None) -> None:
        self.menu = renderer.menu
        self.max_depth = renderer.max_depth
        self.theme = renderer.theme
        self.steps = renderer.steps
        self.surface = renderer.surface
        self.icon_renderer = renderer.icon_renderer
        self.badge_class = renderer.badge_class
        self.options = renderer.options
        self.page = page
        self.current_page = _page_matcher(page)

    def themed(self, slot: str, depth: int = 0) -> TokenValue:
        return self.theme.resolve(slot, depth)

    def active(self, item: Item) -> bool:
        return item.active(self)

    def nested(self, item: Item, depth: int) -> bool:
        """Return whether ``item`` has children that will be rendered."""

        return bool(item.items) and (depth + 1) < self.max_depth

    def render_items(self, items: Sequence[Item], depth: int = 0) -> Markup:
        if not items or depth >= self.max_depth:
            return Markup("")

        return self.surface.element(
            "ul",
            *(self.steps.wrapper(self, item, depth) for item in items),
            class_=tokens(self.themed("items_container", depth)),
        )

    def render_nested_items(self, item: Item, depth: int) -> Markup:
        if not self.nested(item, depth):
            if item.items:
                _LOGGER.debug(
                    "Skipping %d child item(s) of %r at depth %d (max_depth=%d)",
                    len(item.items),
                    item.label,
                    depth + 1,
                    self.max_depth,
                )
            return Markup("")
        return self.render_items(item.items, depth + 1)

    def render_content(self, content: Optional[Content], default: Optional[Callable[[], Any]] = None) -> Markup:
        """Render ``content`` according to its kind.

        Components render themselves, callbacks are called with this pass and
        their result rendered, and plain text falls back to ``default``.
        """

        if content is None:
            return Markup("")
        if default is None:
            raise InvalidArgumentError("render_content requires a default render callable")

        if isinstance(content, Component):
            return self.surface.text(content.handle)
        if isinstance(content, Callback):
            return self.surface.text(content.fn(self))
        return self.surface.text(default())


class MenuRenderer:
    """Render a :class:`~menukit.builder.MenuBuilder` tree as nested lists.

    >>> from menukit.builder import MenuBuilder
    >>> menu = MenuBuilder()
    >>> _ = menu.item("Home", url="/")
    >>> str(MenuRenderer(menu).render())
    '<nav><ul><li><a href="/"><span>Home</span></a></li></ul></nav>'

    Subclasses may override ``theme``, ``steps_class``, ``surface_class`` and
    ``badge_class`` to change the defaults for every instance.
    """

    theme: type[Theme] = Theme
    steps_class: type[RenderSteps] = RenderSteps
    surface_class: type[HtmlSurface] = HtmlSurface
    badge_class: type[Badge] = Badge
    default_max_depth: int = DEFAULT_MAX_DEPTH

    def __init__(
        self,
        menu: Any,
        max_depth: Optional[int] = None,
        *,
        theme: Optional[type[Theme]] = None,
        steps: Optional[RenderSteps] = None,
        icon_renderer: Optional[IconRenderer] = None,
        **options: Any,
    ) -> None:
        if menu is None:
            raise InvalidArgumentError("Menu cannot be None")

        self.menu = menu
        self.max_depth = self.default_max_depth if max_depth is None else max_depth
        if theme is not None:
            self.theme = theme
        self.steps = steps if steps is not None else self.steps_class()
        self.surface = self.surface_class()
        self.icon_renderer = icon_renderer or default_icon_renderer
        self.options: Dict[str, Any] = options

    @classmethod
    def from_config(cls, menu: Any, config: "MenuConfig", **kwargs: Any) -> "MenuRenderer":
        """Build a renderer using the depth limit from ``config``."""

        kwargs.setdefault("max_depth", config.max_depth)
        return cls(menu, **kwargs)

    def render(self, page: Any = None) -> Markup:
        """Render the menu; ``page`` answers "is this URL the current page"."""

        _LOGGER.debug(
            "Rendering menu with %d top-level item(s), max_depth=%d",
            len(self.menu.items),
            self.max_depth,
        )
        rp = RenderPass(self, page)
        return self.steps.nav(rp)

    def __html__(self) -> Markup:
        return self.render()

    def __str__(self) -> str:
        return str(self.render())


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "IconRenderer",
    "MenuRenderer",
    "RenderPass",
    "RenderSteps",
    "default_icon_renderer",
]
