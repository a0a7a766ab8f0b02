"""Menu item nodes."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from .badge import freeze_options
from .content import Content, as_content, raw_value
from .errors import InvalidArgumentError

BuildCallback = Callable[["Item"], Any]


class Item:
    """A single node in the navigation hierarchy.

    Each item has a label and may carry a URL, an icon, leading/trailing badges
    and nested child items.

    Examples
    --------
    Basic item::

        Item("Home", url="/")

    Badges and icon::

        Item("Products", url="/products", icon=ProductIcon,
             leading_badge="New", trailing_badge="5")

    Nested items, either through ``build`` or as a context manager::

        def admin_items(admin):
            admin.item("Users", url="/admin/users")
            admin.item("Settings", url="/admin/settings")

        Item("Admin", build=admin_items)

        with Item("Admin") as admin:
            admin.item("Users", url="/admin/users")

    Custom active state logic::

        Item("Dashboard", url="/dashboard",
             active=lambda context: context.page.path.startswith("/dashboard"))
    """

    def __init__(
        self,
        label: Any,
        url: Optional[str] = None,
        icon: Any = None,
        leading_badge: Any = None,
        trailing_badge: Any = None,
        leading_badge_options: Optional[Mapping[str, Any]] = None,
        trailing_badge_options: Optional[Mapping[str, Any]] = None,
        build: Optional[BuildCallback] = None,
        **options: Any,
    ) -> None:
        if label is None or (isinstance(label, str) and not label.strip()):
            raise InvalidArgumentError("Label cannot be empty")

        self._label: Content = as_content(label)  # type: ignore[assignment]
        self._url = url
        self._icon = icon
        self._items: List[Item] = []
        self._options: Dict[str, Any] = options
        self._leading_badge = as_content(leading_badge)
        self._leading_badge_options = freeze_options(leading_badge_options)
        self._trailing_badge = as_content(trailing_badge)
        self._trailing_badge_options = freeze_options(trailing_badge_options)

        if build is not None:
            build(self)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def label(self) -> Any:
        """Return the display label as supplied."""

        return raw_value(self._label)

    @property
    def label_content(self) -> Content:
        return self._label

    @property
    def url(self) -> Optional[str]:
        return self._url

    @property
    def icon(self) -> Any:
        return self._icon

    @property
    def leading_badge(self) -> Any:
        return raw_value(self._leading_badge)

    @property
    def leading_badge_content(self) -> Optional[Content]:
        return self._leading_badge

    @property
    def leading_badge_options(self) -> Mapping[str, Any]:
        return self._leading_badge_options

    @property
    def trailing_badge(self) -> Any:
        return raw_value(self._trailing_badge)

    @property
    def trailing_badge_content(self) -> Optional[Content]:
        return self._trailing_badge

    @property
    def trailing_badge_options(self) -> Mapping[str, Any]:
        return self._trailing_badge_options

    @property
    def items(self) -> List["Item"]:
        return self._items

    @property
    def options(self) -> Dict[str, Any]:
        return self._options

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def item(self, label: Any, **kwargs: Any) -> "Item":
        """Create a nested item, append it and return it."""

        child = type(self)(label, **kwargs)
        self._items.append(child)
        return child

    def with_leading_badge(self, badge: Any, **opts: Any) -> "Item":
        """Attach a badge displayed before the label and return ``self``."""

        if badge is None:
            raise InvalidArgumentError("Badge cannot be None")
        self._leading_badge = as_content(badge)
        self._leading_badge_options = freeze_options(opts)
        return self

    def with_trailing_badge(self, badge: Any, **opts: Any) -> "Item":
        """Attach a badge displayed after the label and return ``self``."""

        if badge is None:
            raise InvalidArgumentError("Badge cannot be None")
        self._trailing_badge = as_content(badge)
        self._trailing_badge_options = freeze_options(opts)
        return self

    def __enter__(self) -> "Item":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    # ------------------------------------------------------------------
    # Active state
    # ------------------------------------------------------------------
    def active(self, context: Any) -> bool:
        """Return whether the item should be shown as active.

        Checked in order, first match wins:

        1. a callable ``active`` option, whose answer is final for this item;
        2. ``context.current_page(url)`` when the context provides it and the
           item has a URL; a miss falls through to the next check;
        3. the active state of any child item.
        """

        predicate = self._options.get("active")
        if callable(predicate):
            return bool(predicate(context))

        current_page = getattr(context, "current_page", None)
        if callable(current_page) and self._url and current_page(self._url):
            return True

        return any(child.active(context) for child in self._items)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} label={self.label!r} url={self._url!r} items={self._items!r}>"


__all__ = ["BuildCallback", "Item"]
