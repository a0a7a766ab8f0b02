"""Root-level factory for menu trees."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from .item import Item


class MenuBuilder:
    """Hold the top-level items of a menu.

    >>> menu = MenuBuilder()
    >>> products = menu.item("Products", url="/products")
    >>> _ = products.item("All", url="/products")
    >>> [item.label for item in menu.items]
    ['Products']

    Subclasses may set ``item_class`` to build items of a custom type.
    """

    item_class: type[Item] = Item

    def __init__(self, build: Optional[Callable[["MenuBuilder"], Any]] = None) -> None:
        self._items: List[Item] = []
        if build is not None:
            build(self)

    @property
    def items(self) -> List[Item]:
        return self._items

    def item(self, label: Any, **kwargs: Any) -> Item:
        """Create a top-level item, append it and return it."""

        new_item = self.item_class(label, **kwargs)
        self._items.append(new_item)
        return new_item

    def __enter__(self) -> "MenuBuilder":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} items={self._items!r}>"


__all__ = ["MenuBuilder"]
