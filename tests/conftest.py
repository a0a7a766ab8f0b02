"""Shared pytest fixtures for the menukit test-suite."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from menukit.builder import MenuBuilder
from menukit.item import Item
from tests.stubs import StubComponent, StubIcon


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Return a callable parsing rendered markup."""

    def _parse(markup: str) -> BeautifulSoup:
        return BeautifulSoup(str(markup), "html.parser")

    return _parse


@pytest.fixture
def sample_menu() -> MenuBuilder:
    """Return a three-entry menu with badges, an icon and nested products."""

    def products(item: Item) -> None:
        item.item("All Products", url="/products", leading_badge=StubComponent())
        item.item("Add Product", url="/products/new")

    def build(menu: MenuBuilder) -> None:
        menu.item("Home", url="/", icon=StubIcon, leading_badge="New", trailing_badge="2")
        menu.item("Products", url="/products", build=products)
        menu.item(
            "Settings",
            url="/settings",
            active=lambda context: getattr(context.page, "path", "").startswith("/settings"),
        )

    return MenuBuilder(build)


@pytest.fixture
def deep_menu() -> MenuBuilder:
    """Return a single chain four levels deep."""

    with MenuBuilder() as menu:
        with menu.item("Level 1") as level1:
            with level1.item("Level 2") as level2:
                with level2.item("Level 3") as level3:
                    level3.item("Level 4")
    return menu
