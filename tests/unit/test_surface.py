"""Tests for :mod:`menukit.surface`."""

from __future__ import annotations

from markupsafe import Markup

from menukit.surface import HtmlSurface, render_attributes
from tests.stubs import StubComponent


def test_element_escapes_text_and_attributes() -> None:
    surface = HtmlSurface()

    html = surface.element("span", "<b>", title='say "hi"')

    assert html == Markup('<span title="say &#34;hi&#34;">&lt;b&gt;</span>')


def test_element_embeds_renderables_without_escaping() -> None:
    html = HtmlSurface().element("div", StubComponent(), Markup("<i></i>"))

    assert html == Markup("<div><div>Test Component</div><i></i></div>")


def test_render_attributes_skips_empty_values_and_maps_names() -> None:
    attrs = render_attributes({"class_": "a", "aria_label": "Menu", "hidden": True, "title": None, "open": False})

    assert attrs == Markup(' class="a" aria-label="Menu" hidden')


def test_link_sets_href() -> None:
    assert HtmlSurface().link("/x", "X", class_="nav") == Markup('<a href="/x" class="nav">X</a>')


def test_every_element_is_closed() -> None:
    assert HtmlSurface().element("div", class_="icon") == Markup('<div class="icon"></div>')
    assert HtmlSurface().element("ul") == Markup("<ul></ul>")
