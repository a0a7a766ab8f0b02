"""Tests for :mod:`menukit.badge` and :mod:`menukit.content`."""

from __future__ import annotations

import pytest

from menukit.badge import EMPTY_OPTIONS, Badge, freeze_options, split_class
from menukit.content import Callback, Component, Text, as_content, raw_value
from tests.stubs import StubComponent, StubIcon


def test_badge_renders_span_with_class_and_attributes() -> None:
    badge = Badge("2", class_="badge-notification", title="Unread")

    assert str(badge) == '<span class="badge-notification" title="Unread">2</span>'


def test_badge_escapes_text() -> None:
    assert str(Badge("<b>")) == "<span>&lt;b&gt;</span>"


def test_badge_options_are_read_only() -> None:
    badge = Badge("New", class_="a")

    with pytest.raises(TypeError):
        badge.options["class_"] = "b"  # type: ignore[index]


def test_freeze_options_copies_input() -> None:
    source = {"class": "a"}
    frozen = freeze_options(source)
    source["class"] = "b"

    assert frozen["class"] == "a"
    assert freeze_options(None) is EMPTY_OPTIONS


def test_split_class_accepts_both_spellings() -> None:
    assert split_class({"class": "a", "title": "t"}) == ("a", {"title": "t"})
    assert split_class({"class_": "b"}) == ("b", {})


def test_as_content_classifies_values() -> None:
    component = StubComponent()

    def callback(context: object) -> str:
        return "x"

    assert as_content(None) is None
    assert as_content("New") == Text("New")
    assert as_content(3) == Text("3")
    assert as_content(component) == Component(component)
    assert as_content(callback) == Callback(callback)


def test_as_content_treats_component_classes_as_callables() -> None:
    assert isinstance(as_content(StubIcon), Callback)


def test_raw_value_returns_original() -> None:
    component = StubComponent()

    assert raw_value(Text("a")) == "a"
    assert raw_value(Component(component)) is component
    assert raw_value(None) is None
