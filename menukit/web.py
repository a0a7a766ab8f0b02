"""Glue between menus and server-rendered pages (Starlette/FastAPI, Jinja2)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import parse_qsl, urlsplit

from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from .renderer import MenuRenderer

if TYPE_CHECKING:
    from starlette.requests import Request


def _normalise_path(path: str) -> str:
    return path.rstrip("/") or "/"


class RequestPage:
    """Answer "is ``url`` the current page" for an incoming request.

    Paths are compared without trailing slashes. A query string on ``url``
    must match the request's query parameters; a host on ``url`` must match the
    request's host.
    """

    def __init__(self, request: "Request") -> None:
        self.request = request

    @property
    def path(self) -> str:
        return self.request.url.path

    def current_page(self, url: str) -> bool:
        target = urlsplit(url)
        current = self.request.url
        if target.netloc and target.netloc != current.netloc:
            return False
        if _normalise_path(target.path or "/") != _normalise_path(current.path):
            return False
        if target.query:
            return sorted(parse_qsl(target.query)) == sorted(parse_qsl(current.query))
        return True


def register_menu_globals(
    env: Environment,
    renderer_factory: Callable[..., MenuRenderer] = MenuRenderer,
    name: str = "render_menu",
) -> Environment:
    """Install a ``render_menu(menu, **kwargs)`` global on ``env``.

    When the template context holds a ``request`` (as FastAPI's
    ``Jinja2Templates`` does) it becomes the page matcher, unless a ``page``
    keyword is passed explicitly.
    """

    @pass_context
    def render_menu(context: Context, menu: Any, **kwargs: Any) -> Markup:
        page = kwargs.pop("page", None)
        if page is None:
            request = context.get("request")
            if request is not None:
                page = RequestPage(request)
        return renderer_factory(menu, **kwargs).render(page)

    env.globals[name] = render_menu
    return env


__all__ = ["RequestPage", "register_menu_globals"]
