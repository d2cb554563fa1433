"""Request pipeline — path in, HTML out.

``render_request`` is synchronous and does all the work: resolve the
path, call the view, apply the navigation's variant selections and
compose the page. ``handle_request`` is the thin ASGI wrapper around it;
the static export calls ``render_request`` directly.
"""

from collections.abc import Callable
from typing import Any

from kida import Environment

from sidebyside._internal.asgi import Receive, Scope, Send
from sidebyside._internal.invoke import call_view
from sidebyside.errors import HTTPError, MethodNotAllowed, RouteNotFound
from sidebyside.http.request import Request
from sidebyside.http.response import Response
from sidebyside.routing.registry import RouteRegistry
from sidebyside.server.errors import (
    handle_http_error,
    handle_internal_error,
    handle_not_found,
)
from sidebyside.server.sender import send_response
from sidebyside.views.components import render_all
from sidebyside.views.page import Page
from sidebyside.views.shell import Shell

ALLOWED_METHODS = frozenset({"GET", "HEAD"})


def render_page(page: Page, request: Request, *, env: Environment, shell: Shell) -> Response:
    """Apply selections from the query and render *page*.

    An htmx request targeting one of the page's selectors gets only that
    selector back; everything else gets the framed document.
    """
    page.apply(request.query)

    if request.is_fragment and request.htmx_target:
        selector = page.selector(request.htmx_target)
        if selector is not None:
            return Response(body=str(selector.render(env)))

    body = shell.compose(page, render_all(env, page.body), path=request.path)
    return Response(body=body)


def render_request(
    request: Request,
    *,
    registry: RouteRegistry,
    env: Environment,
    shell: Shell,
    not_found_view: Callable[..., Any],
    debug: bool = False,
) -> Response:
    """Process one navigation through the full pipeline."""
    try:
        if request.method not in ALLOWED_METHODS:
            raise MethodNotAllowed(ALLOWED_METHODS)
        binding = registry.resolve(request.path)
        page = call_view(binding.view, request)
        return render_page(page, request, env=env, shell=shell)
    except RouteNotFound as exc:
        return handle_not_found(
            exc,
            request,
            not_found_view=not_found_view,
            env=env,
            shell=shell,
        )
    except HTTPError as exc:
        return handle_http_error(exc, request, debug=debug)
    except Exception as exc:
        return handle_internal_error(exc, request, debug=debug)


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    registry: RouteRegistry,
    env: Environment,
    shell: Shell,
    not_found_view: Callable[..., Any],
    debug: bool,
) -> None:
    """Serve a single ASGI HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)
    response = render_request(
        request,
        registry=registry,
        env=env,
        shell=shell,
        not_found_view=not_found_view,
        debug=debug,
    )
    await send_response(response, send, method=request.method)
