"""Error handling pipeline for site requests.

``RouteNotFound`` renders the site's fallback page through the shell.
Other HTTP errors and unexpected failures become short responses; a
failure is never allowed to escape into the ASGI server.
"""

import html
import logging
from collections.abc import Callable
from typing import Any

from kida import Environment

from sidebyside._internal.invoke import call_view
from sidebyside.errors import HTTPError, RouteNotFound
from sidebyside.http.request import Request
from sidebyside.http.response import Response
from sidebyside.views.components import Prose, render_all
from sidebyside.views.page import Page
from sidebyside.views.shell import Shell

logger = logging.getLogger("sidebyside.server")


def default_not_found(request: Request) -> Page:
    """Fallback page used when the site registers none."""
    return Page(
        "Page not found",
        body=(
            Prose(
                f"<p>Nothing lives at <code>{html.escape(request.path)}</code>.</p>"
                '<p><a href="/">Go to the home page</a></p>'
            ),
        ),
    )


def default_fragment_error(status: int, detail: str) -> str:
    """Minimal HTML snippet for fragment error responses."""
    return f'<div class="site-error" data-status="{status}">{html.escape(detail)}</div>'


def handle_not_found(
    exc: RouteNotFound,
    request: Request,
    *,
    not_found_view: Callable[..., Any],
    env: Environment,
    shell: Shell,
) -> Response:
    """Render the fallback view inside the site frame with status 404."""
    logger.debug("404 %s %s — %s", request.method, request.url, exc.detail)

    if request.is_fragment:
        return Response(body=default_fragment_error(404, exc.detail), status=404)

    try:
        page = call_view(not_found_view, request)
        body = shell.compose(page, render_all(env, page.body), path=request.path)
    except Exception:
        logger.exception("Fallback page failed for %s", request.path)
        return Response(body="Not Found", status=404, content_type="text/plain; charset=utf-8")
    return Response(body=body, status=404)


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool) -> Response:
    """Map any other HTTPError to a short response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    if request.is_fragment:
        resp = Response(body=default_fragment_error(exc.status, detail), status=exc.status)
    else:
        resp = Response(body=detail, status=exc.status, content_type="text/plain; charset=utf-8")
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.url)

    detail = f"{type(exc).__name__}: {exc}" if debug else "Internal Server Error"
    if request.is_fragment:
        return Response(body=default_fragment_error(500, detail), status=500)
    return Response(body=detail, status=500, content_type="text/plain; charset=utf-8")
