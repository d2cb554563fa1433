"""Invoke helper — call views uniformly.

Views may be written ``def home()`` or ``def home(request)``. Any code
that calls a user-provided view goes through ``call_view`` so the
signature check lives in exactly one place.

Rendering is synchronous (the static export has no event loop), so views
are plain functions; ``async def`` views are rejected at registration.

Usage::

    from sidebyside._internal.invoke import call_view

    page = call_view(binding.view, request)
"""

import annotationlib
import inspect
from typing import Any

from sidebyside.errors import ConfigurationError
from sidebyside.http.request import Request
from sidebyside.views.page import Page


def _signature(view: Any) -> inspect.Signature:
    try:
        return inspect.signature(view, eval_str=True)
    except NameError:
        # Annotations naming TYPE_CHECKING-only imports stay strings.
        return inspect.signature(view, annotation_format=annotationlib.Format.STRING)


def _wants_request(name: str, param: inspect.Parameter) -> bool:
    annotation = param.annotation
    return name == "request" or annotation is Request or annotation == "Request"


def ensure_sync_view(view: Any) -> None:
    """Reject coroutine functions, which the synchronous pipeline cannot await."""
    if inspect.iscoroutinefunction(view):
        view_name = getattr(view, "__qualname__", repr(view))
        msg = f"View {view_name} is async; views must be plain functions returning a Page."
        raise ConfigurationError(msg)


def call_view(view: Any, request: Request) -> Page:
    """Call *view*, passing ``request`` only when its signature asks for it.

    A parameter named ``request`` or annotated ``Request`` receives the
    request. Anything other than a ``Page`` coming back is a bug in the
    view and raises ``TypeError``.
    """
    kwargs: dict[str, Any] = {
        name: request
        for name, param in _signature(view).parameters.items()
        if _wants_request(name, param)
    }

    result = view(**kwargs)
    if not isinstance(result, Page):
        if inspect.isawaitable(result):
            close = getattr(result, "close", None)
            if close is not None:
                close()
        view_name = getattr(view, "__qualname__", repr(view))
        msg = f"View {view_name} returned {type(result).__name__}, expected Page."
        raise TypeError(msg)
    return result
