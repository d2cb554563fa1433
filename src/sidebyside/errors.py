"""Sidebyside exception hierarchy.

Shared across the registry, site, request pipeline and views so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class SiteError(Exception):
    """Base for all sidebyside-specific errors."""


class ConfigurationError(SiteError):
    """Raised when the site configuration or route table is invalid.

    Typically raised during route registration or ``Site._freeze()``,
    never while serving a request.
    """


class DuplicateRoute(ConfigurationError):  # noqa: N818
    """Two bindings claim the same literal path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Duplicate route {path!r}: every path may be bound to one view only.")


class UnrecognizedVariantLabel(SiteError, ValueError):  # noqa: N818
    """A label outside the selector's VariantSet was selected directly."""

    def __init__(self, label: str, labels: tuple[str, ...]) -> None:
        self.label = label
        self.labels = labels
        allowed = ", ".join(repr(lbl) for lbl in labels)
        super().__init__(f"Unrecognized variant label {label!r}. Expected one of: {allowed}")


@dataclass(frozen=True, slots=True)
class HTTPError(SiteError):
    """An error that maps directly to an HTTP status code.

    Raised by the registry or the request pipeline. The ASGI handler
    catches these and renders the matching fallback page.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class RouteNotFound(HTTPError):  # noqa: N818
    """404 — no route pattern equals the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — the site only serves GET and HEAD."""

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
