"""Navigation requests.

A navigation has no body. The site reads its method, path, query string
(the variant selections) and the two htmx headers that mark a tab swap.
"""

from dataclasses import dataclass
from typing import Any

from sidebyside.http.headers import Headers
from sidebyside.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    method: str
    path: str
    headers: Headers
    query: QueryParams

    @property
    def is_fragment(self) -> bool:
        """Sent by htmx (``HX-Request: true``) rather than a full navigation."""
        return self.headers.get("hx-request") == "true"

    @property
    def htmx_target(self) -> str | None:
        """Element id htmx will swap, e.g. ``variants-define``."""
        return self.headers.get("hx-target")

    @property
    def url(self) -> str:
        raw = self.query.raw
        return f"{self.path}?{raw.decode('latin-1')}" if raw else self.path

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> "Request":
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(scope.get("headers", ())),
            query=QueryParams(scope.get("query_string", b"")),
        )

    @classmethod
    def navigate(cls, path: str, query: dict[str, str] | None = None) -> "Request":
        """A plain GET for *path*, as the static export and ``Site.get`` issue."""
        return cls(
            method="GET",
            path=path,
            headers=Headers(),
            query=QueryParams.from_dict(query or {}),
        )
