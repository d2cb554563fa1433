"""Rendered output of one navigation.

The pipeline produces exactly one ``Response`` per request: a framed
page, a selector fragment, or an error. Extra headers are added
by copying.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and an HTML (or text) body.

    ``headers`` never includes ``content-type`` or ``content-length``;
    the sender derives both.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> "Response":
        return replace(self, headers=self.headers + ((name, value),))

    def header(self, name: str) -> str | None:
        """Value of the first header called *name*, ignoring case."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), None)

    @property
    def body_bytes(self) -> bytes:
        """UTF-8 encoded body."""
        body = self.body
        return body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        """Decoded body."""
        body = self.body
        return body.decode("utf-8") if isinstance(body, bytes) else body
