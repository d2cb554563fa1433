"""ASGI response sending — translates a Response into ASGI messages."""

from sidebyside._internal.asgi import Send
from sidebyside.http.response import Response


def _status_has_body(status: int) -> bool:
    """RFC 9110: 1xx, 204 and 304 responses never carry a body."""
    return not (100 <= status < 200 or status in {204, 304})


async def send_response(response: Response, send: Send, *, method: str = "GET") -> None:
    """Translate a Response into ASGI send() calls."""
    raw_headers: list[tuple[bytes, bytes]] = [
        (b"content-type", response.content_type.encode("latin-1")),
    ]
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    full_body = response.body_bytes if _status_has_body(response.status) else b""
    body = b"" if method == "HEAD" else full_body

    # HEAD advertises the length the GET body would have
    raw_headers.append((b"content-length", str(len(full_body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
