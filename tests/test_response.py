"""Tests for sidebyside.http.response — immutable responses."""

import pytest

from sidebyside.http.response import Response


class TestResponse:
    def test_defaults(self) -> None:
        response = Response()
        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert response.headers == ()

    def test_with_header_returns_new(self) -> None:
        original = Response("x")
        changed = original.with_header("Allow", "GET")
        assert changed.header("allow") == "GET"
        assert original.headers == ()

    def test_with_header_appends(self) -> None:
        response = Response().with_header("Allow", "GET").with_header("X-A", "1")
        assert response.headers == (("Allow", "GET"), ("X-A", "1"))

    def test_header_lookup_is_case_insensitive(self) -> None:
        response = Response().with_header("Allow", "GET, HEAD")
        assert response.header("allow") == "GET, HEAD"
        assert response.header("x-missing") is None

    def test_text_and_bytes(self) -> None:
        assert Response("é").body_bytes == "é".encode()
        assert Response("é".encode()).text == "é"

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]
