"""Query string parameters.

Variant selections travel in the query string (``?define=Python&ctor=PHP``).
Besides reading them, ``QueryParams.replace`` builds the tab links that
change one selection and carry the others along.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs, quote, urlencode


def _encode(pairs: Mapping[str, str]) -> str:
    # %20 rather than "+", and "+" itself escaped, so labels like C++ survive.
    return urlencode(dict(pairs), quote_via=quote)


class QueryParams(Mapping[str, str]):
    """Read-only view of a query string.

    Indexing yields the first value of a repeated key. Blank values are
    kept (``?define=`` has ``define``).
    """

    __slots__ = ("_lists", "_raw")

    def __init__(self, query_string: bytes | str = b"") -> None:
        if isinstance(query_string, str):
            query_string = query_string.encode("latin-1")
        self._raw = query_string
        self._lists = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)

    @classmethod
    def from_dict(cls, values: Mapping[str, str]) -> "QueryParams":
        return cls(_encode(values))

    def __getitem__(self, key: str) -> str:
        return self._lists[key][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def __repr__(self) -> str:
        return f"QueryParams({dict(self.items())!r})"

    @property
    def raw(self) -> bytes:
        """Undecoded query string."""
        return self._raw

    def replace(self, **updates: str) -> str:
        """Encoded query string with *updates* applied.

        Existing keys stay where they are; new keys go last::

            QueryParams(b"a=1&b=2").replace(b="C#")  # "a=1&b=C%23"
        """
        return _encode({**dict(self.items()), **updates})
