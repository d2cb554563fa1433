"""Route registry with exact-path lookup.

Bindings are supplied once, validated at construction and never change
afterwards. Resolution is a single dict lookup keyed by the literal path.
"""

from collections.abc import Iterable, Iterator

from sidebyside.errors import ConfigurationError, DuplicateRoute, RouteNotFound
from sidebyside.routing.route import ViewBinding


def validate_path(path: str) -> str:
    """Check that *path* is a literal absolute path and return it.

    Examples::

        "/"                  -> ok
        "/concepts/classes"  -> ok
        "concepts"           -> ConfigurationError (not absolute)
        "/users/{id}"        -> ConfigurationError (placeholders are not supported)
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'."
        raise ConfigurationError(msg)
    if "{" in path or "}" in path or "*" in path:
        msg = (
            f"Route path {path!r} contains a placeholder. Only literal paths "
            "can be registered; bind each page to its own path."
        )
        raise ConfigurationError(msg)
    return path


class RouteRegistry:
    """Ordered, read-only table of literal paths to views.

    Usage::

        registry = RouteRegistry([
            ViewBinding("/", home),
            ViewBinding("/about", about),
        ])
        registry.resolve("/about").view   # about
        registry.resolve("/missing")      # raises RouteNotFound
    """

    __slots__ = ("_bindings", "_by_name", "_by_path")

    def __init__(self, bindings: Iterable[ViewBinding]) -> None:
        by_path: dict[str, ViewBinding] = {}
        by_name: dict[str, ViewBinding] = {}
        for binding in bindings:
            validate_path(binding.path)
            if binding.path in by_path:
                raise DuplicateRoute(binding.path)
            by_path[binding.path] = binding
            if binding.name is not None:
                if binding.name in by_name:
                    msg = (
                        f"Route name {binding.name!r} is used by both "
                        f"{by_name[binding.name].path!r} and {binding.path!r}."
                    )
                    raise ConfigurationError(msg)
                by_name[binding.name] = binding
        self._by_path = by_path
        self._by_name = by_name
        self._bindings = tuple(by_path.values())

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[str, object]]) -> "RouteRegistry":
        """Build a registry from ``(path, view)`` pairs."""
        return cls(ViewBinding(path, view) for path, view in entries)

    def resolve(self, path: str) -> ViewBinding:
        """Return the binding whose path equals *path* exactly.

        Raises ``RouteNotFound`` if no binding matches.
        """
        binding = self._by_path.get(path)
        if binding is None:
            raise RouteNotFound(f"No route matches {path!r}")
        return binding

    def url_for(self, name: str) -> str:
        """Return the path bound under route *name*."""
        try:
            return self._by_name[name].path
        except KeyError:
            msg = f"No route named {name!r}."
            raise LookupError(msg) from None

    @property
    def paths(self) -> tuple[str, ...]:
        """All registered paths in registration order."""
        return tuple(self._by_path)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __iter__(self) -> Iterator[ViewBinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"RouteRegistry({list(self.paths)!r})"
