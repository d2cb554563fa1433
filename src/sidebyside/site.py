"""Sidebyside site class.

Mutable during setup (route registration, nav, fallback view).
Frozen on first use: rendering, serving, checking or building.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

from kida import Environment

from sidebyside._internal.asgi import Receive, Scope, Send
from sidebyside._internal.invoke import call_view, ensure_sync_view
from sidebyside._internal.types import View
from sidebyside.config import SiteConfig
from sidebyside.errors import ConfigurationError, DuplicateRoute
from sidebyside.http.request import Request
from sidebyside.http.response import Response
from sidebyside.routing.registry import RouteRegistry, validate_path
from sidebyside.routing.route import ViewBinding
from sidebyside.server.errors import default_not_found
from sidebyside.server.handler import handle_request, render_request
from sidebyside.templating.integration import create_environment
from sidebyside.views.shell import NavLink, Shell


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Problems found by ``Site.check_routes()``."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


class Site:
    """The sidebyside site.

    Mutable during setup (routes, nav, fallback view).
    Frozen when first rendered, served, checked or built.

    Thread safety:
        Setup is single-threaded (decorators at import time). The freeze
        transition uses a Lock + double-check so exactly one thread
        compiles the registry and template environment.
    """

    __slots__ = (
        "_env",
        "_freeze_lock",
        "_frozen",
        "_nav",
        "_not_found_view",
        "_pending_routes",
        "_registry",
        "_shell",
        "config",
    )

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config: SiteConfig = config or SiteConfig()
        self._pending_routes: list[ViewBinding] = []
        self._nav: list[NavLink] = []
        self._not_found_view: View = default_not_found
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state — set during _freeze()
        self._registry: RouteRegistry | None = None
        self._env: Environment | None = None
        self._shell: Shell | None = None

    # -- Setup --

    def route(self, path: str, *, name: str | None = None) -> Callable[[View], View]:
        """Bind a view to a literal path via decorator.

        A path that is already bound is rejected here, at registration,
        rather than when the first request arrives.
        """

        def decorator(func: View) -> View:
            self._check_not_frozen()
            validate_path(path)
            ensure_sync_view(func)
            if any(pending.path == path for pending in self._pending_routes):
                raise DuplicateRoute(path)
            self._pending_routes.append(ViewBinding(path, func, name))
            return func

        return decorator

    def add_route(self, path: str, view: View, *, name: str | None = None) -> None:
        """Bind *view* to *path* without a decorator."""
        self.route(path, name=name)(view)

    def not_found(self, func: View) -> View:
        """Register the fallback view rendered for unknown paths (status 404)."""
        self._check_not_frozen()
        ensure_sync_view(func)
        self._not_found_view = func
        return func

    def nav(self, label: str, href: str) -> None:
        """Add an entry to the header navigation."""
        self._check_not_frozen()
        self._nav.append(NavLink(label, href))

    # -- Compiled state --

    @property
    def registry(self) -> RouteRegistry:
        self._ensure_frozen()
        assert self._registry is not None
        return self._registry

    @property
    def env(self) -> Environment:
        self._ensure_frozen()
        assert self._env is not None
        return self._env

    @property
    def shell(self) -> Shell:
        self._ensure_frozen()
        assert self._shell is not None
        return self._shell

    # -- Rendering --

    def render(self, request: Request) -> Response:
        """Render one navigation synchronously."""
        self._ensure_frozen()
        assert self._registry is not None
        assert self._env is not None
        assert self._shell is not None
        return render_request(
            request,
            registry=self._registry,
            env=self._env,
            shell=self._shell,
            not_found_view=self._not_found_view,
            debug=self.config.debug,
        )

    def get(self, path: str, query: dict[str, str] | None = None) -> Response:
        """Render *path* as a plain GET navigation."""
        return self.render(Request.navigate(path, query))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        assert self._registry is not None
        assert self._env is not None
        assert self._shell is not None

        await handle_request(
            scope,
            receive,
            send,
            registry=self._registry,
            env=self._env,
            shell=self._shell,
            not_found_view=self._not_found_view,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the site at startup so a broken route table fails the
        server start instead of the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Validation --

    def check_routes(self) -> CheckResult:
        """Render every route in its initial state and collect problems.

        Errors: a view that fails or returns something other than a
        Page, a page whose content cards link to unregistered paths.
        Warnings: selectors whose producer falls back for some labels.
        """
        registry = self.registry
        errors: list[str] = []
        warnings: list[str] = []

        for binding in registry:
            request = Request.navigate(binding.path)
            try:
                page = call_view(binding.view, request)
            except Exception as exc:
                errors.append(f"{binding.path}: {type(exc).__name__}: {exc}")
                continue

            for href in page.links:
                if href.startswith("/") and href not in registry:
                    errors.append(f"{binding.path}: card links to unknown path {href!r}")

            for selector in page.selectors:
                missing = getattr(selector.producer, "missing", None)
                if missing is None:
                    continue
                uncovered = missing(selector.variants)
                if uncovered:
                    labels = ", ".join(uncovered)
                    warnings.append(
                        f"{binding.path}: selector {selector.key!r} falls back for {labels}"
                    )

            response = self.render(request)
            if response.status != 200:
                errors.append(f"{binding.path}: rendered with status {response.status}")

        return CheckResult(errors=tuple(errors), warnings=tuple(warnings))

    def check(self) -> None:
        """Validate every route and print results.

        Raises ``SystemExit(1)`` if errors are found.
        """
        result = self.check_routes()
        for line in result.errors:
            print(f"error: {line}")
        for line in result.warnings:
            print(f"warning: {line}")
        print(
            f"{len(self.registry)} routes checked, "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        if not result.ok:
            raise SystemExit(1)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the site into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Compile route table (rejects duplicates and non-literal paths)
        self._registry = RouteRegistry(self._pending_routes)

        # 2. Template environment and shell
        self._env = create_environment(self.config)
        self._shell = Shell.from_config(self._env, self.config, tuple(self._nav))

        for link in self._nav:
            if link.href.startswith("/") and link.href not in self._registry:
                msg = f"Nav link {link.label!r} points at unregistered path {link.href!r}."
                raise ConfigurationError(msg)

        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the site after it has started rendering. "
                "Register routes, nav links and the fallback view first."
            )
            raise RuntimeError(msg)
