"""Portico application class.

Mutable during setup (controller registration, template filters and
globals). Frozen at runtime when ``dispatch()`` or ``__call__()`` is
first invoked.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable
from typing import Any

from portico._internal.asgi import Receive, Scope, Send
from portico.config import AppConfig
from portico.controllers.registry import ControllerFactory, ControllerRegistry
from portico.http.response import Response
from portico.routing.dispatcher import Dispatcher
from portico.routing.route import Dispatch
from portico.routing.segments import title_case
from portico.server.handler import handle_request
from portico.templating.integration import Renderer

logger = logging.getLogger("portico.app")


class App:
    """The portico application.

    Usage::

        app = App(AppConfig.from_env())

        @app.controller()
        class Homepages(Controller):
            def index(self):
                return self.render("home.html")

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread builds the renderer and dispatcher.
    """

    __slots__ = (
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_registry",
        "_renderer",
        "_shutdown_hooks",
        "_startup_hooks",
        "_template_filters",
        "_template_globals",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._registry = ControllerRegistry()
        self._template_filters: dict[str, Callable[..., Any]] = {}
        self._template_globals: dict[str, Any] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen = False
        self._freeze_lock = threading.Lock()

        # Compiled state — set during _freeze()
        self._renderer: Renderer | None = None
        self._dispatcher: Dispatcher | None = None

    # -- Controller registration --

    def controller(
        self,
        name: str | None = None,
    ) -> Callable[[ControllerFactory], ControllerFactory]:
        """Register a controller class or factory via decorator.

        The registered name is *name* (or the factory's ``__name__``)
        title-cased, which is what the first path segment resolves to::

            @app.controller()
            class Blog(Controller): ...       # /blog/...

            @app.controller("products")
            def make_products(renderer): ...  # /products/...
        """

        def decorator(factory: ControllerFactory) -> ControllerFactory:
            self.add_controller(factory, name)
            return factory

        return decorator

    def add_controller(self, factory: ControllerFactory, name: str | None = None) -> None:
        """Register *factory* under *name* (defaults to its ``__name__``)."""
        self._check_not_frozen()
        self._registry.register(title_case(name or factory.__name__), factory)

    @property
    def registry(self) -> ControllerRegistry:
        return self._registry

    # -- Template integration --

    def template_filter(
        self,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a kida template filter."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            filter_name = name or func.__name__
            self._template_filters[filter_name] = func
            return func

        return decorator

    def template_global(
        self,
        name: str | None = None,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a kida template global."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self._check_not_frozen()
            global_name = name or func.__name__
            self._template_globals[global_name] = func
            return func

        return decorator

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator.

        Hooks run in registration order during ASGI lifespan shutdown.
        """
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Request handling --

    @property
    def renderer(self) -> Renderer:
        self._ensure_frozen()
        assert self._renderer is not None
        return self._renderer

    @property
    def dispatcher(self) -> Dispatcher:
        self._ensure_frozen()
        assert self._dispatcher is not None
        return self._dispatcher

    def dispatch(self, path: str | None, query: str = "") -> Response:
        """Handle one request path without going through ASGI."""
        return self.dispatcher.dispatch(path, query)

    def plan(self, path: str | None, query: str = "") -> Dispatch:
        """Resolve *path* to the action it would invoke, without invoking it."""
        return self.dispatcher.plan(path, query)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce.

        Reloads on source changes when ``config.is_dev``.
        """
        from portico.server.dev import run_server

        self._ensure_frozen()
        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.is_dev,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        await handle_request(scope, receive, send, dispatcher=self.dispatcher)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), then
        runs startup/shutdown hooks and signals completion to the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    await self._run_hooks(self._startup_hooks)
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return

            elif msg_type == "lifespan.shutdown":
                await self._run_hooks(self._shutdown_hooks)
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def _run_hooks(self, hooks: list[Callable[..., Any]]) -> None:
        for hook in hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

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
        """Build the renderer and dispatcher.

        MUST only be called while holding _freeze_lock.
        """
        self._registry.freeze()
        self._renderer = Renderer.from_config(
            self.config,
            self._template_filters,
            self._template_globals,
        )
        self._dispatcher = Dispatcher(self._registry, self._renderer, self.config)
        self._frozen = True
        logger.debug("Frozen with controllers: %s", ", ".join(self._registry.names()))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register controllers, filters, and globals before the first request."
            )
            raise RuntimeError(msg)
