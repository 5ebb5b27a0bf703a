"""Front-controller dispatch.

Resolves a request path to ``controller/method/params``, creates the
controller from the registry, and invokes exactly one action. Every
resolution failure ends in the rendered 404 page.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from portico.config import AppConfig
from portico.controllers.registry import ControllerRegistry
from portico.errors import ControllerNotFound, MethodNotCallable, NotFound
from portico.http.response import Response, coerce
from portico.routing.route import Dispatch, ResolvedRoute
from portico.routing.segments import split_segments, title_case

if TYPE_CHECKING:
    from portico.controllers.base import ActionProvider
    from portico.templating.integration import Renderer

logger = logging.getLogger("portico.routing")


class Dispatcher:
    """Maps request paths onto controller actions.

    Usage::

        dispatcher = Dispatcher(registry, renderer, config)
        response = dispatcher.dispatch("/blog/view/7")

    The registry and renderer are shared, read-only collaborators; the
    controller instance lives for a single ``dispatch()`` call.
    """

    __slots__ = ("config", "registry", "renderer")

    def __init__(
        self,
        registry: ControllerRegistry,
        renderer: Renderer,
        config: AppConfig | None = None,
    ) -> None:
        self.registry = registry
        self.renderer = renderer
        self.config = config or AppConfig()

    def resolve(self, path: str | None, query: str = "") -> ResolvedRoute:
        """Parse *path* into controller, method and params.

        The method segment, when present and non-empty, is consumed
        whether or not the controller turns out to have such an action;
        it reaches the catch-all as its leading argument instead.

        Raises ``ControllerNotFound`` when the controller segment names no
        registered controller.
        """
        segments = split_segments(path, query, alias=self.config.alias)

        controller = self.config.default_controller
        if segments:
            controller = title_case(segments[0])
            if controller not in self.registry:
                raise ControllerNotFound(controller)
            segments = segments[1:]

        method = self.config.default_method
        if segments and segments[0] != "":
            method = segments[0]
            segments = segments[1:]

        return ResolvedRoute(controller=controller, method=method, params=tuple(segments))

    def plan(self, path: str | None, query: str = "") -> Dispatch:
        """Resolve *path* and pick the action, without invoking it.

        Raises ``ControllerNotFound`` or ``MethodNotCallable``.
        """
        route = self.resolve(path, query)
        controller = self._create(route.controller)
        return self._select(controller, route)

    def dispatch(self, path: str | None, query: str = "") -> Response:
        """Handle one request: invoke the resolved action or render 404.

        A ``NotFound`` raised by the action itself also renders the 404
        page, so controllers can bail out the same way resolution does.
        """
        try:
            target = self.plan(path, query)
            logger.debug(
                "%s.%s(%s)",
                target.route.controller,
                target.action,
                ", ".join(repr(arg) for arg in target.args),
            )
            result = target.handler(*target.args)
        except NotFound as exc:
            logger.debug("404 %r: %s", path, exc.detail)
            return self.renderer.not_found()
        return coerce(result)

    # -- Internal --

    def _create(self, name: str) -> ActionProvider:
        if name not in self.registry:
            raise ControllerNotFound(name)
        return self.registry.create(name, self.renderer)

    def _select(self, controller: ActionProvider, route: ResolvedRoute) -> Dispatch:
        action, args = route.method, route.params
        handler = controller.get_action(action)

        if handler is None and self.config.catch_all:
            action, args = self.config.catch_all, (route.method, *route.params)
            handler = controller.get_action(action)

        if handler is None:
            raise MethodNotCallable(route.controller, route.method)

        fitted = _fit_args(handler, args)
        if fitted is None:
            msg = f"{route.controller}.{action}() needs more path segments"
            raise NotFound(msg)
        return Dispatch(route=route, action=action, args=fitted, handler=handler)


def _fit_args(handler: Callable[..., Any], args: tuple[str, ...]) -> tuple[str, ...] | None:
    """Fit path params to *handler*'s positional parameters.

    Surplus params are dropped unless the action takes ``*args``.
    Returns ``None`` when required parameters would be left unfilled.
    """
    try:
        params = inspect.signature(handler).parameters.values()
    except (TypeError, ValueError):
        return args

    if any(p.kind is p.KEYWORD_ONLY and p.default is p.empty for p in params):
        return None
    positional = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if len(args) < sum(1 for p in positional if p.default is p.empty):
        return None
    if any(p.kind is p.VAR_POSITIONAL for p in params):
        return args
    return args[: len(positional)]
