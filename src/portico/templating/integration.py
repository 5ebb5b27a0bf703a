"""Kida environment setup and the Renderer service.

Creates a kida Environment from portico's AppConfig and binds the
built-in helpers plus user-registered filters and globals. The
environment is created once during ``App._freeze()``, wrapped in a
``Renderer``, and injected into the dispatcher and every controller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kida import Environment, FileSystemLoader

from portico.config import AppConfig
from portico.http.response import Response
from portico.templating.helpers import BUILTIN_FILTERS, build_globals


def create_environment(
    config: AppConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment from app configuration.

    Templates load from ``config.views_dir``. Compiled templates are
    cached by kida and recompiled when their source file changes.
    """
    env = Environment(
        loader=FileSystemLoader(str(config.views_dir)),
        autoescape=config.autoescape,
        auto_reload=True,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    env.update_filters(BUILTIN_FILTERS)
    if filters:
        env.update_filters(filters)

    for name, value in build_globals(config).items():
        env.add_global(name, value)

    # User-defined globals may override the built-ins
    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env


class Renderer:
    """Renders named templates from a shared kida Environment.

    Process-wide and stateless with respect to requests; the only state
    is kida's compiled-template cache.
    """

    __slots__ = ("config", "env")

    def __init__(self, env: Environment, config: AppConfig) -> None:
        self.env = env
        self.config = config

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        filters: dict[str, Callable[..., Any]] | None = None,
        globals_: dict[str, Any] | None = None,
    ) -> Renderer:
        return cls(create_environment(config, filters, globals_), config)

    def render(self, template_name: str, **context: Any) -> str:
        """Render a full template to string."""
        template = self.env.get_template(template_name)
        return template.render(context)

    def not_found(self, **context: Any) -> Response:
        """Render the configured 404 page with a 404 status."""
        body = self.render(self.config.not_found_template, **context)
        return Response(body=body, status=404)
