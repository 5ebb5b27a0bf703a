"""Templating — kida environment and the injected Renderer service."""

from portico.templating.integration import Renderer, create_environment

__all__ = ["Renderer", "create_environment"]
