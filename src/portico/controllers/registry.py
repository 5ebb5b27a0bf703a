"""Controller registry — canonical name to factory.

Populated during app setup and frozen before the first request, so
resolution is an exact-match dict lookup with no filesystem probing or
dynamic imports at request time.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from portico.controllers.base import ActionProvider
from portico.errors import ConfigurationError

if TYPE_CHECKING:
    from portico.templating.integration import Renderer

type ControllerFactory = Callable[[Renderer], Any]


class ControllerRegistry:
    """Mapping of canonical controller names to factories.

    Usage::

        registry = ControllerRegistry()
        registry.register("Blog", Blog)
        registry.freeze()
        controller = registry.create("Blog", renderer)
    """

    __slots__ = ("_factories", "_frozen")

    def __init__(self) -> None:
        self._factories: dict[str, ControllerFactory] = {}
        self._frozen = False

    def register(self, name: str, factory: ControllerFactory) -> None:
        """Register *factory* under *name*. Must be called before freeze()."""
        if self._frozen:
            msg = f"Cannot register controller {name!r} after the registry is frozen."
            raise ConfigurationError(msg)
        if not name:
            msg = "Controller name must not be empty."
            raise ConfigurationError(msg)
        if name in self._factories:
            msg = f"Controller {name!r} is already registered."
            raise ConfigurationError(msg)
        self._factories[name] = factory

    def freeze(self) -> None:
        """Freeze the registry. No more controllers can be added."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def get(self, name: str) -> ControllerFactory | None:
        return self._factories.get(name)

    def names(self) -> list[str]:
        """Registered controller names, sorted."""
        return sorted(self._factories)

    def create(self, name: str, renderer: Renderer) -> ActionProvider:
        """Instantiate the controller registered under *name*.

        Raises ``KeyError`` for unknown names and ``ConfigurationError``
        when the factory returns something without ``get_action``.
        """
        controller = self._factories[name](renderer)
        if not isinstance(controller, ActionProvider):
            msg = (
                f"Factory for controller {name!r} returned "
                f"{type(controller).__name__}, which has no get_action()."
            )
            raise ConfigurationError(msg)
        return controller
