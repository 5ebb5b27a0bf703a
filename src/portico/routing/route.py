"""ResolvedRoute and Dispatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ResolvedRoute:
    """Controller, method and positional params parsed from a path."""

    controller: str = "Homepages"
    method: str = "index"
    params: tuple[str, ...] = ()

    def to_path(self) -> str:
        """Serialize back into canonical ``controller/method/param...`` form.

        The controller is written as its URL segment (first letter
        lower-cased), so canonical paths round-trip unchanged::

            ResolvedRoute("Blog", "view", ("7", "9")).to_path() -> "blog/view/7/9"
        """
        segment = self.controller[:1].lower() + self.controller[1:]
        return "/".join((segment, self.method, *self.params))


@dataclass(frozen=True, slots=True)
class Dispatch:
    """The action a resolved route will invoke, and its arguments.

    ``action`` is the route's method when the controller exposes it,
    otherwise the catch-all name with the method prepended to ``args``.
    ``args`` are already fitted to the action's positional parameters;
    ``handler`` is the bound action itself.
    """

    route: ResolvedRoute
    action: str
    args: tuple[str, ...]
    handler: Callable[..., Any] = field(repr=False, compare=False)

    @property
    def is_catch_all(self) -> bool:
        return self.action != self.route.method
