"""Controller base class and the action lookup protocol.

A controller is any object that can look up an action by name::

    def get_action(self, name: str) -> Callable[..., Any] | None: ...

The dispatcher checks the shape, not the lineage. ``Controller`` is the
convenient implementation: every public method defined on a subclass is
an action, and the action table is computed once per class::

    class Blog(Controller):
        def index(self):
            return self.render("blog/index.html", posts=POSTS)

        def view(self, post_id, page="1"):
            ...

        def show(self, slug, *rest):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from portico.http.response import Response

if TYPE_CHECKING:
    from portico.templating.integration import Renderer


@runtime_checkable
class ActionProvider(Protocol):
    """Anything the dispatcher can invoke actions on."""

    def get_action(self, name: str) -> Callable[..., Any] | None: ...


def _collect_actions(cls: type) -> frozenset[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        if klass is Controller or not issubclass(klass, Controller):
            continue
        for name, value in vars(klass).items():
            if name.startswith("_") or name in _RESERVED or isinstance(value, type):
                continue
            if callable(value) or isinstance(value, (staticmethod, classmethod)):
                names.add(name)
    return frozenset(names)


class Controller:
    """Base class for portico controllers.

    Instances are created per request with the shared renderer.
    """

    actions: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.actions = _collect_actions(cls)

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def get_action(self, name: str) -> Callable[..., Any] | None:
        """Bound action called *name*, or ``None`` if there is none."""
        if name not in self.actions:
            return None
        return getattr(self, name)

    def render(self, template_name: str, *, status: int = 200, **context: Any) -> Response:
        """Render a template into an HTML response."""
        body = self.renderer.render(template_name, **context)
        return Response(body=body, status=status)


_RESERVED: frozenset[str] = frozenset(
    name for name in vars(Controller) if not name.startswith("_")
)
