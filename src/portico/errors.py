"""Portico exception hierarchy.

Shared across the registry, dispatcher, app, and ASGI bridge so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class PorticoError(Exception):
    """Base for all portico-specific errors."""


class ConfigurationError(PorticoError):
    """Raised when app setup is invalid.

    Typically raised while registering controllers or during
    ``App._freeze()`` at startup.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(PorticoError):
    """An error that maps directly to an HTTP status code."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — the request path does not lead to a controller action."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class ControllerNotFound(NotFound):  # noqa: N818
    """404 — no controller is registered under the requested name."""

    controller: str

    def __init__(self, controller: str) -> None:
        super().__init__(f"No controller named {controller!r}")
        object.__setattr__(self, "controller", controller)


class MethodNotCallable(NotFound):  # noqa: N818
    """404 — the controller has neither the action nor a catch-all."""

    controller: str
    method: str

    def __init__(self, controller: str, method: str) -> None:
        super().__init__(f"{controller} has no action {method!r} and no catch-all")
        object.__setattr__(self, "controller", controller)
        object.__setattr__(self, "method", method)
