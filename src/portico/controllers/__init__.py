"""Controllers — the action lookup protocol and the name registry."""

from portico.controllers.base import ActionProvider, Controller
from portico.controllers.registry import ControllerRegistry

__all__ = ["ActionProvider", "Controller", "ControllerRegistry"]
