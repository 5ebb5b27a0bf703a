"""Shared fixtures: a small controller set and a renderer over tests/templates."""

from pathlib import Path

import pytest

from portico.config import AppConfig
from portico.controllers.base import Controller
from portico.controllers.registry import ControllerRegistry
from portico.http.response import Response
from portico.routing.dispatcher import Dispatcher
from portico.templating.integration import Renderer

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _call(controller: Controller, action: str, *args: str) -> str:
    return f"{type(controller).__name__}.{action}({', '.join(args)})"


class Homepages(Controller):
    def index(self) -> str:
        return _call(self, "index")


class Blog(Controller):
    def index(self) -> str:
        return _call(self, "index")

    def view(self, *args: str) -> str:
        return _call(self, "view", *args)

    def show(self, slug: str, *rest: str) -> str:
        return _call(self, "show", slug, *rest)


class Products(Controller):
    def index(self) -> str:
        return _call(self, "index")

    def show(self, slug: str, *rest: str) -> str:
        return _call(self, "show", slug, *rest)


class About(Controller):
    def index(self) -> Response:
        return self.render("page.html", title="About")

    def _secret(self) -> str:
        return "hidden"


class Show(Controller):
    def index(self) -> str:
        return _call(self, "index")


@pytest.fixture
def templates_dir() -> Path:
    return TEMPLATES_DIR


@pytest.fixture
def config(templates_dir: Path) -> AppConfig:
    return AppConfig(app_url="https://example.test", app_name="Example", views_dir=templates_dir)


@pytest.fixture
def renderer(config: AppConfig) -> Renderer:
    return Renderer.from_config(config)


@pytest.fixture
def created() -> list[str]:
    """Names of controllers instantiated during a test."""
    return []


@pytest.fixture
def registry(created: list[str]) -> ControllerRegistry:
    reg = ControllerRegistry()
    for cls in (Homepages, Blog, Products, About, Show):

        def factory(renderer: Renderer, cls: type[Controller] = cls) -> Controller:
            created.append(cls.__name__)
            return cls(renderer)

        reg.register(cls.__name__, factory)
    reg.freeze()
    return reg


@pytest.fixture
def dispatcher(registry: ControllerRegistry, renderer: Renderer, config: AppConfig) -> Dispatcher:
    return Dispatcher(registry, renderer, config)
