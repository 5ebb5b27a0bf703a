"""Tests for portico.controllers.registry — name to factory mapping."""

import pytest

from portico.controllers.base import Controller
from portico.controllers.registry import ControllerRegistry
from portico.errors import ConfigurationError
from portico.templating.integration import Renderer


class Blog(Controller):
    def index(self) -> str:
        return "blog"


class TestRegister:
    def test_register_and_lookup(self) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", Blog)
        assert "Blog" in reg
        assert reg.get("Blog") is Blog
        assert len(reg) == 1

    def test_lookup_is_exact(self) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", Blog)
        assert "blog" not in reg
        assert "BLOG" not in reg
        assert reg.get("blog") is None

    def test_duplicate_rejected(self) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", Blog)
        with pytest.raises(ConfigurationError, match="already registered"):
            reg.register("Blog", Blog)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="must not be empty"):
            ControllerRegistry().register("", Blog)

    def test_register_after_freeze_rejected(self) -> None:
        reg = ControllerRegistry()
        reg.freeze()
        assert reg.frozen is True
        with pytest.raises(ConfigurationError, match="frozen"):
            reg.register("Blog", Blog)

    def test_names_sorted(self) -> None:
        reg = ControllerRegistry()
        reg.register("Products", Blog)
        reg.register("About", Blog)
        reg.register("Blog", Blog)
        assert reg.names() == ["About", "Blog", "Products"]
        assert sorted(reg) == ["About", "Blog", "Products"]


class TestCreate:
    def test_class_factory(self, renderer: Renderer) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", Blog)
        controller = reg.create("Blog", renderer)
        assert isinstance(controller, Blog)
        assert controller.renderer is renderer

    def test_function_factory(self, renderer: Renderer) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", lambda r: Blog(r))
        assert isinstance(reg.create("Blog", renderer), Blog)

    def test_new_instance_each_time(self, renderer: Renderer) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", Blog)
        assert reg.create("Blog", renderer) is not reg.create("Blog", renderer)

    def test_unknown_name(self, renderer: Renderer) -> None:
        with pytest.raises(KeyError):
            ControllerRegistry().create("Blog", renderer)

    def test_factory_must_return_action_provider(self, renderer: Renderer) -> None:
        reg = ControllerRegistry()
        reg.register("Blog", lambda r: object())
        with pytest.raises(ConfigurationError, match="no get_action"):
            reg.create("Blog", renderer)
