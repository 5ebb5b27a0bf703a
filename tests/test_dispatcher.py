"""Tests for portico.routing.dispatcher — resolution and dispatch."""

import logging
from pathlib import Path

import pytest

from portico.config import AppConfig
from portico.controllers.base import Controller
from portico.controllers.registry import ControllerRegistry
from portico.errors import ControllerNotFound, MethodNotCallable, NotFound
from portico.routing.dispatcher import Dispatcher
from portico.routing.route import ResolvedRoute
from portico.templating.integration import Renderer


class Home(Controller):
    def index(self) -> str:
        return "home"


class TestResolve:
    @pytest.mark.parametrize("path", ["", "/", "//"])
    def test_no_segments_defaults(self, dispatcher: Dispatcher, path: str) -> None:
        assert dispatcher.resolve(path) == ResolvedRoute("Homepages", "index", ())

    def test_absent_path(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve(None) == ResolvedRoute("Homepages", "index", ())

    def test_controller_only(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve("/blog") == ResolvedRoute("Blog", "index", ())

    def test_controller_method_params(self, dispatcher: Dispatcher) -> None:
        route = dispatcher.resolve("/blog/view/7/9")
        assert route == ResolvedRoute("Blog", "view", ("7", "9"))

    def test_method_segment_consumed_even_when_not_an_action(
        self, dispatcher: Dispatcher
    ) -> None:
        route = dispatcher.resolve("/blog/42/extra")
        assert route.method == "42"
        assert route.params == ("extra",)

    def test_empty_method_segment_keeps_default(self, dispatcher: Dispatcher) -> None:
        route = dispatcher.resolve("/blog//7")
        assert route.method == "index"
        assert route.params == ("", "7")

    def test_unknown_controller(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(ControllerNotFound) as exc_info:
            dispatcher.resolve("/nope/index")
        assert exc_info.value.controller == "Nope"
        assert exc_info.value.status == 404

    def test_controller_lookup_is_title_cased(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve("/Blog").controller == "Blog"

    def test_lookup_is_exact_after_title_case(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(ControllerNotFound):
            dispatcher.resolve("/BLOG")

    def test_alias_then_controller(self, dispatcher: Dispatcher) -> None:
        route = dispatcher.resolve("show/products/5")
        assert route.controller == "Products"
        assert route.method == "5"

    def test_alias_not_stripped_twice(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve("/show/show/5").controller == "Show"

    def test_trailing_slash(self, dispatcher: Dispatcher) -> None:
        assert dispatcher.resolve("/blog/view/7/") == dispatcher.resolve("/blog/view/7")

    def test_query_string_lands_in_last_segment(self, dispatcher: Dispatcher) -> None:
        route = dispatcher.resolve("/blog/view/7", "page=2")
        assert route.params == ("7?page=2",)

    def test_query_on_root_is_not_a_controller(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(ControllerNotFound):
            dispatcher.resolve("/", "x=1")


class TestPlan:
    def test_direct_action(self, dispatcher: Dispatcher) -> None:
        target = dispatcher.plan("/blog/view/7/9")
        assert target.action == "view"
        assert target.args == ("7", "9")
        assert target.is_catch_all is False

    def test_catch_all(self, dispatcher: Dispatcher) -> None:
        target = dispatcher.plan("/blog/hello-world/2")
        assert target.action == "show"
        assert target.args == ("hello-world", "2")
        assert target.is_catch_all is True

    def test_default_method(self, dispatcher: Dispatcher) -> None:
        target = dispatcher.plan("/products")
        assert target.action == "index"

    def test_method_not_callable(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(MethodNotCallable) as exc_info:
            dispatcher.plan("/about/history")
        assert exc_info.value.controller == "About"
        assert exc_info.value.method == "history"

    def test_private_method_not_callable(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(MethodNotCallable):
            dispatcher.plan("/about/_secret")

    def test_base_class_members_not_callable(self, dispatcher: Dispatcher) -> None:
        with pytest.raises(MethodNotCallable):
            dispatcher.plan("/about/render/page.html")


class TestDispatch:
    def test_empty_path_calls_homepage_index(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("/")
        assert response.status == 200
        assert response.text == "Homepages.index()"

    def test_named_action_with_params(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("blog/view/7/9")
        assert response.text == "Blog.view(7, 9)"

    def test_show_as_method(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("blog/show/42")
        assert response.text == "Blog.show(42)"

    def test_unknown_method_goes_to_catch_all(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("/blog/42")
        assert response.text == "Blog.show(42)"

    def test_catch_all_receives_remaining_params(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("/blog/my-post/comments/3")
        assert response.text == "Blog.show(my-post, comments, 3)"

    def test_alias_path(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("show/products/5")
        assert response.text == "Products.show(5)"

    def test_trailing_slash_identical(self, dispatcher: Dispatcher) -> None:
        assert (
            dispatcher.dispatch("/blog/view/7/").text
            == dispatcher.dispatch("/blog/view/7").text
        )

    def test_rendered_action(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("/about")
        assert response.status == 200
        assert "<title>About</title>" in response.text

    def test_unknown_controller_is_404(
        self, dispatcher: Dispatcher, created: list[str]
    ) -> None:
        response = dispatcher.dispatch("/missing/index/1")
        assert response.status == 404
        assert "Not Found" in response.text
        assert created == []

    def test_missing_action_without_catch_all_is_404(self, dispatcher: Dispatcher) -> None:
        response = dispatcher.dispatch("/about/history")
        assert response.status == 404
        assert "Not Found" in response.text

    def test_404_logged_at_debug(
        self, dispatcher: Dispatcher, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="portico.routing"):
            dispatcher.dispatch("/missing")
        assert any("404" in record.getMessage() for record in caplog.records)

    def test_controller_created_per_request(
        self, dispatcher: Dispatcher, created: list[str]
    ) -> None:
        dispatcher.dispatch("/blog")
        dispatcher.dispatch("/blog/view/1")
        assert created == ["Blog", "Blog"]

    def test_unregistered_default_controller_is_404(self, renderer: Renderer) -> None:
        empty = ControllerRegistry()
        empty.freeze()
        response = Dispatcher(empty, renderer).dispatch("/")
        assert response.status == 404

    def test_custom_defaults(self, renderer: Renderer) -> None:
        registry = ControllerRegistry()
        registry.register("Home", Home)
        config = AppConfig(views_dir=renderer.config.views_dir, default_controller="Home")
        response = Dispatcher(registry, renderer, config).dispatch("/")
        assert response.text == "home"

    def test_catch_all_disabled(self, registry: ControllerRegistry, renderer: Renderer) -> None:
        config = AppConfig(views_dir=renderer.config.views_dir, catch_all="")
        response = Dispatcher(registry, renderer, config).dispatch("/blog/42")
        assert response.status == 404

    def test_development_404(
        self, registry: ControllerRegistry, templates_dir: Path
    ) -> None:
        config = AppConfig(views_dir=templates_dir, env="development")
        renderer = Renderer.from_config(config)
        response = Dispatcher(registry, renderer, config).dispatch("/missing")
        assert response.status == 404
        assert 'class="dev"' in response.text

    def test_action_errors_propagate(self, renderer: Renderer) -> None:
        class Broken(Controller):
            def index(self) -> str:
                raise ValueError("boom")

        registry = ControllerRegistry()
        registry.register("Homepages", Broken)
        with pytest.raises(ValueError, match="boom"):
            Dispatcher(registry, renderer).dispatch("/")

    def test_not_found_from_action_renders_404(self, renderer: Renderer) -> None:
        class Posts(Controller):
            def show(self, slug: str) -> str:
                raise NotFound(f"No post {slug!r}")

        registry = ControllerRegistry()
        registry.register("Posts", Posts)
        response = Dispatcher(registry, renderer).dispatch("/posts/missing")
        assert response.status == 404
        assert "Not Found" in response.text


class Archive(Controller):
    def view(self, post_id: str) -> str:
        return f"view({post_id})"

    def page(self, year: str, month: str = "01") -> str:
        return f"page({year}, {month})"

    def tagged(self, tag: str, *rest: str) -> str:
        return f"tagged({', '.join((tag, *rest))})"

    def filtered(self, *, kind: str) -> str:
        return kind


@pytest.fixture
def archive(renderer: Renderer) -> Dispatcher:
    registry = ControllerRegistry()
    registry.register("Archive", Archive)
    registry.freeze()
    return Dispatcher(registry, renderer)


class TestActionArity:
    def test_surplus_params_dropped(self, archive: Dispatcher) -> None:
        assert archive.dispatch("/archive/view/7/9").text == "view(7)"

    def test_plan_shows_fitted_args(self, archive: Dispatcher) -> None:
        target = archive.plan("/archive/view/7/9")
        assert target.args == ("7",)
        assert target.route.params == ("7", "9")

    def test_optional_params_filled_when_present(self, archive: Dispatcher) -> None:
        assert archive.dispatch("/archive/page/2024").text == "page(2024, 01)"
        assert archive.dispatch("/archive/page/2024/06/x").text == "page(2024, 06)"

    def test_var_positional_keeps_everything(self, archive: Dispatcher) -> None:
        assert archive.dispatch("/archive/tagged/a/b/c").text == "tagged(a, b, c)"

    def test_missing_required_param_is_404(self, archive: Dispatcher) -> None:
        response = archive.dispatch("/archive/view")
        assert response.status == 404

    def test_missing_required_param_plan_raises(self, archive: Dispatcher) -> None:
        with pytest.raises(NotFound, match="needs more path segments"):
            archive.plan("/archive/view")

    def test_required_keyword_only_is_404(self, archive: Dispatcher) -> None:
        assert archive.dispatch("/archive/filtered").status == 404
