"""Portico — a convention-based front controller for server-rendered apps.

Request paths resolve by convention to ``controller/method/params``:
``/blog/view/7/9`` calls ``Blog.view("7", "9")``. Controllers are
registered explicitly and rendered pages go through a shared kida
environment.

Basic usage::

    from portico import App, AppConfig, Controller

    app = App(AppConfig.from_env())

    @app.controller()
    class Blog(Controller):
        def view(self, post_id):
            return self.render("blog/view.html", post_id=post_id)

        def show(self, slug, *rest):
            return self.render("blog/post.html", slug=slug)

    response = app.dispatch("/blog/view/7")

``app`` is also an ASGI 3.0 application for any ASGI server.
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "Controller",
    "ControllerNotFound",
    "ControllerRegistry",
    "Dispatcher",
    "MethodNotCallable",
    "NotFound",
    "PorticoError",
    "Renderer",
    "Request",
    "ResolvedRoute",
    "Response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import portico`` fast while providing a clean top-level API.
    """
    if name == "App":
        from portico.app import App

        return App

    if name == "AppConfig":
        from portico.config import AppConfig

        return AppConfig

    if name in ("Controller", "ControllerRegistry"):
        from portico import controllers as _controllers

        return getattr(_controllers, name)

    if name in ("Dispatcher", "ResolvedRoute"):
        from portico import routing as _routing

        return getattr(_routing, name)

    if name == "Renderer":
        from portico.templating.integration import Renderer

        return Renderer

    if name == "Request":
        from portico.http.request import Request

        return Request

    if name == "Response":
        from portico.http.response import Response

        return Response

    if name in ("ControllerNotFound", "MethodNotCallable", "NotFound", "PorticoError"):
        from portico import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
