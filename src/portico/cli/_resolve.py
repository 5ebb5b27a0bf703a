"""Locate the App a CLI command operates on.

Targets are either an import string (``blog.app:app``) or a source
file (``examples/blog/app.py:app``). The attribute defaults to ``app``;
a zero-argument factory is called.
"""

import importlib
import importlib.util
import os
import sys
from pathlib import Path
from types import ModuleType

from portico.app import App


def _load_file(path: Path) -> ModuleType:
    if not path.is_file():
        msg = f"No app file at {str(path)!r}"
        raise ModuleNotFoundError(msg)
    spec = importlib.util.spec_from_file_location(f"_portico_app_{path.stem}", path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load {str(path)!r} as a module"
        raise ModuleNotFoundError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _load_module(name: str) -> ModuleType:
    # Like ASGI servers, resolve against the working directory first
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    return importlib.import_module(name)


def resolve_app(target: str) -> App:
    """Resolve *target* to a portico ``App``.

    Raises:
        ModuleNotFoundError: The module or file cannot be found.
        AttributeError: The module has no such attribute.
        TypeError: The attribute is not an App, nor a factory returning one.
    """
    location, _, attr_name = target.rpartition(":") if ":" in target else (target, "", "")
    attr_name = attr_name or "app"

    if location.endswith(".py"):
        module = _load_file(Path(location))
    else:
        module = _load_module(location)

    obj = getattr(module, attr_name)
    if not isinstance(obj, App) and callable(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"App factory {target!r} failed: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, not a portico.App instance"
        raise TypeError(msg)
    return obj
