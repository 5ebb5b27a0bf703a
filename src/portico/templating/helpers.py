"""Global template helpers.

Registered on every portico kida Environment. URL helpers are bound to
the application's base URL, so templates never hard-code it::

    <a href="{{ url('blog/view/7') }}">Post 7</a>
    <link rel="stylesheet" href="{{ asset('css/site.css') }}">
"""

import html
from collections.abc import Callable
from typing import Any
from urllib.parse import quote, urlencode

from kida.template import Markup

from portico.config import AppConfig


def join_url(base: str, path: str = "") -> str:
    """Join *path* onto *base* with exactly one ``/`` between them."""
    if not path:
        return base or "/"
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Example:
        <a href="/foo"{{ css | attr("class") }}>Foo</a>
    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def qs(base: str, **params: Any) -> str:
    """Append query-string parameters to a URL, skipping falsy values.

    Example:
        {{ url('products') | qs(page=page + 1, q=search) }}
    """
    filtered = {k: v for k, v in params.items() if v}
    if not filtered:
        return base
    encoded = urlencode({k: str(v) for k, v in filtered.items()}, quote_via=quote)
    sep = "&" if "?" in base else "?"
    return f"{base}{sep}{encoded}"


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Pluralize a word based on count.

    Example:
        {{ posts | length | pluralize("post") }}  → "5 posts"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def build_globals(config: AppConfig) -> dict[str, Any]:
    """Globals seeded from configuration plus the URL helper functions."""

    def url(path: str = "") -> str:
        return join_url(config.app_url, path)

    def asset(path: str) -> str:
        return join_url(config.app_url, f"assets/{path.lstrip('/')}")

    def is_active(current: str, target: str, cls: str = "active") -> str:
        """*cls* when *current* is *target* or one of its sub-paths."""
        current = current.strip("/")
        target = target.strip("/")
        if current == target or current.startswith(f"{target}/"):
            return cls
        return ""

    helpers: dict[str, Callable[..., Any]] = {
        "url": url,
        "asset": asset,
        "is_active": is_active,
    }
    return {
        "app_url": config.app_url,
        "app_name": config.app_name,
        "is_dev": config.is_dev,
        **helpers,
    }


BUILTIN_FILTERS: dict[str, Callable[..., Any]] = {
    "attr": attr,
    "pluralize": pluralize,
    "qs": qs,
}
