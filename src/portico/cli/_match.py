"""``portico resolve`` — show where a request path dispatches.

Runs the same resolution the dispatcher uses, without invoking the
action, and prints the controller, action and arguments (or the 404
reason).
"""

import argparse
import sys

from portico.cli._resolve import resolve_app
from portico.errors import NotFound


def run_resolve(args: argparse.Namespace) -> None:
    """Print the dispatch target for ``args.path``.

    Exits with status 1 when the path would render the 404 page.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        target = app.plan(args.path, args.query)
    except NotFound as exc:
        print(f"404  {args.path}  ({exc.detail})")
        raise SystemExit(1) from exc

    route = target.route
    call_args = ", ".join(repr(arg) for arg in target.args)
    print(f"controller  {route.controller}")
    print(f"method      {route.method}")
    print(f"params      {list(route.params)!r}")
    suffix = "  (catch-all)" if target.is_catch_all else ""
    print(f"calls       {route.controller}.{target.action}({call_args}){suffix}")
