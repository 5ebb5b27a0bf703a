"""Portico CLI — controller listing, path resolution, and serving.

Entry point registered as ``portico`` in ``pyproject.toml``::

    [project.scripts]
    portico = "portico.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``portico`` command."""
    parser = argparse.ArgumentParser(
        prog="portico",
        description="Portico — a convention-based front controller.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- portico routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List controllers and their actions")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- portico resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show which action a request path dispatches to"
    )
    resolve_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    resolve_parser.add_argument("path", help="Request path (e.g. /blog/view/7)")
    resolve_parser.add_argument("--query", default="", help="Raw query string")

    # -- portico run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve an app with pounce")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from portico.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from portico.cli._match import run_resolve

        run_resolve(args)
    elif args.command == "run":
        from portico.cli._run import run_server

        run_server(args)
