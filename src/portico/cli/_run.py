"""``portico run`` — serve an app with pounce."""

import argparse
import sys

from portico.cli._resolve import resolve_app


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it.

    ``--host`` and ``--port`` override the app config. Reload follows
    ``config.is_dev`` and reimports the app from the import string.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from portico.server import dev

    app._ensure_frozen()
    dev.run_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=app.config.is_dev,
        app_path=args.app if app.config.is_dev else None,
    )
