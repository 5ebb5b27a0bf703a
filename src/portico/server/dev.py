"""Serve a live portico App with pounce.

Single worker. Reload is turned on in development so edits to
controllers are picked up; template edits are picked up by kida either way.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("portico.server")


def run_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a pounce server for the given ASGI callable.

    Args:
        app: ASGI callable (portico App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on source changes.
        app_path: Optional ``"module:attribute"`` import string. When
            provided, pounce reimports the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload)
    logger.info("Serving on http://%s:%d (reload=%s)", host, port, reload)
    Server(config, app, app_path=app_path).run()
