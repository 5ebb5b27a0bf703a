"""ASGI handler — translates ASGI scope/messages to portico types.

The only component that touches raw ASGI directly. Converts the scope
to a Request, runs the dispatcher, and sends the Response back.
"""

import logging

from portico._internal.asgi import Receive, Scope, Send
from portico.errors import HTTPError
from portico.http.request import Request
from portico.http.response import Response
from portico.routing.dispatcher import Dispatcher
from portico.server.sender import send_response

logger = logging.getLogger("portico.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
) -> None:
    """Process a single HTTP request through the dispatcher.

    Routing uses the raw request target, so percent-escapes reach the
    controllers undecoded.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = dispatcher.dispatch(request.raw_path, request.query_string)
    except HTTPError as exc:
        # NotFound never gets here; the dispatcher renders it
        logger.debug("%d %s %s: %s", exc.status, request.method, request.raw_path, exc.detail)
        response = Response(body=exc.detail or str(exc.status), status=exc.status)
        response = response.with_headers(dict(exc.headers))
    except Exception:
        logger.exception("500 %s %s", request.method, request.raw_path)
        response = Response(body="Internal Server Error", status=500)

    await send_response(response, send)
