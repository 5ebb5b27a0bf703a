"""Immutable HTTP request.

Only what the front controller reads: method, path, and the raw
query string. Body parsing is left to the controllers' own stack.
"""

from __future__ import annotations

from dataclasses import dataclass

from portico._internal.asgi import HTTPScope, Scope


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the server's percent-decoded path; ``raw_path`` is the
    path exactly as sent, which is what routing reads.
    """

    method: str = "GET"
    path: str = "/"
    query_string: str = ""
    raw_path: str = "/"

    @classmethod
    def from_asgi(cls, scope: Scope) -> Request:
        """Create a Request from an ASGI HTTP scope.

        Servers that omit ``raw_path`` fall back to the decoded ``path``.
        """
        parsed = HTTPScope.from_scope(scope)
        return cls(
            method=parsed.method,
            path=parsed.path,
            query_string=parsed.query_string.decode("latin-1"),
            raw_path=parsed.raw_path.decode("latin-1") if parsed.raw_path else parsed.path,
        )
