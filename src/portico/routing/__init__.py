"""Routing — path segmenting and front-controller dispatch.

Paths resolve to ``controller/method/params`` by convention; there is
no route table beyond the controller registry.
"""

from portico.routing.dispatcher import Dispatcher
from portico.routing.route import Dispatch, ResolvedRoute
from portico.routing.segments import sanitize_url, split_segments, title_case

__all__ = [
    "Dispatch",
    "Dispatcher",
    "ResolvedRoute",
    "sanitize_url",
    "split_segments",
    "title_case",
]
