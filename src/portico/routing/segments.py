"""Path normalization and segmenting.

Turns a raw request path (plus query string) into the ordered list of
segments the dispatcher consumes: controller, method, then params.
"""

import re
import string

# Characters kept by URL sanitization: letters, digits and the URL
# punctuation set. Everything else (whitespace, control and non-ASCII
# characters) is removed.
URL_SAFE: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&="
)

DEFAULT_PATH = "homepages/index"

_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])(\S)")


def sanitize_url(text: str) -> str:
    """Remove every character that is not legal in a URL."""
    return "".join(ch for ch in text if ch in URL_SAFE)


def title_case(segment: str) -> str:
    """Upper-case the first letter of each whitespace-separated word.

    Unlike ``str.title()``, the rest of each word is left untouched::

        title_case("blog")       -> "Blog"
        title_case("blogPosts")  -> "BlogPosts"
    """
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), segment)


def split_segments(
    path: str | None,
    query: str = "",
    *,
    alias: str = "show",
) -> list[str]:
    """Split a raw request path into routing segments.

    The trailing ``/`` is stripped, ``?query`` is appended when present,
    and the result is sanitized and split on ``/``. The leading segment
    is the base-path placeholder and is always dropped; relative paths
    are treated as if they started with ``/``. When the first remaining
    segment equals *alias* and is followed by a non-empty segment, the
    alias is dropped as well (once).

    Examples::

        split_segments("/blog/view/7/")      -> ["blog", "view", "7"]
        split_segments("show/products/5")    -> ["products", "5"]
        split_segments("/")                  -> []
    """
    url = DEFAULT_PATH if path is None else path.rstrip("/")
    if query:
        url = f"{url}?{query}"
    url = sanitize_url(url)

    segments = url.split("/")
    if segments[0]:
        segments.insert(0, "")
    segments = segments[1:]

    if alias and len(segments) > 1 and segments[0] == alias and segments[1] != "":
        segments = segments[1:]
    return segments
