"""Host-agnostic request paths.

Function hosts invoke the app under ``<prefix>/<function-name>``
(``/.netlify/functions/api/articulos``).  Routes are declared without that
prefix, so both the ASGI middleware and the serverless handler run incoming
paths through :func:`normalize_path` first.
"""

import re
from functools import lru_cache
from urllib.parse import urlsplit, urlunsplit

DEFAULT_FUNCTION_PREFIX = "/.netlify/functions"
PLACEHOLDER_BASE_URL = "https://placeholder.local"

_REPEATED_SLASHES = re.compile(r"/{2,}")
_TRAILING_SUFFIXES = ("/index", ".html", ".htm")


@lru_cache(maxsize=16)
def _prefix_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(prefix.rstrip('/'))}/[^/]+")


def _strip_trailing(path: str) -> str:
    while True:
        stripped = path
        if len(stripped) > 1 and stripped.endswith("/"):
            stripped = stripped[:-1]
        for suffix in _TRAILING_SUFFIXES:
            if stripped.endswith(suffix):
                stripped = stripped[: -len(suffix)]
                break
        if stripped == path:
            return path
        path = stripped


def normalize_path(path: str | None, prefix: str = DEFAULT_FUNCTION_PREFIX) -> str:
    """Return *path* without the function prefix, duplicate slashes or page suffixes.

    Exactly one leading ``<prefix>/<function-name>`` pair is removed; trailing
    ``/``, ``/index``, ``.html`` and ``.htm`` are removed until none is left.
    The empty result becomes ``/``.  An empty or ``/`` prefix strips nothing.
    """
    if not path:
        return "/"
    path = _REPEATED_SLASHES.sub("/", path)
    if not path.startswith("/"):
        path = "/" + path
    if prefix and prefix.strip("/"):
        path = _prefix_pattern(prefix).sub("", path, count=1)
    return _strip_trailing(path) or "/"


def normalize_raw_url(raw_url: str | None, path: str) -> str:
    """Replace the path component of *raw_url* with *path*.

    A missing URL is rebuilt on :data:`PLACEHOLDER_BASE_URL`.  A URL that
    cannot be parsed as absolute is returned unchanged.
    """
    if not raw_url:
        return urlunsplit(urlsplit(PLACEHOLDER_BASE_URL)._replace(path=path))
    try:
        parts = urlsplit(raw_url)
    except ValueError:
        return raw_url
    if not parts.scheme or not parts.netloc:
        return raw_url
    return urlunsplit(parts._replace(path=path))
