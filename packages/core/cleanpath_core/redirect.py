"""Redirect target assembly for canonicalized paths."""

from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

from cleanpath_core.exceptions import RedirectTargetError

# Visible ASCII only; "#" would start a fragment inside the path.
_INVALID_PATH_CHARS = re.compile(r"[^\x21-\x7e]|#")
_INVALID_QUERY_CHARS = re.compile(r"[^\x21-\x7e]")


def build_redirect_target(
    path: str, query: str | None = None, base_url: str | None = None
) -> str:
    """Join a canonical path and the original query string into a redirect target.

    The query is appended verbatim after "?" when it is non-empty. With
    ``base_url`` the result is that URL with only its path and query
    replaced; scheme, authority and fragment are kept. Nothing is re-quoted.

    Raises:
        RedirectTargetError: If the result is not a valid URI path-and-query
    """
    target = f"{path}?{query}" if query else path
    if (
        not path.startswith("/")
        or _INVALID_PATH_CHARS.search(path)
        or (query and _INVALID_QUERY_CHARS.search(query))
    ):
        raise RedirectTargetError(target)
    if base_url is None:
        return target
    base = urlsplit(base_url)
    return urlunsplit((base.scheme, base.netloc, path, query or "", base.fragment))


def split_path_and_query(raw: str) -> tuple[str, str]:
    """Split a request target into path and query, dropping any fragment."""
    path, _, query = raw.partition("?")
    path = path.partition("#")[0]
    query = query.partition("#")[0]
    return path, query
