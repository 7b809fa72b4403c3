from typing import Any, Mapping, Optional
from urllib.parse import quote, urlparse

from ..models.trailing_slash import TrailingSlash

# marks kept unescaped in query components
_UNRESERVED = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a query-string key or value.

    >>> encode_component("a b&c")
    'a%20b%26c'
    """
    return quote(value, safe=_UNRESERVED)


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_absolute_url(url: str) -> bool:
    # Protocol-relative URLs (starting with //) carry their own host
    if url.startswith("//"):
        return True

    parsed = urlparse(url)

    # "users:search" parses with a scheme but no host and stays relative
    return bool(parsed.scheme and parsed.netloc)


def query_string(params: Optional[Mapping[str, Any]]) -> str:
    """Build ``key=value`` pairs joined by ``&``, skipping ``None`` values.

    Pairs keep the insertion order of ``params``. Returns an empty string
    when there is nothing to send.
    """
    if not params:
        return ""

    pairs = [
        f"{encode_component(str(key))}={encode_component(stringify(value))}"
        for key, value in params.items()
        if value is not None
    ]

    return "&".join(pairs)


def needs_trailing_slash(trailing_slash: TrailingSlash, method: str) -> bool:
    if trailing_slash == TrailingSlash.ALWAYS:
        return True
    if trailing_slash == TrailingSlash.WRITE_ONLY:
        return method.upper() != "GET"
    return False


def build_url(
    base_url: str,
    path: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    trailing_slash: TrailingSlash = TrailingSlash.WRITE_ONLY,
    method: str = "GET",
) -> str:
    """Compose the request URL for ``path``.

    Rooted paths (``/users``) and absolute URLs are used as-is, anything else
    is joined to ``base_url``. The trailing-slash policy applies to the path
    only and never to absolute URLs or paths already ending in ``/``.

    >>> build_url("/api", "hello", {"t": 2, "order": "name"},
    ...           trailing_slash=TrailingSlash.ALWAYS)
    '/api/hello/?t=2&order=name'

    Args:
        base_url (str): Prefix for relative paths, without a trailing slash.
        path (str): Resource path or absolute URL.
        params (Optional[Mapping[str, Any]]): Query parameters. ``None`` values are dropped.
        trailing_slash (TrailingSlash): Policy for terminating the path with ``/``.
        method (str): HTTP method, consulted by the ``write_only`` policy.

    Returns:
        str: The URL to dispatch.
    """
    if is_absolute_url(path):
        url = path
    else:
        url = path if path.startswith("/") else f"{base_url}/{path}"

        if not url.endswith("/") and needs_trailing_slash(trailing_slash, method):
            url = f"{url}/"

    query = query_string(params)
    if query:
        url = f"{url}?{query}"

    return url
