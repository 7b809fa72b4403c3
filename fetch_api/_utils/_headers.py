from typing import Mapping, Optional

from ._cookies import CookieReader
from .constants import APPLICATION_JSON, HEADER_CONTENT_TYPE


def header_csrf(
    cookies: CookieReader, csrf_cookie_name: str, csrf_header_name: str
) -> dict[str, str]:
    token = cookies.get(csrf_cookie_name)
    if not token:
        return {}
    return {csrf_header_name: token}


def merge_headers(*layers: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Merge header mappings into a new dict, later layers winning.

    Header names compare case-insensitively, so ``x-test`` in a later layer
    replaces ``X-Test`` from an earlier one instead of sitting next to it.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        for key, value in (layer or {}).items():
            for existing in [k for k in merged if k.lower() == key.lower()]:
                del merged[existing]
            merged[key] = value
    return merged


def compose_headers(
    default_headers: Mapping[str, str],
    call_headers: Optional[Mapping[str, str]] = None,
    *,
    csrf_cookie_name: str,
    csrf_header_name: str,
    cookies: CookieReader,
) -> dict[str, str]:
    """Merge the headers for a single request.

    Call-site headers override defaults key by key, and an anti-forgery token
    found in ``cookies`` overrides both. Neither input mapping is modified.

    Args:
        default_headers (Mapping[str, str]): Headers configured for every request.
        call_headers (Optional[Mapping[str, str]]): Headers given for this request.
        csrf_cookie_name (str): Cookie holding the anti-forgery token.
        csrf_header_name (str): Header the token is copied into.
        cookies (CookieReader): Cookie store to read the token from.

    Returns:
        dict[str, str]: A fresh mapping of the merged headers.
    """
    return merge_headers(
        default_headers,
        call_headers,
        header_csrf(cookies, csrf_cookie_name, csrf_header_name),
    )


def with_json_content_type(headers: Mapping[str, str], has_body: bool) -> dict[str, str]:
    """Return a copy of ``headers`` carrying a JSON ``Content-Type`` only when
    a body is sent."""
    result = {
        key: value
        for key, value in headers.items()
        if key.lower() != HEADER_CONTENT_TYPE.lower()
    }
    if has_body:
        result[HEADER_CONTENT_TYPE] = APPLICATION_JSON
    return result
