from ._cookies import CookieReader, HttpxCookieReader, MappingCookieReader
from ._headers import compose_headers, merge_headers, with_json_content_type
from ._logs import setup_logging
from ._request_spec import RequestSpec
from ._response import interpret
from ._ssl_context import get_httpx_client_kwargs
from ._url import build_url

__all__ = [
    "CookieReader",
    "HttpxCookieReader",
    "MappingCookieReader",
    "compose_headers",
    "merge_headers",
    "with_json_content_type",
    "setup_logging",
    "RequestSpec",
    "interpret",
    "get_httpx_client_kwargs",
    "build_url",
]
