"""HTTP client core for JSON APIs.

Builds request URLs from a configured base URL, merges default and per-call
headers, forwards an anti-forgery token found in a cookie, and classifies
every response into a success value or a typed failure.

Example:
```python
    from fetch_api import ApiError, FetchApi

    api = FetchApi(origin="https://example.com")
    api.configure(base_url="/api", trailing_slash="always")

    api.get("hello", params={"t": 2, "order": "name"})  # GET /api/hello/?t=2&order=name
    try:
        api.post("hello", {"t": 1})
    except ApiError as e:
        print(e.status_code, e.error)
```
"""

from ._config import Config
from ._fetch_api import FetchApi
from ._utils import (
    CookieReader,
    HttpxCookieReader,
    MappingCookieReader,
    build_url,
    compose_headers,
    interpret,
)
from .models import (
    ApiError,
    Failure,
    HttpResponseError,
    InvalidTrailingSlashError,
    Outcome,
    RequestFailure,
    RequestOptions,
    Success,
    TrailingSlash,
)

__all__ = [
    "FetchApi",
    "Config",
    "TrailingSlash",
    "RequestOptions",
    "Success",
    "Failure",
    "Outcome",
    "CookieReader",
    "MappingCookieReader",
    "HttpxCookieReader",
    "RequestFailure",
    "ApiError",
    "HttpResponseError",
    "InvalidTrailingSlashError",
    "build_url",
    "compose_headers",
    "interpret",
]
