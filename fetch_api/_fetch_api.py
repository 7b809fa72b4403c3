from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from httpx import AsyncBaseTransport, BaseTransport, Cookies

from ._config import Config
from ._services import ApiClient
from ._utils import CookieReader, setup_logging
from ._utils._ssl_context import is_truthy
from ._utils.constants import (
    ENV_BASE_URL,
    ENV_CSRF_COOKIE_NAME,
    ENV_CSRF_HEADER_NAME,
    ENV_DEBUG,
    ENV_ORIGIN,
    ENV_TRAILING_SLASH,
)

load_dotenv()


class FetchApi(ApiClient):
    """Client for a JSON API, configured from arguments or the environment.

    Settings not passed explicitly are read from ``FETCH_API_BASE_URL``,
    ``FETCH_API_CSRF_COOKIE_NAME``, ``FETCH_API_CSRF_HEADER_NAME``,
    ``FETCH_API_TRAILING_SLASH`` and ``FETCH_API_ORIGIN`` (a ``.env`` file is
    loaded too), falling back to the defaults.

    Example:
    ```python
        from fetch_api import FetchApi

        api = FetchApi(origin="https://example.com")
        api.configure(base_url="/api", default_headers={"X-Test": "test"})
        api.get("hello", params={"t": 2, "order": "name"})
    ```

    Args:
        base_url (Optional[str]): Prefix for relative paths.
        default_headers (Optional[dict[str, str]]): Headers sent with every request.
        csrf_cookie_name (Optional[str]): Cookie holding the anti-forgery token.
        csrf_header_name (Optional[str]): Header the token is copied into.
        trailing_slash (Optional[str]): One of ``always``, ``none`` or ``write_only``.
        origin (Optional[str]): Scheme and host that rooted paths resolve against.
        cookies (Optional[CookieReader]): Where the anti-forgery token is read from.
            Defaults to the client's own cookie jars.
        transport (Optional[BaseTransport]): httpx transport for synchronous calls.
        async_transport (Optional[AsyncBaseTransport]): httpx transport for asynchronous calls.
        debug (bool): Log every request and response at debug level.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        default_headers: Optional[dict[str, str]] = None,
        csrf_cookie_name: Optional[str] = None,
        csrf_header_name: Optional[str] = None,
        trailing_slash: Optional[str] = None,
        origin: Optional[str] = None,
        cookies: Optional[CookieReader] = None,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        debug: bool = False,
    ) -> None:
        config = Config()
        config.update(
            base_url=base_url or env.get(ENV_BASE_URL),
            default_headers=default_headers,
            csrf_cookie_name=csrf_cookie_name or env.get(ENV_CSRF_COOKIE_NAME),
            csrf_header_name=csrf_header_name or env.get(ENV_CSRF_HEADER_NAME),
            trailing_slash=trailing_slash or env.get(ENV_TRAILING_SLASH),
        )

        setup_logging(debug or is_truthy(env.get(ENV_DEBUG, "")))

        super().__init__(
            config=config,
            origin=origin or env.get(ENV_ORIGIN),
            cookies=cookies,
            transport=transport,
            async_transport=async_transport,
        )

    @property
    def cookies(self) -> Cookies:
        return self._client.cookies

    def __enter__(self) -> "FetchApi":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    async def __aenter__(self) -> "FetchApi":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
