import asyncio
from logging import getLogger
from typing import Any, Optional

from httpx import AsyncBaseTransport, AsyncClient, BaseTransport, Client, Response

from .._config import Config
from .._utils import RequestSpec, get_httpx_client_kwargs


class BaseService:
    def __init__(
        self,
        config: Config,
        *,
        origin: Optional[str] = None,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
        **kwargs: Any,
    ) -> None:
        self._logger = getLogger("fetch_api")
        self._config = config

        default_client_kwargs = get_httpx_client_kwargs()

        client_kwargs = {
            **default_client_kwargs,  # SSL, proxy, redirects
            "base_url": origin or "",
        }

        self._client = Client(**client_kwargs, transport=transport)
        self._client_async = AsyncClient(**client_kwargs, transport=async_transport)
        self._closing: Optional[asyncio.Task[None]] = None

        super().__init__(**kwargs)

    @property
    def config(self) -> Config:
        return self._config

    def configure(
        self,
        *,
        base_url: Optional[str] = None,
        default_headers: Optional[dict[str, str]] = None,
        csrf_cookie_name: Optional[str] = None,
        csrf_header_name: Optional[str] = None,
        trailing_slash: Optional[str] = None,
    ) -> None:
        """Overwrite the non-empty settings given, keeping all others.

        Call it before requests are in flight; configuration changes are not
        synchronized with running requests.

        Args:
            base_url (Optional[str]): Prefix for relative paths. One trailing slash is stripped.
            default_headers (Optional[dict[str, str]]): Headers sent with every request.
            csrf_cookie_name (Optional[str]): Cookie holding the anti-forgery token.
            csrf_header_name (Optional[str]): Header the token is copied into.
            trailing_slash (Optional[str]): One of ``always``, ``none`` or ``write_only``.

        Raises:
            InvalidTrailingSlashError: If ``trailing_slash`` names no known policy.

        Examples:
            ```python
            from fetch_api import FetchApi

            api = FetchApi(origin="https://example.com")
            api.configure(base_url="/api", trailing_slash="always")
            ```
        """
        self._config.update(
            base_url=base_url,
            default_headers=default_headers,
            csrf_cookie_name=csrf_cookie_name,
            csrf_header_name=csrf_header_name,
            trailing_slash=trailing_slash,
        )

    def dispatch(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Request: {spec.method} {spec.url}")

        return self._client.request(
            spec.method, spec.url, headers=spec.headers, content=spec.content
        )

    async def dispatch_async(self, spec: RequestSpec) -> Response:
        self._logger.debug(f"Request: {spec.method} {spec.url}")

        return await self._client_async.request(
            spec.method, spec.url, headers=spec.headers, content=spec.content
        )

    def close(self) -> None:
        """Close both httpx clients.

        Inside a running event loop the async client is closed by a task on
        that loop; prefer ``aclose()`` there.
        """
        self._client.close()

        if self._client_async.is_closed:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self._client_async.aclose())
        else:
            self._closing = loop.create_task(self._client_async.aclose())

    async def aclose(self) -> None:
        """Close both httpx clients."""
        await self._client_async.aclose()
        self._client.close()
