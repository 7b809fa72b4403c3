import json
from typing import Any, Mapping, Optional

from .._csrf_context import CsrfContext
from .._utils import RequestSpec, build_url, interpret, with_json_content_type
from ..models import Outcome, RequestOptions
from ._base_service import BaseService


class ApiClient(CsrfContext, BaseService):
    """HTTP client for a JSON API behind a configured base URL.

    Every call builds its URL from the configured base URL and trailing-slash
    policy, merges the default headers with the call's headers and the
    anti-forgery token, sends ``data`` as JSON, and classifies the response.
    A 2xx response resolves to its parsed JSON body (or ``None`` when the
    body is not ``application/json``); anything else raises ``ApiError`` or
    ``HttpResponseError``.
    """

    def _request_spec(
        self, method: str, path: str, options: Optional[RequestOptions]
    ) -> RequestSpec:
        options = options or RequestOptions()

        headers = with_json_content_type(
            self.compose_headers(options.headers), options.has_body
        )

        content = None
        if options.has_body:
            content = json.dumps(options.data, separators=(",", ":")).encode("utf-8")

        url = build_url(
            self._config.base_url,
            path,
            options.params,
            trailing_slash=self._config.trailing_slash,
            method=method,
        )

        return RequestSpec(
            method=method.upper(), url=url, headers=headers, content=content
        )

    def fetch(
        self, method: str, path: str, options: Optional[RequestOptions] = None
    ) -> Outcome:
        """Send a request and return its classified outcome without raising
        for error statuses.

        Raises:
            httpx.TransportError: If the request could not be sent.
        """
        spec = self._request_spec(method, path, options)
        response = self.dispatch(spec)
        return interpret(response)

    async def fetch_async(
        self, method: str, path: str, options: Optional[RequestOptions] = None
    ) -> Outcome:
        spec = self._request_spec(method, path, options)
        response = await self.dispatch_async(spec)
        return interpret(response)

    def request(
        self, method: str, path: str, options: Optional[RequestOptions] = None
    ) -> Any:
        """Send a request and return the body of a successful response.

        Args:
            method (str): HTTP method.
            path (str): Path relative to the base URL, a rooted path, or an absolute URL.
            options (Optional[RequestOptions]): Query parameters, headers and body.

        Returns:
            Any: The parsed JSON body, or ``None`` when the response is not JSON.

        Raises:
            ApiError: If the server answered outside 2xx with a JSON error body.
            HttpResponseError: If the server answered outside 2xx without one.
            httpx.TransportError: If the request could not be sent.
        """
        return self.fetch(method, path, options).unwrap()

    async def request_async(
        self, method: str, path: str, options: Optional[RequestOptions] = None
    ) -> Any:
        outcome = await self.fetch_async(method, path, options)
        return outcome.unwrap()

    def get(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Retrieve a resource.

        Examples:
            ```python
            api.get("hello", params={"t": 2, "order": "name"})
            ```
        """
        return self.request("GET", path, _options(params, headers))

    async def get_async(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_async("GET", path, _options(params, headers))

    def post(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Create a resource from ``data``.

        Examples:
            ```python
            api.post("hello", {"t": 1})
            ```
        """
        return self.request("POST", path, _options(params, headers, data))

    async def post_async(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_async("POST", path, _options(params, headers, data))

    def put(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Replace a resource with ``data``."""
        return self.request("PUT", path, _options(params, headers, data))

    async def put_async(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_async("PUT", path, _options(params, headers, data))

    def patch(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Update a resource with the fields present in ``data``."""
        return self.request("PATCH", path, _options(params, headers, data))

    async def patch_async(
        self,
        path: str,
        data: Any = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_async("PATCH", path, _options(params, headers, data))

    def delete(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Delete a resource. Returns the parsed body if the server sends JSON."""
        return self.request("DELETE", path, _options(params, headers))

    async def delete_async(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self.request_async("DELETE", path, _options(params, headers))


def _options(
    params: Optional[Mapping[str, Any]],
    headers: Optional[Mapping[str, str]],
    data: Any = None,
) -> RequestOptions:
    return RequestOptions(
        params=dict(params) if params is not None else None,
        headers=dict(headers) if headers is not None else None,
        data=data,
    )
