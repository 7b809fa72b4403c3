from __future__ import annotations

from typing import Callable, List

import httpx
import pytest

from fetch_api import FetchApi, MappingCookieReader

ORIGIN = "http://testserver"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FETCH_API_BASE_URL",
        "FETCH_API_ORIGIN",
        "FETCH_API_CSRF_COOKIE_NAME",
        "FETCH_API_CSRF_HEADER_NAME",
        "FETCH_API_TRAILING_SLASH",
        "FETCH_API_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def sent() -> List[httpx.Request]:
    return []


@pytest.fixture()
def make_api(sent: List[httpx.Request]) -> Callable[..., FetchApi]:
    def factory(
        response: httpx.Response | None = None,
        *,
        cookies: dict[str, str] | None = None,
        **kwargs,
    ) -> FetchApi:
        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return response if response is not None else httpx.Response(204)

        transport = httpx.MockTransport(handler)
        return FetchApi(
            origin=ORIGIN,
            cookies=MappingCookieReader(cookies),
            transport=transport,
            async_transport=transport,
            **kwargs,
        )

    return factory
