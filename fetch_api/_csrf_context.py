from typing import Any, Optional

from ._utils import CookieReader, HttpxCookieReader, compose_headers


class CsrfContext:
    """Copies an anti-forgery token from a cookie into request headers.

    The token is read from the configured cookie on every request, so a token
    rotated by the server is picked up without reconfiguring the client. When
    no cookie reader is supplied, the client's own httpx cookie jars are read,
    which holds whatever ``Set-Cookie`` the server sent earlier.
    """

    def __init__(self, *, cookies: Optional[CookieReader] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        self._cookie_reader: CookieReader = cookies or HttpxCookieReader(
            self._client.cookies, self._client_async.cookies
        )

    def compose_headers(self, headers: Optional[dict[str, str]] = None) -> dict[str, str]:
        """Merge the default headers, ``headers`` and the anti-forgery token.

        Returns:
            dict[str, str]: A new mapping; neither the defaults nor ``headers``
                are modified.
        """
        return compose_headers(
            self._config.default_headers,
            headers,
            csrf_cookie_name=self._config.csrf_cookie_name,
            csrf_header_name=self._config.csrf_header_name,
            cookies=self._cookie_reader,
        )
