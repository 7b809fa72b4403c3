from typing import Mapping, Optional, Protocol, runtime_checkable

from httpx import Cookies


@runtime_checkable
class CookieReader(Protocol):
    """Read access to a cookie store."""

    def get(self, name: str) -> Optional[str]: ...


class MappingCookieReader:
    """Cookie reader backed by a plain mapping of names to values.

    >>> MappingCookieReader({"csrftoken": "abc"}).get("csrftoken")
    'abc'
    """

    def __init__(self, cookies: Optional[Mapping[str, str]] = None) -> None:
        self._cookies = dict(cookies or {})

    def get(self, name: str) -> Optional[str]:
        return self._cookies.get(name)


class HttpxCookieReader:
    """Cookie reader over one or more httpx cookie jars.

    Jars are searched in order and the first cookie with a matching name wins,
    regardless of its domain or path.
    """

    def __init__(self, *jars: Cookies) -> None:
        self._jars = jars

    def get(self, name: str) -> Optional[str]:
        for jar in self._jars:
            for cookie in jar.jar:
                if cookie.name == name:
                    return cookie.value
        return None
