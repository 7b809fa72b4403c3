from __future__ import annotations

import pytest

from fetch_api import TrailingSlash, build_url


def test_relative_path_is_joined_to_base_url() -> None:
    url = build_url("/api", "hello", trailing_slash=TrailingSlash.NONE)
    assert url == "/api/hello"


def test_rooted_path_ignores_base_url() -> None:
    url = build_url("/api", "/other/thing", trailing_slash=TrailingSlash.NONE)
    assert url == "/other/thing"


def test_absolute_url_is_left_alone() -> None:
    url = build_url(
        "/api",
        "https://elsewhere.example.com/x",
        {"a": 1},
        trailing_slash=TrailingSlash.ALWAYS,
    )
    assert url == "https://elsewhere.example.com/x?a=1"


def test_empty_base_url_yields_rooted_path() -> None:
    assert build_url("", "hello", trailing_slash=TrailingSlash.NONE) == "/hello"


def test_query_keeps_mapping_order() -> None:
    url = build_url(
        "/api", "hello", {"t": 2, "order": "name"}, trailing_slash=TrailingSlash.ALWAYS
    )
    assert url == "/api/hello/?t=2&order=name"


def test_none_values_are_omitted() -> None:
    url = build_url(
        "/api",
        "items",
        {"a": None, "b": "x", "c": None, "d": 0},
        trailing_slash=TrailingSlash.NONE,
    )
    assert url == "/api/items?b=x&d=0"


def test_only_none_values_means_no_query_string() -> None:
    url = build_url("/api", "items", {"a": None}, trailing_slash=TrailingSlash.NONE)
    assert url == "/api/items"


def test_empty_params_means_no_query_string() -> None:
    assert build_url("/api", "items", {}, trailing_slash=TrailingSlash.NONE) == "/api/items"


def test_keys_and_values_are_percent_encoded() -> None:
    url = build_url(
        "",
        "/search",
        {"q": "a b&c=d", "näme": "x/y?z", "safe": "-_.!~*'()"},
        trailing_slash=TrailingSlash.NONE,
    )
    assert url == "/search?q=a%20b%26c%3Dd&n%C3%A4me=x%2Fy%3Fz&safe=-_.!~*'()"


def test_scalars_are_stringified() -> None:
    url = build_url(
        "",
        "/s",
        {"i": 3, "f": 1.5, "whole": 2.0, "yes": True, "no": False},
        trailing_slash=TrailingSlash.NONE,
    )
    assert url == "/s?i=3&f=1.5&whole=2&yes=true&no=false"


@pytest.mark.parametrize("method", ["GET", "POST", "PUT", "PATCH", "DELETE"])
def test_always_policy_appends_slash(method: str) -> None:
    url = build_url("/api", "hello", trailing_slash=TrailingSlash.ALWAYS, method=method)
    assert url == "/api/hello/"


@pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
def test_none_policy_never_appends_slash(method: str) -> None:
    url = build_url("/api", "hello", trailing_slash=TrailingSlash.NONE, method=method)
    assert url == "/api/hello"


@pytest.mark.parametrize(
    "method, expected",
    [
        ("GET", "/api/hello"),
        ("get", "/api/hello"),
        ("POST", "/api/hello/"),
        ("PUT", "/api/hello/"),
        ("PATCH", "/api/hello/"),
        ("DELETE", "/api/hello/"),
    ],
)
def test_write_only_policy_skips_get(method: str, expected: str) -> None:
    url = build_url("/api", "hello", trailing_slash=TrailingSlash.WRITE_ONLY, method=method)
    assert url == expected


def test_slash_terminated_path_is_not_doubled() -> None:
    url = build_url("/api", "hello/", {"a": 1}, trailing_slash=TrailingSlash.ALWAYS)
    assert url == "/api/hello/?a=1"


def test_policy_applies_to_rooted_paths() -> None:
    url = build_url("/api", "/rooted", trailing_slash=TrailingSlash.ALWAYS)
    assert url == "/rooted/"


@pytest.mark.parametrize("path", ["things:batchGet", "users:search", "v1/jobs:cancel"])
def test_colon_in_first_segment_stays_relative(path: str) -> None:
    url = build_url("/api", path, trailing_slash=TrailingSlash.ALWAYS)
    assert url == f"/api/{path}/"


def test_protocol_relative_url_is_left_alone() -> None:
    url = build_url("/api", "//cdn.example.com/x", trailing_slash=TrailingSlash.ALWAYS)
    assert url == "//cdn.example.com/x"
