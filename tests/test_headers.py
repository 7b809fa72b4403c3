from __future__ import annotations

import httpx

from fetch_api import HttpxCookieReader, MappingCookieReader, compose_headers
from fetch_api._utils import merge_headers, with_json_content_type


def compose(defaults, call=None, cookies=None):
    return compose_headers(
        defaults,
        call,
        csrf_cookie_name="csrftoken",
        csrf_header_name="X-CSRFToken",
        cookies=MappingCookieReader(cookies),
    )


def test_call_headers_override_defaults() -> None:
    defaults = {"A": "0", "B": "2"}
    call = {"A": "1"}

    assert compose(defaults, call) == {"A": "1", "B": "2"}
    assert defaults == {"A": "0", "B": "2"}
    assert call == {"A": "1"}


def test_result_is_a_new_mapping() -> None:
    defaults = {"A": "0"}
    result = compose(defaults)
    result["B"] = "1"

    assert defaults == {"A": "0"}


def test_csrf_cookie_is_copied_into_header() -> None:
    assert compose({}, None, {"csrftoken": "tok"}) == {"X-CSRFToken": "tok"}


def test_csrf_cookie_beats_caller_value() -> None:
    headers = compose(
        {"X-CSRFToken": "default"}, {"x-csrftoken": "caller"}, {"csrftoken": "tok"}
    )
    assert headers == {"X-CSRFToken": "tok"}


def test_empty_csrf_cookie_is_ignored() -> None:
    assert compose({}, {"X-CSRFToken": "caller"}, {"csrftoken": ""}) == {
        "X-CSRFToken": "caller"
    }


def test_missing_csrf_cookie_is_ignored() -> None:
    assert compose({"A": "0"}, None, {"sessionid": "s"}) == {"A": "0"}


def test_merge_is_case_insensitive() -> None:
    assert merge_headers({"X-Test": "a"}, {"x-test": "b"}) == {"x-test": "b"}


def test_json_content_type_added_for_body() -> None:
    headers = with_json_content_type({"content-type": "text/plain", "A": "1"}, True)
    assert headers == {"A": "1", "Content-Type": "application/json"}


def test_content_type_dropped_without_body() -> None:
    source = {"Content-Type": "application/json", "A": "1"}
    assert with_json_content_type(source, False) == {"A": "1"}
    assert source == {"Content-Type": "application/json", "A": "1"}


def test_httpx_cookie_reader_searches_jars_in_order() -> None:
    first = httpx.Cookies()
    second = httpx.Cookies()
    second.set("csrftoken", "from-second", domain="testserver")
    first.set("sessionid", "s", domain="testserver")

    reader = HttpxCookieReader(first, second)

    assert reader.get("csrftoken") == "from-second"
    assert reader.get("sessionid") == "s"
    assert reader.get("missing") is None


def test_mapping_cookie_reader() -> None:
    reader = MappingCookieReader({"csrftoken": "abc"})
    assert reader.get("csrftoken") == "abc"
    assert MappingCookieReader().get("csrftoken") is None
