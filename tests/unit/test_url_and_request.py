# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from httpping.errors import InvalidHeaderError, InvalidPortError, InvalidUrlError, MissingHostError
from httpping.http.headers import parse_header, parse_headers
from httpping.http.models import RequestSpec, Scheme, Target
from httpping.http.request import build_request, build_request_head, build_request_parts
from httpping.http.url import SCHEME_WARNING, has_scheme, normalize_target


def test_bare_host_is_treated_as_https(caplog):
    with caplog.at_level(logging.WARNING, logger="httpping.http.url"):
        bare = normalize_target("example.com")
    explicit = normalize_target("https://example.com")

    assert bare.scheme is Scheme.ENCRYPTED
    assert (bare.scheme, bare.host, bare.port, bare.path) == (
        explicit.scheme,
        explicit.host,
        explicit.port,
        explicit.path,
    )
    assert bare.scheme_inferred is True
    assert explicit.scheme_inferred is False
    assert [r.getMessage() for r in caplog.records] == [SCHEME_WARNING]


def test_warning_can_be_suppressed(caplog):
    with caplog.at_level(logging.WARNING, logger="httpping.http.url"):
        target = normalize_target("example.com", show_warning=False)
    assert target.scheme_inferred is True
    assert caplog.records == []


def test_default_ports_and_path():
    plain = normalize_target("http://example.com")
    assert plain.scheme is Scheme.PLAIN
    assert plain.port == 80
    assert plain.path == "/"
    assert plain.url == "http://example.com/"

    tls = normalize_target("https://example.com:443")
    assert tls.port == 443
    assert tls.url == "https://example.com/"


def test_explicit_port_and_query_are_kept():
    target = normalize_target("http://example.com:8080/status?verbose=1")
    assert target.port == 8080
    assert target.path == "/status?verbose=1"
    assert target.url == "http://example.com:8080/status?verbose=1"


def test_bare_host_with_port():
    target = normalize_target("localhost:8443", show_warning=False)
    assert target.scheme is Scheme.ENCRYPTED
    assert target.host == "localhost"
    assert target.port == 8443


def test_ipv6_host_is_bracketed_in_url_and_host_header():
    target = normalize_target("http://[::1]:8080/")
    assert target.host == "::1"
    assert target.host_header == "[::1]"
    assert target.url == "http://[::1]:8080/"


def test_invalid_inputs():
    assert has_scheme("http://x") is True
    assert has_scheme("x") is False
    with pytest.raises(InvalidUrlError):
        normalize_target("https://example.com:notaport")
    with pytest.raises((MissingHostError, InvalidUrlError)):
        normalize_target("http://")
    with pytest.raises(InvalidPortError):
        normalize_target("ftp://example.com")


def test_unknown_scheme_with_explicit_port_is_plain():
    target = normalize_target("ftp://example.com:2121/")
    assert target.scheme is Scheme.PLAIN
    assert target.port == 2121


def test_parse_header_variants():
    assert parse_header("X-Foo: bar") == ("X-Foo", "bar")
    assert parse_header("X-Foo:bar:baz") == ("X-Foo", "bar:baz")
    assert parse_header("X-Empty:") == ("X-Empty", "")
    assert parse_headers(["A: 1", "A: 2"]) == (("A", "1"), ("A", "2"))
    assert parse_headers(None) == ()


@pytest.mark.parametrize("raw", ["X-Foo", ": value", "X-Foo: a\r\nInjected: 1", "X-Foo: ☃"])
def test_parse_header_rejects_malformed(raw):
    with pytest.raises(InvalidHeaderError):
        parse_header(raw)


def test_build_request_minimal_get():
    target = Target(scheme=Scheme.PLAIN, host="example.com", port=80)
    assert build_request(RequestSpec(), target) == (
        b"GET / HTTP/1.1\r\nHost: example.com\r\nConnection: close\r\n\r\n"
    )


def test_build_request_keeps_header_order_and_duplicates():
    target = Target(scheme=Scheme.ENCRYPTED, host="api.example.com", port=443, path="/v1?x=1")
    spec = RequestSpec(method="HEAD", headers=(("X-A", "1"), ("Accept", "*/*"), ("X-A", "2")))
    head = build_request_head(spec, target)
    assert head == (
        b"HEAD /v1?x=1 HTTP/1.1\r\n"
        b"Host: api.example.com\r\n"
        b"Connection: close\r\n"
        b"X-A: 1\r\n"
        b"Accept: */*\r\n"
        b"X-A: 2\r\n"
        b"\r\n"
    )
    assert b"Content-Length" not in head


def test_build_request_with_body_sets_content_length():
    body = b'{"ping": "\xc3\xa9t\xc3\xa9"}\r\n\r\n'
    target = Target(scheme=Scheme.PLAIN, host="example.com", port=8080, path="/echo")
    spec = RequestSpec(method="POST", headers=(("Content-Type", "application/json"),), body=body)

    head, payload = build_request_parts(spec, target)

    assert head.endswith(f"Content-Length: {len(body)}\r\n\r\n".encode())
    assert head.index(b"Content-Type") < head.index(b"Content-Length")
    assert payload == body
    full = build_request(spec, target)
    assert full.split(b"\r\n\r\n", 1)[1] == body


def test_build_request_with_empty_body_sends_zero_length():
    target = Target(scheme=Scheme.PLAIN, host="example.com", port=80)
    head, payload = build_request_parts(RequestSpec(method="POST", body=b""), target)
    assert b"Content-Length: 0\r\n" in head
    assert payload == b""


def test_idn_host_uses_punycode_everywhere():
    target = normalize_target("http://münchen.de/")
    assert target.host == "xn--mnchen-3ya.de"
    assert target.url == "http://xn--mnchen-3ya.de/"
    assert b"Host: xn--mnchen-3ya.de\r\n" in build_request(RequestSpec(), target)


def test_non_latin_idn_host_serializes_as_ascii():
    target = normalize_target("http://例え.jp/")
    assert target.host.startswith("xn--")
    assert target.host.endswith(".jp")
    build_request(RequestSpec(), target).decode("ascii")


@pytest.mark.parametrize("url", ["http://a..b/", f"http://{'a' * 64}.example/"])
def test_bad_host_labels_are_invalid_urls(url):
    with pytest.raises(InvalidUrlError):
        normalize_target(url)


def test_trailing_dot_host_is_accepted():
    assert normalize_target("http://example.com./").host == "example.com."
