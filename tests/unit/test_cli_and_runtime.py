# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import time

import httpcore
import pytest

from httpping.cli import main as cli_main
from httpping.cli.main import build_parser, build_request_spec, resolve_mode
from httpping.config import ProbeSettings
from httpping.http.models import TimingMode
from httpping.models import AttemptOutcome, ProbeResult, RunSummary
from httpping.runtime import HttpPing


def test_build_parser_defaults():
    args = build_parser().parse_args(["example.com"])
    assert args.url == "example.com"
    assert args.count == 4
    assert args.interval == 1.0
    assert args.method is None
    assert args.headers == []
    assert args.data is None
    assert resolve_mode(args) is TimingMode.FIRST_READ


def test_build_parser_extended_options():
    args = build_parser().parse_args(
        ["https://example.com", "-c", "2", "-t", "0.5", "-X", "post", "-H", "A: 1", "-H", "A: 2", "-d", "body"]
    )
    assert args.count == 2
    assert args.interval == 0.5
    assert resolve_mode(args) is TimingMode.HEADERS
    spec = build_request_spec(args)
    assert spec.method == "POST"
    assert spec.headers == (("A", "1"), ("A", "2"))
    assert spec.body == b"body"


def test_explicit_mode_wins_over_auto():
    args = build_parser().parse_args(["example.com", "-H", "A: 1", "--mode", "first-read"])
    assert resolve_mode(args) is TimingMode.FIRST_READ
    args = build_parser().parse_args(["example.com", "--mode", "headers"])
    assert resolve_mode(args) is TimingMode.HEADERS


def test_negative_count_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["example.com", "-c", "-1"])


def test_malformed_header_aborts_before_any_attempt(monkeypatch, capsys):
    created = []
    monkeypatch.setattr(cli_main, "HttpPing", lambda settings=None: created.append(settings))

    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["example.com", "-H", "X-Foo"])

    assert excinfo.value.code == 2
    assert created == []
    assert "X-Foo" in capsys.readouterr().err


def test_malformed_method_is_rejected(monkeypatch):
    monkeypatch.setattr(cli_main, "HttpPing", lambda settings=None: pytest.fail("should not run"))
    with pytest.raises(SystemExit):
        cli_main.main(["example.com", "-X", "GE T"])


def test_cli_main_prints_attempts_and_summary(monkeypatch, capsys):
    captured = {}

    class FakeHttpPing:
        def __init__(self, settings=None):
            captured["settings"] = settings

        def run(self, url, request=None, *, count=None, interval=None, mode=TimingMode.FIRST_READ, on_attempt=None):
            captured.update(url=url, request=request, count=count, interval=interval, mode=mode)
            ok = AttemptOutcome(index=1, result=ProbeResult(elapsed=0.015, resolved_url="https://example.com/"))
            on_attempt(ok)
            return RunSummary(attempts=[ok], total_elapsed=0.015, successful_count=1)

    monkeypatch.setattr(cli_main, "HttpPing", FakeHttpPing)

    exit_code = cli_main.main(["example.com", "-c", "1", "-t", "0", "-k", "--timeout", "0"])

    assert exit_code == 0
    assert captured["count"] == 1
    assert captured["interval"] == 0
    assert captured["mode"] is TimingMode.FIRST_READ
    assert captured["settings"].verify_ssl is False
    assert captured["settings"].timeout is None
    out = capsys.readouterr().out
    assert "Ping 1: URL: https://example.com/ - Time: 15.00 ms" in out
    assert "Average response time: 15.00 ms" in out


def test_http_ping_facade_runs_against_mock_backend(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _: None)
    backend = httpcore.MockBackend([b"HTTP/1.1 204 No Content\r\n\r\n"])
    guard = HttpPing(ProbeSettings(count=3, interval=0.0), backend)

    summary = guard.run("http://example.com/health", mode=TimingMode.HEADERS)

    assert len(summary.attempts) == 3
    assert summary.successful_count == 3
    assert all(o.result.status_code == 204 for o in summary.attempts)
    assert summary.average is not None

    single = guard.ping("http://example.com/health")
    assert single.resolved_url == "http://example.com/health"
    assert single.status_code is None
