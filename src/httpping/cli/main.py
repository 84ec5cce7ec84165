# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpping CLI."""

from __future__ import annotations

import argparse
import re
import sys

from ..config import ProbeSettings, load_probe_settings
from ..errors import InvalidHeaderError
from ..http.headers import parse_headers
from ..http.models import RequestSpec, TimingMode
from ..log import setup_logging
from ..models import AttemptOutcome
from ..runner import format_attempt, format_summary
from ..runtime import HttpPing
from ..version import __version__

MODE_AUTO = "auto"
_METHOD_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Za-z-]+$")


def _non_negative_int(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return parsed


def _non_negative_float(value: str) -> float:
    parsed = float(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return parsed


def build_parser(settings: ProbeSettings | None = None) -> argparse.ArgumentParser:
    settings = settings or ProbeSettings()
    parser = argparse.ArgumentParser(prog="httpping", description="Measure HTTP/HTTPS latency of a URL")
    parser.add_argument("url", help="URL to ping (a bare host is treated as https://<host>)")
    parser.add_argument(
        "-c",
        "--count",
        type=_non_negative_int,
        default=settings.count,
        help="Number of times to ping (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--interval",
        type=_non_negative_float,
        default=settings.interval,
        help="Interval between pings in seconds (default: %(default)s)",
    )
    parser.add_argument("-X", "--request", dest="method", default=None, help="HTTP method (default: GET)")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        default=[],
        help="Extra request header 'Name: Value' (repeatable)",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body; sets Content-Length")
    parser.add_argument(
        "--mode",
        choices=[MODE_AUTO, TimingMode.FIRST_READ.value, TimingMode.HEADERS.value],
        default=MODE_AUTO,
        help="first-read: time connect to first read; headers: time write to end of headers and "
        "report the status code; auto picks headers when -X/-H/-d is given",
    )
    parser.add_argument(
        "--timeout",
        type=_non_negative_float,
        default=settings.timeout,
        help="Per-operation timeout in seconds, 0 disables (default: %(default)s)",
    )
    parser.add_argument(
        "-k",
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: HTTPPING_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_mode(args: argparse.Namespace) -> TimingMode:
    if args.mode != MODE_AUTO:
        return TimingMode(args.mode)
    if args.method is not None or args.headers or args.data is not None:
        return TimingMode.HEADERS
    return TimingMode.FIRST_READ


def build_request_spec(args: argparse.Namespace) -> RequestSpec:
    """Raises InvalidHeaderError (bad -H) or ValueError (bad -X) before any network activity."""
    method = (args.method or "GET").upper()
    if not _METHOD_RE.match(method):
        raise ValueError(f"Invalid HTTP method {args.method!r}")
    body = args.data.encode("utf-8") if args.data is not None else None
    return RequestSpec(
        method=method,
        headers=parse_headers(args.headers),
        body=body,
    )


def _print_attempt(outcome: AttemptOutcome) -> None:
    print(format_attempt(outcome), flush=True)


def main(argv: list[str] | None = None) -> int:
    settings = load_probe_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        request = build_request_spec(args)
    except (InvalidHeaderError, ValueError) as exc:
        parser.error(str(exc))

    settings.timeout = args.timeout or None
    if args.insecure:
        settings.verify_ssl = False

    pinger = HttpPing(settings)
    try:
        summary = pinger.run(
            args.url,
            request,
            count=args.count,
            interval=args.interval,
            mode=resolve_mode(args),
            on_attempt=_print_attempt,
        )
    except KeyboardInterrupt:
        sys.stderr.write("\nInterrupted\n")
        return 130

    print()
    print(format_summary(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
