# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpping package entrypoint.

This package measures HTTP/HTTPS latency over raw TCP or TLS streams: one minimal
HTTP/1.1 request per attempt, timed to the first read or to the end of the
response headers, repeated and averaged over the successful attempts.
"""

from .config import ProbeSettings, load_probe_settings
from .errors import ErrorCategory, PingError
from .http import RequestSpec, Target, TimingMode, normalize_target
from .log import setup_logging
from .models import AttemptOutcome, ProbeResult, RunState, RunSummary
from .probe import HttpPinger, http_ping
from .runner import PingRunner
from .runtime import HttpPing
from .version import __version__

__all__ = [
    "AttemptOutcome",
    "ErrorCategory",
    "HttpPing",
    "HttpPinger",
    "PingError",
    "PingRunner",
    "ProbeResult",
    "ProbeSettings",
    "RequestSpec",
    "RunState",
    "RunSummary",
    "Target",
    "TimingMode",
    "http_ping",
    "load_probe_settings",
    "normalize_target",
    "setup_logging",
    "__version__",
]
