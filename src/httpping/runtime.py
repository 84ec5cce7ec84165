# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level httpping facade for single probes and full runs."""

from __future__ import annotations

import httpcore

from .config import ProbeSettings, load_probe_settings
from .http.models import RequestSpec, TimingMode
from .models import ProbeResult, RunSummary
from .probe import HttpPinger, http_ping
from .runner import AttemptCallback, PingRunner


class HttpPing:
    """
    Convenience wrapper that wires one settings object and network backend into
    both single probes and repeated runs.
    """

    def __init__(self, settings: ProbeSettings | None = None, backend: httpcore.NetworkBackend | None = None):
        self.settings = settings or load_probe_settings()
        self.pinger = HttpPinger(self.settings, backend)

    def ping(
        self,
        url: str,
        request: RequestSpec | None = None,
        *,
        mode: TimingMode = TimingMode.FIRST_READ,
        show_warning: bool = True,
    ) -> ProbeResult:
        return http_ping(url, request, show_warning=show_warning, mode=mode, pinger=self.pinger)

    def run(
        self,
        url: str,
        request: RequestSpec | None = None,
        *,
        count: int | None = None,
        interval: float | None = None,
        mode: TimingMode = TimingMode.FIRST_READ,
        on_attempt: AttemptCallback | None = None,
    ) -> RunSummary:
        runner = PingRunner(url, request, mode=mode, pinger=self.pinger, on_attempt=on_attempt)
        return runner.run(
            self.settings.count if count is None else count,
            self.settings.interval if interval is None else interval,
        )
