# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe loop: repeat attempts, tolerate failures, aggregate latency."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from .errors import PingError
from .http.models import RequestSpec, TimingMode
from .http.url import normalize_target
from .models import AttemptOutcome, RunState, RunSummary
from .probe import HttpPinger

logger = logging.getLogger(__name__)

AttemptCallback = Callable[[AttemptOutcome], None]


def format_attempt(outcome: AttemptOutcome) -> str:
    """Render one attempt as a single output line."""
    if not outcome.ok:
        return f"Ping {outcome.index} failed: {outcome.error}"
    result = outcome.result
    if result.mode is TimingMode.HEADERS:
        return (
            f"Ping {outcome.index}: {result.method} {result.resolved_url}"
            f" - Status: {result.status_code} - Time: {result.elapsed_ms:.2f} ms"
        )
    return f"Ping {outcome.index}: URL: {result.resolved_url} - Time: {result.elapsed_ms:.2f} ms"


def format_summary(summary: RunSummary) -> str:
    average_ms = summary.average_ms
    if average_ms is None:
        return "No successful pings"
    return f"Average response time: {average_ms:.2f} ms"


class PingRunner:
    """
    Runs `count` strictly sequential attempts against one URL.

    Every attempt failure is converted into an AttemptOutcome; nothing short of
    an unexpected exception stops the loop early.
    """

    def __init__(
        self,
        url: str,
        request: RequestSpec | None = None,
        *,
        mode: TimingMode = TimingMode.FIRST_READ,
        pinger: HttpPinger | None = None,
        on_attempt: AttemptCallback | None = None,
    ):
        self.url = url
        self.request = request or RequestSpec()
        self.mode = mode
        self.pinger = pinger or HttpPinger()
        self.on_attempt = on_attempt

    def attempt(self, index: int, state: RunState) -> AttemptOutcome:
        try:
            target = normalize_target(self.url, show_warning=not state.warning_shown)
            if target.scheme_inferred:
                state.warning_shown = True
            result = self.pinger.ping(target, self.request, self.mode)
        except PingError as exc:
            logger.debug("Attempt %d failed (%s): %s", index, exc.category.value, exc)
            return AttemptOutcome(index=index, error=exc)

        state.record_success(result)
        return AttemptOutcome(index=index, result=result)

    def run(self, count: int, interval: float = 0.0) -> RunSummary:
        state = RunState()
        attempts: list[AttemptOutcome] = []

        for index in range(1, count + 1):
            outcome = self.attempt(index, state)
            attempts.append(outcome)
            if self.on_attempt is not None:
                self.on_attempt(outcome)
            if index < count:
                time.sleep(max(interval, 0.0))

        return RunSummary.from_state(state, attempts)


__all__ = ["PingRunner", "format_attempt", "format_summary"]
