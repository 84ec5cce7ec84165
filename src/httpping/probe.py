# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single probe attempt: connect, send, read, time."""

from __future__ import annotations

import logging
import ssl
import time
from contextlib import suppress

import httpcore

from .config import ProbeSettings, load_probe_settings
from .errors import NETWORK_EXCEPTIONS
from .http.models import RequestSpec, Target, TimingMode
from .http.reader import Clock, exchange
from .http.request import build_request_parts
from .http.transport import create_default_backend, create_ssl_context, open_stream
from .http.url import normalize_target
from .models import ProbeResult

logger = logging.getLogger(__name__)


class HttpPinger:
    """
    Runs one connect-request-response cycle per call.

    The backend, TLS context and clock are injectable; nothing is pooled, every
    call opens and closes its own stream.
    """

    def __init__(
        self,
        settings: ProbeSettings | None = None,
        backend: httpcore.NetworkBackend | None = None,
        ssl_context: ssl.SSLContext | None = None,
        clock: Clock = time.perf_counter,
    ):
        self.settings = settings or load_probe_settings()
        self.backend = backend or create_default_backend()
        self._ssl_context = ssl_context
        self.clock = clock

    @property
    def ssl_context(self) -> ssl.SSLContext:
        # Built lazily so plain-HTTP runs never load a CA bundle.
        if self._ssl_context is None:
            self._ssl_context = create_ssl_context(self.settings.verify_ssl)
        return self._ssl_context

    def ping(
        self,
        target: Target,
        request: RequestSpec | None = None,
        mode: TimingMode = TimingMode.FIRST_READ,
    ) -> ProbeResult:
        request = request or RequestSpec()
        context = self.ssl_context if target.is_encrypted else None

        started = self.clock()
        stream = open_stream(target, self.settings, self.backend, context)
        try:
            raw = exchange(
                stream,
                build_request_parts(request, target),
                mode=mode,
                started=started,
                timeout=self.settings.timeout,
                read_size=self.settings.read_size,
                clock=self.clock,
            )
        finally:
            with suppress(*NETWORK_EXCEPTIONS):
                stream.close()

        logger.debug("Probe of %s took %.6fs", target.url, raw.elapsed)
        return ProbeResult(
            elapsed=raw.elapsed,
            resolved_url=target.url,
            status_code=raw.status_code,
            method=request.method,
            first_byte=raw.first_byte,
            mode=mode,
        )


def http_ping(
    url: str,
    request: RequestSpec | None = None,
    *,
    show_warning: bool = True,
    mode: TimingMode = TimingMode.FIRST_READ,
    pinger: HttpPinger | None = None,
) -> ProbeResult:
    """Normalize `url` and run a single probe against it."""
    target = normalize_target(url, show_warning=show_warning)
    return (pinger or HttpPinger()).ping(target, request, mode)


__all__ = ["HttpPinger", "http_ping"]
