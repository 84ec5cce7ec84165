# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TCP / TLS-over-TCP stream establishment on top of httpcore's network backends."""

from __future__ import annotations

import logging
import ssl

import httpcore

from ..config import ProbeSettings, load_probe_settings
from ..errors import CONNECT_EXCEPTIONS, NETWORK_EXCEPTIONS, ErrorCategory, wrap_exception
from .models import Target

logger = logging.getLogger(__name__)


def create_default_backend() -> httpcore.NetworkBackend:
    """Factory for the default blocking-socket backend."""
    return httpcore.SyncBackend()


def create_ssl_context(verify: bool = True) -> ssl.SSLContext:
    """Certifi-backed context when verifying, otherwise a context that accepts any peer."""
    if verify:
        return httpcore.default_ssl_context()
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def open_stream(
    target: Target,
    settings: ProbeSettings | None = None,
    backend: httpcore.NetworkBackend | None = None,
    ssl_context: ssl.SSLContext | None = None,
) -> httpcore.NetworkStream:
    """
    Connect to `target` and return a readable/writable stream.

    Encrypted targets get a TLS handshake with `target.host` as the expected
    server identity. Either way the caller sees a single NetworkStream.
    """
    settings = settings or load_probe_settings()
    backend = backend or create_default_backend()

    logger.debug("Connecting to %s:%s", target.host, target.port)
    try:
        stream = backend.connect_tcp(target.host, target.port, timeout=settings.timeout)
    except CONNECT_EXCEPTIONS as exc:
        raise wrap_exception(exc, ErrorCategory.CONNECTION_ERROR) from exc

    if not target.is_encrypted:
        return stream

    context = ssl_context or create_ssl_context(settings.verify_ssl)
    logger.debug("Starting TLS handshake with %s", target.host)
    try:
        return stream.start_tls(context, server_hostname=target.host, timeout=settings.timeout)
    except NETWORK_EXCEPTIONS as exc:
        stream.close()
        raise wrap_exception(exc, ErrorCategory.TLS_ERROR) from exc


__all__ = ["create_default_backend", "create_ssl_context", "open_stream"]
