# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum

import httpcore


class ErrorCategory(str, Enum):
    INVALID_URL = "INVALID_URL"
    MISSING_HOST = "MISSING_HOST"
    INVALID_PORT = "INVALID_PORT"
    INVALID_HEADER = "INVALID_HEADER"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    TLS_ERROR = "TLS_ERROR"
    IO_ERROR = "IO_ERROR"
    TIMEOUT = "TIMEOUT"


class PingError(Exception):
    """Base class for failures of a single probe attempt (or of the invocation)."""

    category: ErrorCategory = ErrorCategory.IO_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message or error_category_to_reason(self.category))

    @property
    def reason(self) -> str:
        return error_category_to_reason(self.category)


class InvalidUrlError(PingError):
    category = ErrorCategory.INVALID_URL


class MissingHostError(PingError):
    category = ErrorCategory.MISSING_HOST


class InvalidPortError(PingError):
    category = ErrorCategory.INVALID_PORT


class InvalidHeaderError(PingError):
    category = ErrorCategory.INVALID_HEADER


class ProbeConnectionError(PingError):
    category = ErrorCategory.CONNECTION_ERROR


class TlsError(PingError):
    category = ErrorCategory.TLS_ERROR


class ProbeIOError(PingError):
    category = ErrorCategory.IO_ERROR


class ProbeTimeoutError(PingError):
    category = ErrorCategory.TIMEOUT


# Everything a backend may raise for network trouble; ssl.SSLError is an OSError.
NETWORK_EXCEPTIONS = (httpcore.NetworkError, httpcore.TimeoutException, OSError)
# Name resolution can also reject a host with an IDNA UnicodeError.
CONNECT_EXCEPTIONS = (*NETWORK_EXCEPTIONS, UnicodeError)

_ERROR_TYPES: dict[ErrorCategory, type[PingError]] = {
    ErrorCategory.INVALID_URL: InvalidUrlError,
    ErrorCategory.MISSING_HOST: MissingHostError,
    ErrorCategory.INVALID_PORT: InvalidPortError,
    ErrorCategory.INVALID_HEADER: InvalidHeaderError,
    ErrorCategory.CONNECTION_ERROR: ProbeConnectionError,
    ErrorCategory.TLS_ERROR: TlsError,
    ErrorCategory.IO_ERROR: ProbeIOError,
    ErrorCategory.TIMEOUT: ProbeTimeoutError,
}


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def categorize_exception(exc: BaseException, default: ErrorCategory = ErrorCategory.IO_ERROR) -> ErrorCategory:
    """
    Map httpcore/ssl/socket exceptions to ErrorCategory.

    httpcore re-raises socket errors as its own types with the original error as
    `__cause__`, so the whole chain is inspected; TLS failures surface from
    `start_tls` as `httpcore.ConnectError` wrapping an `ssl.SSLError`.
    """
    if isinstance(exc, PingError):
        return exc.category

    chain = list(_exception_chain(exc))

    if any(isinstance(item, (httpcore.TimeoutException, socket.timeout, TimeoutError)) for item in chain):
        return ErrorCategory.TIMEOUT

    # After the handshake, TLS record errors are plain read/write failures.
    if isinstance(exc, (httpcore.ReadError, httpcore.WriteError)):
        return ErrorCategory.IO_ERROR

    if any(isinstance(item, (ssl.SSLError, ssl.CertificateError)) for item in chain):
        return ErrorCategory.TLS_ERROR

    if isinstance(exc, httpcore.ConnectError):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror, ConnectionRefusedError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, UnicodeError):
        return ErrorCategory.INVALID_URL

    return default


def wrap_exception(exc: BaseException, default: ErrorCategory = ErrorCategory.IO_ERROR) -> PingError:
    """Build the PingError subclass matching `exc`, keeping its message."""
    if isinstance(exc, PingError):
        return exc
    category = categorize_exception(exc, default)
    message = str(exc) or type(exc).__name__
    return _ERROR_TYPES[category](message)


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.INVALID_URL: "Invalid URL",
        ErrorCategory.MISSING_HOST: "Invalid URL: missing host",
        ErrorCategory.INVALID_PORT: "Invalid port",
        ErrorCategory.INVALID_HEADER: "Invalid header, expected 'Name: Value'",
        ErrorCategory.CONNECTION_ERROR: "Connection failed",
        ErrorCategory.TLS_ERROR: "TLS handshake or certificate failure",
        ErrorCategory.IO_ERROR: "I/O error while talking to the server",
        ErrorCategory.TIMEOUT: "Operation timed out",
        None: "",
    }
    return mapping.get(category, "Probe failed")
