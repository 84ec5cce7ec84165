# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request/response exchange with latency accounting.

Only the boundary of the response is detected here: either a single bounded
read, or reading until the header terminator. Everything past the status line
is left unparsed, so a full response parser can replace `exchange()` without
touching the probe loop.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

import httpcore

from ..errors import NETWORK_EXCEPTIONS, ErrorCategory, wrap_exception
from .models import RawResponse, TimingMode

logger = logging.getLogger(__name__)

HEADER_TERMINATOR = b"\r\n\r\n"
DEFAULT_READ_SIZE = 1024

Clock = Callable[[], float]


def parse_status_code(data: bytes) -> int:
    """Second whitespace token of the first line, or 0 when absent/unparsable."""
    first_line = data.split(b"\n", 1)[0].decode("latin-1")
    parts = first_line.split()
    if len(parts) < 2:
        return 0
    try:
        return int(parts[1])
    except ValueError:
        return 0


def _write_all(stream: httpcore.NetworkStream, parts: Iterable[bytes], timeout: float | None) -> None:
    for part in parts:
        if part:
            stream.write(part, timeout=timeout)


def _read_first(stream: httpcore.NetworkStream, read_size: int, timeout: float | None) -> bytes:
    return stream.read(read_size, timeout=timeout)


def _read_headers(
    stream: httpcore.NetworkStream,
    read_size: int,
    timeout: float | None,
    clock: Clock,
    started: float,
) -> tuple[bytes, float | None]:
    buffer = bytearray()
    first_byte: float | None = None
    while True:
        chunk = stream.read(read_size, timeout=timeout)
        if not chunk:
            break
        if first_byte is None:
            first_byte = clock() - started
        buffer.extend(chunk)
        # Only the tail can complete a terminator split across reads.
        if HEADER_TERMINATOR in buffer[-(len(chunk) + len(HEADER_TERMINATOR) - 1) :]:
            break
    return bytes(buffer), first_byte


def exchange(
    stream: httpcore.NetworkStream,
    parts: Iterable[bytes],
    *,
    mode: TimingMode = TimingMode.FIRST_READ,
    started: float | None = None,
    timeout: float | None = None,
    read_size: int = DEFAULT_READ_SIZE,
    clock: Clock = time.perf_counter,
) -> RawResponse:
    """
    Write the request and read until the mode's stopping condition.

    In FIRST_READ mode `started` is the caller's pre-connect timestamp; in
    HEADERS mode the clock is always restarted right before the write.
    """
    if mode is TimingMode.HEADERS or started is None:
        started = clock()

    try:
        _write_all(stream, parts, timeout)
        if mode is TimingMode.HEADERS:
            data, first_byte = _read_headers(stream, read_size, timeout, clock, started)
        else:
            data = _read_first(stream, read_size, timeout)
            first_byte = None
    except NETWORK_EXCEPTIONS as exc:
        raise wrap_exception(exc, ErrorCategory.IO_ERROR) from exc

    elapsed = clock() - started
    if mode is TimingMode.FIRST_READ:
        first_byte = elapsed if data else None
    logger.debug("Read %d bytes in %.6fs (mode=%s)", len(data), elapsed, mode.value)

    status_code = parse_status_code(data) if mode is TimingMode.HEADERS else None
    return RawResponse(data=data, elapsed=elapsed, first_byte=first_byte, status_code=status_code)


__all__ = ["HEADER_TERMINATOR", "exchange", "parse_status_code"]
