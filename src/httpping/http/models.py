# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-level data models: targets, request specs and raw responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Header = tuple[str, str]

DEFAULT_PORTS = {"http": 80, "https": 443}


class Scheme(str, Enum):
    PLAIN = "http"
    ENCRYPTED = "https"

    @property
    def default_port(self) -> int:
        return DEFAULT_PORTS[self.value]


class TimingMode(str, Enum):
    """
    How latency is measured.

    FIRST_READ starts the clock before connecting and stops it after a single
    bounded read. HEADERS starts the clock right before the request is written
    and stops once the header terminator is seen (or the peer closes).
    """

    FIRST_READ = "first-read"
    HEADERS = "headers"


@dataclass(frozen=True)
class Target:
    """Normalized probe destination, built once per attempt."""

    scheme: Scheme
    host: str
    port: int
    path: str = "/"
    scheme_inferred: bool = False

    @property
    def is_encrypted(self) -> bool:
        return self.scheme is Scheme.ENCRYPTED

    @property
    def host_header(self) -> str:
        return f"[{self.host}]" if ":" in self.host else self.host

    @property
    def url(self) -> str:
        netloc = self.host_header
        if self.port != self.scheme.default_port:
            netloc = f"{netloc}:{self.port}"
        return f"{self.scheme.value}://{netloc}{self.path}"


@dataclass(frozen=True)
class RequestSpec:
    """Method, headers and body sent on every attempt of a run."""

    method: str = "GET"
    headers: tuple[Header, ...] = ()
    body: bytes | None = None


@dataclass
class RawResponse:
    """Bytes read from the peer plus timing markers (seconds since clock start)."""

    data: bytes
    elapsed: float
    first_byte: float | None = None
    status_code: int | None = None
