# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Per-attempt probe models."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import PingError
from ..http.models import TimingMode


@dataclass
class ProbeResult:
    elapsed: float
    resolved_url: str
    status_code: int | None = None
    method: str = "GET"
    first_byte: float | None = None
    mode: TimingMode = TimingMode.FIRST_READ

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


@dataclass
class AttemptOutcome:
    index: int
    result: ProbeResult | None = None
    error: PingError | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None and self.error is None
