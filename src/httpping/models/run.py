# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run-level accumulator and summary models."""

from __future__ import annotations

from dataclasses import dataclass, field

from .probe import AttemptOutcome, ProbeResult


@dataclass
class RunState:
    """
    Mutable state of one probe run.

    Owned by a single runner and touched only between attempts, so no locking
    is involved. `warning_shown` suppresses the scheme-inference notice once it
    has been emitted or once any attempt has succeeded.
    """

    total_elapsed: float = 0.0
    successful_count: int = 0
    warning_shown: bool = False

    def record_success(self, result: ProbeResult) -> None:
        self.total_elapsed += result.elapsed
        self.successful_count += 1
        self.warning_shown = True


@dataclass
class RunSummary:
    attempts: list[AttemptOutcome] = field(default_factory=list)
    total_elapsed: float = 0.0
    successful_count: int = 0

    @property
    def failed_count(self) -> int:
        return len(self.attempts) - self.successful_count

    @property
    def average(self) -> float | None:
        if self.successful_count <= 0:
            return None
        return self.total_elapsed / self.successful_count

    @property
    def average_ms(self) -> float | None:
        average = self.average
        return None if average is None else average * 1000.0

    @classmethod
    def from_state(cls, state: RunState, attempts: list[AttemptOutcome]) -> "RunSummary":
        return cls(
            attempts=list(attempts),
            total_elapsed=state.total_elapsed,
            successful_count=state.successful_count,
        )
