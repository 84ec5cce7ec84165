# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for httpping."""

from ..http.models import Header, RawResponse, RequestSpec, Scheme, Target, TimingMode
from .probe import AttemptOutcome, ProbeResult
from .run import RunState, RunSummary

__all__ = [
    "AttemptOutcome",
    "Header",
    "ProbeResult",
    "RawResponse",
    "RequestSpec",
    "RunState",
    "RunSummary",
    "Scheme",
    "Target",
    "TimingMode",
]
