# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpping."""

import os
from dataclasses import dataclass


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Probe defaults shared by the CLI and library callers."""

    count: int = 4
    interval: float = 1.0
    timeout: float | None = 5.0
    read_size: int = 1024
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        count = _int_env("HTTPPING_COUNT", cls.count)
        if count < 0:
            count = cls.count
        interval = _float_env("HTTPPING_INTERVAL", cls.interval)
        if interval < 0:
            interval = cls.interval
        timeout: float | None = _float_env("HTTPPING_TIMEOUT", cls.timeout)
        if timeout is not None and timeout <= 0:
            timeout = None
        read_size = _int_env("HTTPPING_READ_SIZE", cls.read_size)
        if read_size <= 0:
            read_size = cls.read_size
        return cls(
            count=count,
            interval=interval,
            timeout=timeout,
            read_size=read_size,
            verify_ssl=_bool_env("HTTPPING_VERIFY_SSL", cls.verify_ssl),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()
