# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for httpping."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("HTTPPING_LOG_LEVEL", "WARNING").upper()
PROG_NAME = "httpping"


class CliFormatter(logging.Formatter):
    """Render records as `httpping: warning: <message>` on stderr."""

    def __init__(self, prog: str = PROG_NAME):
        super().__init__("%(message)s")
        self.prog = prog

    def format(self, record: logging.LogRecord) -> str:
        return f"{self.prog}: {record.levelname.lower()}: {super().format(record)}"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    handler = logging.StreamHandler()
    handler.setFormatter(CliFormatter())
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        handlers=[handler],
    )


__all__ = ["CliFormatter", "setup_logging"]
