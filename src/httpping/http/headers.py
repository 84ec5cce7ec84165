# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parsing of user-supplied `Name: Value` header arguments."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import InvalidHeaderError
from .models import Header


def parse_header(raw: str) -> Header:
    """Split `Name: Value` at the first colon; the value may be empty."""
    name, sep, value = str(raw).partition(":")
    name = name.strip()
    if not sep or not name:
        raise InvalidHeaderError(f"Invalid header {raw!r}, expected 'Name: Value'")
    value = value.strip()
    if "\r" in raw or "\n" in raw:
        raise InvalidHeaderError(f"Invalid header {raw!r}: line breaks are not allowed")
    try:
        # Serialized as latin-1 on the wire.
        f"{name}{value}".encode("latin-1")
    except UnicodeEncodeError as exc:
        raise InvalidHeaderError(f"Invalid header {raw!r}: {exc.reason}") from exc
    return name, value


def parse_headers(values: Iterable[str] | None) -> tuple[Header, ...]:
    """Parse every header argument, keeping order and duplicates."""
    return tuple(parse_header(value) for value in values or ())


__all__ = ["parse_header", "parse_headers"]
