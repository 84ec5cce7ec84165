# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Raw HTTP/1.1 request serialization."""

from __future__ import annotations

from .models import RequestSpec, Target

CRLF = b"\r\n"
HTTP_VERSION = "HTTP/1.1"


def _encode(text: str) -> bytes:
    return text.encode("latin-1")


def build_request_head(spec: RequestSpec, target: Target) -> bytes:
    """Request line and header block, ending with the blank line."""
    lines = [
        f"{spec.method} {target.path} {HTTP_VERSION}",
        f"Host: {target.host_header}",
        "Connection: close",
    ]
    lines.extend(f"{name}: {value}" for name, value in spec.headers)
    if spec.body is not None:
        lines.append(f"Content-Length: {len(spec.body)}")
    return CRLF.join(_encode(line) for line in lines) + CRLF + CRLF


def build_request_parts(spec: RequestSpec, target: Target) -> tuple[bytes, bytes]:
    """Return (head, body); written separately, body is empty when absent."""
    return build_request_head(spec, target), spec.body or b""


def build_request(spec: RequestSpec, target: Target) -> bytes:
    return b"".join(build_request_parts(spec, target))


__all__ = ["build_request", "build_request_head", "build_request_parts"]
