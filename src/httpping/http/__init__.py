# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-level exports: URL normalization, transport, request and response handling."""

from .headers import parse_header, parse_headers
from .models import Header, RawResponse, RequestSpec, Scheme, Target, TimingMode
from .reader import HEADER_TERMINATOR, exchange, parse_status_code
from .request import build_request, build_request_head, build_request_parts
from .transport import create_default_backend, create_ssl_context, open_stream
from .url import SCHEME_WARNING, has_scheme, normalize_target

__all__ = [
    "HEADER_TERMINATOR",
    "Header",
    "RawResponse",
    "RequestSpec",
    "SCHEME_WARNING",
    "Scheme",
    "Target",
    "TimingMode",
    "build_request",
    "build_request_head",
    "build_request_parts",
    "create_default_backend",
    "create_ssl_context",
    "exchange",
    "has_scheme",
    "normalize_target",
    "open_stream",
    "parse_header",
    "parse_headers",
    "parse_status_code",
]
