# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL normalization for probe targets."""

from __future__ import annotations

import logging

import httpx

from ..errors import InvalidPortError, InvalidUrlError, MissingHostError
from .models import DEFAULT_PORTS, Scheme, Target

logger = logging.getLogger(__name__)

SCHEME_SEPARATOR = "://"
DEFAULT_SCHEME = Scheme.ENCRYPTED
SCHEME_WARNING = "URL scheme not specified, using https:// by default"
MAX_LABEL_LENGTH = 63


def _validate_host_labels(host: str) -> None:
    if ":" in host:
        return
    # A single trailing dot (fully qualified name) is allowed.
    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    for label in labels:
        if not label or len(label) > MAX_LABEL_LENGTH:
            raise InvalidUrlError(f"Invalid URL: bad host label in {host!r}")


def has_scheme(raw: str) -> bool:
    return SCHEME_SEPARATOR in raw


def normalize_target(raw: str, *, show_warning: bool = True) -> Target:
    """
    Turn user input into a Target.

    Bare hosts (no `://`) are treated as `https://<input>`; the notice about it
    is logged only when `show_warning` is set, the caller owns suppression.
    """
    raw = str(raw or "").strip()
    inferred = not has_scheme(raw)
    if inferred:
        if show_warning:
            logger.warning(SCHEME_WARNING)
        raw = f"{DEFAULT_SCHEME.value}{SCHEME_SEPARATOR}{raw}"

    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidUrlError(f"Invalid URL {raw!r}: {exc}") from exc

    if not url.host:
        raise MissingHostError("Invalid URL: missing host. Use -h for help.")

    # Punycode form, so connect, SNI and the Host line all stay ASCII.
    host = url.raw_host.decode("ascii")
    _validate_host_labels(host)

    scheme = Scheme.ENCRYPTED if url.scheme == Scheme.ENCRYPTED.value else Scheme.PLAIN
    # httpx reports default ports as None, so fall back on the scheme table.
    port = url.port or DEFAULT_PORTS.get(url.scheme)
    if port is None:
        raise InvalidPortError(f"Invalid port: no default port for scheme {url.scheme!r}")

    path = url.raw_path.decode("ascii") or "/"
    return Target(scheme=scheme, host=host, port=port, path=path, scheme_inferred=inferred)


__all__ = ["SCHEME_WARNING", "has_scheme", "normalize_target"]
