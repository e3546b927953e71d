# SPDX-License-Identifier: MIT
"""Deriving package identifiers and app names from a manifest.

Cordova expects a reverse-domain package identifier (e.g., com.example.www)
and an app name made of identifier characters only.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .errors import PackageNameError

# "in" is a Java keyword, so Android rejects it as a package segment.
# This only covers the segment seen in practice, not the full keyword list.
RESERVED_SEGMENTS = {"in": "ind"}

# Appended when the host has no domain structure (e.g., "localhost")
FALLBACK_SEGMENT = "app"

DEFAULT_APP_NAME = "MyHostedWebApp"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9.]")
_LEADING_DIGIT = re.compile(r"^[0-9]")
_DIGIT_AFTER_DOT = re.compile(r"\.[0-9]")


def sanitize_name(name: str) -> str:
    """Restrict a name to Cordova's identifier grammar.

    Removes anything but letters, digits and dots, then repeatedly drops a
    leading digit, digits following a dot, doubled dots and a leading dot.

    Args:
        name: Raw name

    Returns:
        Sanitized name, or DEFAULT_APP_NAME if nothing is left
    """
    sanitized = _INVALID_CHARS.sub("", name or "")

    while True:
        length = len(sanitized)
        sanitized = _LEADING_DIGIT.sub("", sanitized)
        sanitized = _DIGIT_AFTER_DOT.sub(".", sanitized)
        sanitized = sanitized.replace("..", ".")
        sanitized = sanitized.lstrip(".")
        if len(sanitized) == length:
            break

    return sanitized or DEFAULT_APP_NAME


def reverse_domain(host: str) -> str:
    """Build a reverse-domain identifier from a host name.

    Example:
        >>> reverse_domain("www.example.com")
        'com.example.www'
    """
    segments = host.replace("-", "").split(".")
    return _rewrite_reserved(".".join(reversed(segments)))


def _rewrite_reserved(name: str) -> str:
    return ".".join(RESERVED_SEGMENTS.get(segment, segment) for segment in name.split("."))


def derive_package_name(start_url: str) -> str:
    """Derive a Cordova package identifier from a manifest start URL.

    Args:
        start_url: Absolute start URL

    Returns:
        Sanitized reverse-domain identifier with at least two segments

    Raises:
        PackageNameError: If the URL has no host
    """
    try:
        host = urlsplit(start_url).hostname
    except ValueError as e:
        raise PackageNameError(f"Invalid start_url {start_url!r}: {e}") from e

    if not host:
        raise PackageNameError(
            f"Cannot derive a package name from start_url {start_url!r}: the URL has no host"
        )

    # Sanitizing can expose a reserved segment (e.g., "1in" becomes "in")
    package_name = _rewrite_reserved(sanitize_name(reverse_domain(host)).rstrip("."))
    if "." not in package_name:
        package_name = f"{package_name}.{FALLBACK_SEGMENT}"
    return package_name


def derive_app_name(short_name: str) -> str:
    """Derive the Cordova app name from the manifest short name."""
    return sanitize_name(short_name)
