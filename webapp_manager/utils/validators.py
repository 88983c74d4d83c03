"""Input normalization utilities.

This module derives filesystem-safe identifiers from user input
and normalizes URLs typed without a scheme.
"""

import re

_SAFE_NAME_PATTERN = re.compile(r"[^A-Za-z0-9_]")
_HOST_LABEL_PATTERN = re.compile(r"[^A-Za-z0-9-]")
_EXTENSION_PATTERN = re.compile(r"[^A-Za-z0-9]")
_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*)://")


def safe_name(name: str) -> str:
    """Derive the filesystem-safe identifier of a webapp name.

    Spaces become underscores; anything else outside ``[A-Za-z0-9_]``
    is dropped.

    Args:
        name: Display name typed by the user

    Returns:
        Sanitized name (may be empty for punctuation-only input)
    """
    return _SAFE_NAME_PATTERN.sub("", name.replace(" ", "_"))


def sanitize_host(host: str) -> str:
    """Keep only alphanumerics and hyphens of a host name."""
    return _HOST_LABEL_PATTERN.sub("", host)


def sanitize_extension(extension: str) -> str:
    """Keep only alphanumerics of a file extension."""
    return _EXTENSION_PATTERN.sub("", extension)


def normalize_url(url: str) -> str:
    """Prepend ``https://`` when the URL has no scheme.

    An existing scheme is kept and lower-cased. No other validation
    happens here; malformed URLs fail when fetched.

    Args:
        url: URL as typed by the user

    Returns:
        URL with a scheme
    """
    url = url.strip()
    match = _SCHEME_PATTERN.match(url)
    if match is None:
        return f"https://{url}"
    return match.group(1).lower() + url[len(match.group(1)):]


def require_text(value: str) -> bool:
    """Check that a text field is non-empty after trimming."""
    return bool(value and value.strip())
