"""Automatic favicon discovery and download.

This module finds the icon a web page advertises, downloads it and
stores it in the per-user icon cache.

Candidates are ranked:
1. ``<link rel="apple-touch-icon">`` (usually the highest resolution)
2. ``<link rel="icon">`` (including ``shortcut icon``)
3. ``/favicon.ico`` on the page's final host
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urljoin, urlparse

import requests
from bs4 import BeautifulSoup

from ..data.models import CachedIcon, IconCandidate, IconSource
from ..utils.logger import get_logger
from ..utils.validators import normalize_url, sanitize_extension, sanitize_host
from ..utils.xdg import XDGDirectories, ensure_dir
from .errors import (
    FilesystemError,
    HtmlParseError,
    IconDownloadFailed,
    NetworkError,
)

logger = get_logger(__name__)

FAVICON_FALLBACK = "/favicon.ico"
DEFAULT_EXTENSION = "png"
DEFAULT_HOST_LABEL = "webapp"


def _rel_tokens(link) -> list[str]:
    """Return the lower-cased rel tokens of a link element."""
    rel = link.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return [token.lower() for token in rel]


def find_icon_candidate(html_text: str) -> IconCandidate:
    """Pick the best icon reference in an HTML document.

    Only the first link of each tier is considered. A tier whose first
    link has no href yields nothing.

    Args:
        html_text: Page body

    Returns:
        Chosen candidate (``/favicon.ico`` if the page advertises none)

    Raises:
        HtmlParseError: If the document cannot be parsed
    """
    try:
        soup = BeautifulSoup(html_text, "html.parser")
        links = soup.find_all("link")
    except Exception as e:
        raise HtmlParseError(f"Could not parse HTML: {e}") from e

    for token, source in (
        ("apple-touch-icon", IconSource.APPLE_TOUCH_ICON),
        ("icon", IconSource.LINK_ICON),
    ):
        link = next((tag for tag in links if token in _rel_tokens(tag)), None)
        if link is not None and link.get("href") is not None:
            return IconCandidate(link["href"], source)

    return IconCandidate(FAVICON_FALLBACK, IconSource.FAVICON_FALLBACK)


def resolve_candidate(base_url: str, candidate: IconCandidate) -> str:
    """Resolve a candidate href against the page's final URL."""
    return urljoin(base_url, candidate.href)


def icon_extension(icon_url: str) -> str:
    """Derive the cache file extension from an icon URL path."""
    last_segment = urlparse(icon_url).path.rsplit("/", 1)[-1]
    if "." not in last_segment:
        return DEFAULT_EXTENSION
    return sanitize_extension(last_segment.rsplit(".", 1)[1]) or DEFAULT_EXTENSION


def icon_host_label(page_url: str) -> str:
    """Derive the cache file stem from the page's host."""
    host = urlparse(page_url).hostname or ""
    return sanitize_host(host) or DEFAULT_HOST_LABEL


def icon_cache_path(page_url: str, icon_url: str) -> CachedIcon:
    """Compute where the icon of a page is cached.

    Two icons on the same host with the same extension share a path;
    the latest download wins.
    """
    host_label = icon_host_label(page_url)
    extension = icon_extension(icon_url)
    path = XDGDirectories.get_icon_cache_dir() / f"{host_label}.{extension}"
    return CachedIcon(host_label=host_label, extension=extension, path=path)


class IconResolver:
    """Resolves and downloads the best icon of a web page."""

    DEFAULT_TIMEOUT = 10  # seconds
    USER_AGENT = (
        "Mozilla/5.0 (X11; Linux x86_64; rv:109.0) Gecko/20100101 Firefox/115.0"
    )

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        """Initialize icon resolver.

        Args:
            session: HTTP session to use (a new one is created if omitted)
        """
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})
        logger.debug("IconResolver initialized")

    def resolve_icon(self, url_text: str) -> Path:
        """Find, download and cache the icon of a web page.

        Args:
            url_text: Page URL as typed (scheme optional)

        Returns:
            Path of the cached icon

        Raises:
            NetworkError: If a request cannot be completed
            IconDownloadFailed: If the icon URL answers with a non-2xx status
            FilesystemError: If the cache cannot be written
        """
        page_url = normalize_url(url_text)
        logger.info(f"Resolving icon for URL: {page_url}")

        response = self._get(page_url)
        base_url = response.url or page_url

        try:
            candidate = find_icon_candidate(response.text)
        except HtmlParseError as e:
            logger.debug(f"{e}; falling back to {FAVICON_FALLBACK}")
            candidate = IconCandidate(FAVICON_FALLBACK, IconSource.FAVICON_FALLBACK)

        icon_url = resolve_candidate(base_url, candidate)
        logger.debug(f"Icon candidate ({candidate.source.name}): {icon_url}")

        content = self._download_icon(icon_url)
        cached = icon_cache_path(base_url, icon_url)
        self._save_icon(content, cached.path)

        logger.info(f"Icon saved successfully: {cached.path}")
        return cached.path

    def _get(self, url: str) -> requests.Response:
        """Issue a GET request, following redirects."""
        try:
            return self.session.get(url, timeout=self.DEFAULT_TIMEOUT)
        except requests.RequestException as e:
            raise NetworkError(url, e) from e

    def _download_icon(self, icon_url: str) -> bytes:
        """Download icon data.

        Raises:
            IconDownloadFailed: On a non-success status
        """
        response = self._get(icon_url)
        if not 200 <= response.status_code < 300:
            raise IconDownloadFailed(icon_url, response.status_code)

        logger.debug(f"Downloaded icon: {len(response.content)} bytes")
        return response.content

    @staticmethod
    def _save_icon(content: bytes, path: Path) -> None:
        """Write icon bytes, replacing any previous file."""
        ensure_dir(path.parent)
        try:
            path.write_bytes(content)
        except OSError as e:
            raise FilesystemError(path, e) from e

    def close(self) -> None:
        """Close HTTP session."""
        self.session.close()
        logger.debug("IconResolver session closed")

    def __enter__(self) -> "IconResolver":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()


def resolve_icon(url_text: str) -> Path:
    """Resolve the icon of a page with a short-lived resolver."""
    with IconResolver() as resolver:
        return resolver.resolve_icon(url_text)
