"""Error types raised by the icon and launcher pipelines.

Every error carries a human-readable message so the front end can show
``str(error)`` directly.
"""

from pathlib import Path
from typing import Optional


class WebAppError(Exception):
    """Base class for all webapp manager errors."""

    pass


class MissingField(WebAppError):
    """Raised when a required input (name or URL) is empty."""

    pass


class HomeDirectoryUnavailable(WebAppError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Could not find home directory")


class FilesystemError(WebAppError):
    """Raised when a directory or file cannot be created or written.

    Attributes:
        path: Path that failed
        cause: Underlying OS error
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Filesystem error at {self.path}: {cause}")


class NetworkError(WebAppError):
    """Raised when an HTTP request cannot be completed.

    Attributes:
        url: URL that was requested
        cause: Underlying exception from the HTTP client
    """

    def __init__(self, url: str, cause: Optional[Exception] = None) -> None:
        self.url = url
        self.cause = cause
        message = f"Request to {url} failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class IconDownloadFailed(WebAppError):
    """Raised when the icon URL answers with a non-success status.

    Attributes:
        url: Icon URL that was attempted
        status_code: HTTP status returned by the server
    """

    def __init__(self, url: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        message = f"Failed to download icon from {url}"
        if status_code is not None:
            message = f"{message} (HTTP {status_code})"
        super().__init__(message)


class HtmlParseError(WebAppError):
    """Raised when a page body cannot be parsed for icon links."""

    pass
