"""XDG Base Directory utilities.

This module provides helpers for working with XDG directories,
following the freedesktop.org Base Directory specification.
"""

import os
from pathlib import Path

from ..core.errors import FilesystemError, HomeDirectoryUnavailable

# Application ID following reverse DNS notation
APP_ID = "org.cachyos.webappmanager"

# Directory name used under the cache root
CACHE_NAME = "webapp-manager"


def build_wm_class(safe_name: str) -> str:
    """Return the window class shared by a webapp's windows."""
    return f"WebApp-{safe_name}"


def ensure_dir(path: Path) -> Path:
    """Create a directory (and parents) if missing.

    Raises:
        FilesystemError: If the directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(path, e) from e
    return path


class XDGDirectories:
    """Provides access to XDG standard directories.

    Getters only compute paths; callers create what they need with
    :func:`ensure_dir` so creation failures surface as typed errors.
    """

    @staticmethod
    def get_home_dir() -> Path:
        """Get the user's home directory.

        Raises:
            HomeDirectoryUnavailable: If the home directory cannot be determined
        """
        try:
            return Path.home()
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryUnavailable() from e

    @classmethod
    def get_data_home(cls) -> Path:
        """Get XDG data root (``$XDG_DATA_HOME`` or ``~/.local/share``)."""
        base = os.environ.get("XDG_DATA_HOME")
        if not base:
            return cls.get_home_dir() / ".local" / "share"
        return Path(base)

    @classmethod
    def get_cache_home(cls) -> Path:
        """Get XDG cache root (``$XDG_CACHE_HOME`` or ``~/.cache``)."""
        base = os.environ.get("XDG_CACHE_HOME")
        if not base:
            return cls.get_home_dir() / ".cache"
        return Path(base)

    @classmethod
    def get_cache_dir(cls) -> Path:
        """Get cache directory for the application."""
        return cls.get_cache_home() / CACHE_NAME

    @classmethod
    def get_icon_cache_dir(cls) -> Path:
        """Get directory for downloaded icons."""
        return cls.get_cache_dir() / "icons"

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Get directory for log files."""
        return cls.get_cache_dir() / "logs"

    @classmethod
    def get_applications_dir(cls) -> Path:
        """Get directory for .desktop files."""
        return cls.get_data_home() / "applications"

    @classmethod
    def get_webapps_dir(cls) -> Path:
        """Get root of the per-app browser data directories."""
        return cls.get_data_home() / "webapps"

    @classmethod
    def get_webapp_data_dir(cls, safe_name: str) -> Path:
        """Get the isolated browser data directory for one webapp.

        Args:
            safe_name: Sanitized webapp name

        Returns:
            Path used as Firefox profile dir or Chromium user-data-dir
        """
        return cls.get_webapps_dir() / safe_name

    @classmethod
    def get_desktop_file_path(cls, safe_name: str) -> Path:
        """Get path to .desktop file for a webapp.

        Args:
            safe_name: Sanitized webapp name

        Returns:
            Path to .desktop file
        """
        return cls.get_applications_dir() / f"{safe_name}.desktop"
