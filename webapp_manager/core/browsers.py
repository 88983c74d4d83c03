"""Browser-specific launch conventions.

This module classifies browser identifiers into launch families,
maps package names to executables and builds the Exec command used
by launcher entries.
"""

import subprocess
from pathlib import Path

from ..data.models import BrowserFamily
from ..utils.logger import get_logger
from ..utils.xdg import build_wm_class

logger = get_logger(__name__)

# Package name -> executable name, for packages whose binary differs
BINARY_ALIASES = {
    "brave-bin": "brave",
    "google-chrome": "google-chrome-stable",
}

PROFILE_TIMEOUT = 30  # seconds


def classify_browser(browser_id: str) -> BrowserFamily:
    """Return the launch family of a browser identifier."""
    if "firefox" in browser_id:
        return BrowserFamily.FIREFOX_LIKE
    return BrowserFamily.CHROMIUM_LIKE


def resolve_binary(browser_id: str) -> str:
    """Map a browser package identifier to its executable name.

    Unknown identifiers are returned unchanged.
    """
    return BINARY_ALIASES.get(browser_id, browser_id)


def build_exec_command(
    browser_id: str, url: str, safe_name: str, data_dir: Path
) -> str:
    """Build the Exec command for a webapp launcher.

    Args:
        browser_id: Browser package identifier
        url: URL the webapp opens
        safe_name: Sanitized webapp name
        data_dir: Isolated per-app data directory

    Returns:
        Command line for the Exec key
    """
    binary = resolve_binary(browser_id)

    if classify_browser(browser_id) is BrowserFamily.FIREFOX_LIKE:
        wm_class = build_wm_class(safe_name)
        return (
            f'{binary} --class "{wm_class}" --name "{wm_class}" '
            f"--new-window {url} -P {safe_name}"
        )

    return f"{binary} --app={url} --user-data-dir={data_dir}"


def create_firefox_profile(browser_id: str, profile_name: str, profile_dir: Path) -> bool:
    """Register a Firefox profile living in ``profile_dir``.

    Profile creation is advisory: failures are logged and reported
    through the return value, never raised.

    Args:
        browser_id: Firefox-like browser identifier
        profile_name: Name passed to ``-P`` when launching
        profile_dir: Directory holding the profile data

    Returns:
        True if the browser reported success, False otherwise
    """
    binary = resolve_binary(browser_id)
    command = [binary, "-CreateProfile", f"{profile_name} {profile_dir}"]

    try:
        result = subprocess.run(
            command,
            check=False,
            capture_output=True,
            text=True,
            timeout=PROFILE_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Could not create {binary} profile {profile_name}: {e}")
        return False

    if result.returncode != 0:
        logger.warning(
            "%s -CreateProfile exited with %s: %s",
            binary,
            result.returncode,
            (result.stderr or "").strip(),
        )
        return False

    logger.debug(f"Firefox profile created: {profile_name} -> {profile_dir}")
    return True
