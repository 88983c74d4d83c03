"""Detection of installed browsers.

Reads the pacman package inventory and keeps the supported browsers
in a fixed priority order.
"""

import subprocess
from typing import Callable, Iterable, Optional

from ..utils.logger import get_logger

logger = get_logger(__name__)

# Priority order; the first installed entry is the default selection
TARGET_BROWSERS = (
    "firefox",
    "chromium",
    "brave-bin",
    "vivaldi",
    "google-chrome",
)

DEFAULT_BROWSER = "firefox"

INVENTORY_COMMAND = ["pacman", "-Qq"]
INVENTORY_TIMEOUT = 15  # seconds


def query_installed_packages() -> list[str]:
    """List installed package names.

    Returns:
        Package names, or an empty list if the inventory is unavailable
    """
    try:
        result = subprocess.run(
            INVENTORY_COMMAND,
            check=False,
            capture_output=True,
            text=True,
            timeout=INVENTORY_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Package inventory unavailable: {e}")
        return []

    if result.returncode != 0:
        logger.debug(f"Package inventory query exited with {result.returncode}")
        return []

    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def select_browsers(packages: Iterable[str]) -> list[str]:
    """Filter supported browsers out of a package list.

    The result follows ``TARGET_BROWSERS`` order, not the inventory's,
    and falls back to ``[DEFAULT_BROWSER]`` when nothing matches.
    """
    installed = set(packages)
    browsers = [target for target in TARGET_BROWSERS if target in installed]

    if not browsers:
        logger.info(f"No supported browser detected; defaulting to {DEFAULT_BROWSER}")
        browsers = [DEFAULT_BROWSER]

    return browsers


def detect_installed_browsers(
    query: Optional[Callable[[], list[str]]] = None,
) -> list[str]:
    """Detect installed browsers in priority order.

    Args:
        query: Inventory query to use (defaults to pacman)

    Returns:
        Non-empty list of browser identifiers
    """
    query = query or query_installed_packages

    try:
        packages = query()
    except Exception as e:
        logger.warning(f"Browser detection failed: {e}")
        packages = []

    browsers = select_browsers(packages)
    logger.debug(f"Detected browsers: {browsers}")
    return browsers
