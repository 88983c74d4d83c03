"""Data models for Web App Manager.

This module defines the domain models using dataclasses and enums
for type safety and immutability where appropriate.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..utils.validators import safe_name
from ..utils.xdg import build_wm_class


class Category(str, Enum):
    """Freedesktop main categories offered for a webapp."""

    NETWORK = "Network"
    OFFICE = "Office"
    GRAPHICS = "Graphics"
    AUDIO_VIDEO = "AudioVideo"
    DEVELOPMENT = "Development"
    GAME = "Game"
    UTILITY = "Utility"


class BrowserFamily(Enum):
    """Launch conventions supported for isolating a webapp."""

    FIREFOX_LIKE = "firefox"
    CHROMIUM_LIKE = "chromium"


class IconSource(Enum):
    """Where an icon candidate came from, best first."""

    APPLE_TOUCH_ICON = 1
    LINK_ICON = 2
    FAVICON_FALLBACK = 3


@dataclass
class WebAppRequest:
    """User input for a new webapp launcher.

    Attributes:
        name: Display name of the webapp
        url: URL to open
        browser_id: Browser package identifier (e.g. 'firefox', 'brave-bin')
        category: Desktop category for the launcher
        icon_path: Path to the icon (None or empty for no icon)
    """

    name: str
    url: str
    browser_id: str = "firefox"
    category: Category = Category.NETWORK
    icon_path: Optional[str] = None

    @property
    def safe_name(self) -> str:
        """Filesystem-safe identifier derived from the name."""
        return safe_name(self.name)

    @property
    def has_icon(self) -> bool:
        """Check if an icon path was supplied."""
        return self.icon_path is not None and len(self.icon_path) > 0


@dataclass(frozen=True)
class IconCandidate:
    """Icon reference picked from a page (immutable).

    Attributes:
        href: Raw href (relative or absolute)
        source: Tier the href was found in
    """

    href: str
    source: IconSource


@dataclass(frozen=True)
class CachedIcon:
    """Icon persisted in the icon cache.

    Attributes:
        host_label: Sanitized host of the page the icon belongs to
        extension: File extension taken from the icon URL
        path: Location of the cached file
    """

    host_label: str
    extension: str
    path: Path


@dataclass(frozen=True)
class LauncherDescriptor:
    """Contents of a .desktop launcher entry."""

    name: str
    url: str
    exec_command: str
    icon: str
    category: str
    safe_name: str

    @property
    def wm_class(self) -> str:
        """Window class used to group the webapp's windows."""
        return build_wm_class(self.safe_name)

    def render(self) -> str:
        """Render the descriptor as .desktop file text."""
        return (
            "[Desktop Entry]\n"
            "Version=1.0\n"
            "Type=Application\n"
            f"Name={self.name}\n"
            f"Comment=Web App for {self.url}\n"
            f"Exec={self.exec_command}\n"
            f"Icon={self.icon}\n"
            "Terminal=false\n"
            f"Categories={self.category};\n"
            f"StartupWMClass={self.wm_class}\n"
        )


# Display order of the category selector
DEFAULT_CATEGORIES: list[Category] = list(Category)
