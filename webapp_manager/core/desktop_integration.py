"""Desktop environment integration.

This module handles creation of .desktop files for launcher integration,
including the isolated browser data directory each webapp runs in.
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from ..data.models import BrowserFamily, Category, LauncherDescriptor, WebAppRequest
from ..utils.logger import get_logger
from ..utils.validators import require_text
from ..utils.xdg import XDGDirectories, ensure_dir
from .browsers import build_exec_command, classify_browser, create_firefox_profile
from .errors import FilesystemError, MissingField

logger = get_logger(__name__)


class DesktopIntegration:
    """Handles desktop environment integration.

    Creates .desktop files that open a URL in an isolated browser
    profile.
    """

    @staticmethod
    def create_launcher(
        name: str,
        url: str,
        icon_path: Optional[str],
        browser_id: str,
        category: Union[Category, str],
    ) -> str:
        """Create or replace the launcher of a webapp.

        Args:
            name: Display name
            url: URL the webapp opens
            icon_path: Icon file path (None or empty for no icon)
            browser_id: Browser package identifier
            category: Desktop category

        Returns:
            Confirmation message naming the written file

        Raises:
            MissingField: If name or URL is empty, or the name has no
                usable characters
            HomeDirectoryUnavailable: If no home directory can be found
            FilesystemError: If a directory or the file cannot be written
        """
        if not require_text(name) or not require_text(url):
            raise MissingField("Name and URL are required.")

        category_name = category.value if isinstance(category, Category) else category
        request = WebAppRequest(
            name=name,
            url=url.strip(),
            browser_id=browser_id,
            category=Category(category_name),
            icon_path=icon_path,
        )
        desktop_file_path = DesktopIntegration.create_desktop_file(request)
        return f"Created {desktop_file_path}"

    @staticmethod
    def create_desktop_file(request: WebAppRequest) -> Path:
        """Create .desktop file for a webapp.

        Args:
            request: Validated webapp input

        Returns:
            Path to created .desktop file
        """
        safe_name = request.safe_name
        if not safe_name:
            raise MissingField(
                f"Name {request.name!r} must contain at least one letter or digit."
            )

        logger.info(f"Creating .desktop file for webapp: {request.name}")

        ensure_dir(XDGDirectories.get_applications_dir())
        data_dir = ensure_dir(XDGDirectories.get_webapp_data_dir(safe_name))

        if classify_browser(request.browser_id) is BrowserFamily.FIREFOX_LIKE:
            create_firefox_profile(request.browser_id, safe_name, data_dir)

        descriptor = DesktopIntegration._build_descriptor(request, data_dir)
        desktop_file_path = XDGDirectories.get_desktop_file_path(safe_name)

        try:
            with open(desktop_file_path, "w", encoding="utf-8") as f:
                f.write(descriptor.render())

            # Make executable
            desktop_file_path.chmod(0o755)
        except OSError as e:
            raise FilesystemError(desktop_file_path, e) from e

        DesktopIntegration._update_desktop_database()

        logger.info(f"Desktop file created: {desktop_file_path}")
        return desktop_file_path

    @staticmethod
    def _build_descriptor(request: WebAppRequest, data_dir: Path) -> LauncherDescriptor:
        """Assemble the launcher entry of a webapp."""
        return LauncherDescriptor(
            name=request.name,
            url=request.url,
            exec_command=build_exec_command(
                request.browser_id, request.url, request.safe_name, data_dir
            ),
            icon=request.icon_path if request.has_icon else "",
            category=request.category.value,
            safe_name=request.safe_name,
        )

    @staticmethod
    def _update_desktop_database() -> None:
        """Update desktop database after changes.

        This makes the new/updated launcher entries appear immediately.
        """
        try:
            subprocess.run(
                [
                    "update-desktop-database",
                    "-q",
                    str(XDGDirectories.get_applications_dir()),
                ],
                check=False,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            logger.debug("Desktop database updated")
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Could not update desktop database: {e}")


def create_launcher(
    name: str,
    url: str,
    icon_path: Optional[str],
    browser_id: str,
    category: Union[Category, str],
) -> str:
    """Create or replace a webapp launcher; see DesktopIntegration.create_launcher."""
    return DesktopIntegration.create_launcher(name, url, icon_path, browser_id, category)
