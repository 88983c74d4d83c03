"""Main application class.

This module provides the main GTK Application class that creates the
webapp form and manages the application lifecycle.
"""

from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib

from .core.browser_detection import detect_installed_browsers
from .ui.main_window import MainWindow
from .utils.logger import get_logger
from .utils.xdg import APP_ID

logger = get_logger(__name__)


class WebAppManagerApplication(Adw.Application):
    """Main application class.

    Detects installed browsers once at startup and owns the main window.
    """

    def __init__(self) -> None:
        """Initialize application."""
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )

        self.browsers: list[str] = []
        self.main_window: Optional[MainWindow] = None

        logger.info(f"WebAppManagerApplication initialized (ID: {APP_ID})")

    def do_startup(self) -> None:
        """Application startup - detect browsers and register actions."""
        Adw.Application.do_startup(self)

        logger.info("Application starting up...")

        self.browsers = detect_installed_browsers()
        self._setup_actions()

        logger.info("Application startup complete")

    def _setup_actions(self) -> None:
        """Setup application actions and shortcuts."""
        quit_action = Gio.SimpleAction.new("quit", None)
        quit_action.connect("activate", self._on_quit_action)
        self.add_action(quit_action)

        self.set_accels_for_action("app.quit", ["<Ctrl>Q"])
        self.set_accels_for_action("window.close", ["<Ctrl>W"])

    def do_activate(self) -> None:
        """Application activation - create and show main window."""
        logger.info("Application activated")

        if not self.main_window:
            self.main_window = MainWindow(application=self, browsers=self.browsers)

        self.main_window.present()

    def _on_quit_action(
        self, action: Gio.SimpleAction, parameter: Optional[GLib.Variant]
    ) -> None:
        """Handle quit action."""
        logger.info("Quit action triggered")
        self.quit()
