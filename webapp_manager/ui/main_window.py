"""Main window for Web App Manager.

This module provides the form that collects a webapp's name, URL,
icon, browser and category and turns it into a launcher.
"""

from typing import Optional

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib, Gtk

from ..core.desktop_integration import DesktopIntegration
from ..core.errors import WebAppError
from ..core.icon_task import IconDownloadTask
from ..data.models import DEFAULT_CATEGORIES
from ..utils.logger import get_logger

logger = get_logger(__name__)

ICON_POLL_INTERVAL_MS = 100


class MainWindow(Adw.ApplicationWindow):
    """Form for creating a webapp launcher."""

    def __init__(self, application: Adw.Application, browsers: list[str]) -> None:
        """Initialize main window.

        Args:
            application: Parent application
            browsers: Installed browsers in priority order (non-empty)
        """
        super().__init__(application=application)

        self.browsers = browsers or ["firefox"]
        self._icon_task: Optional[IconDownloadTask] = None
        self._file_dialog: Optional[Gtk.FileDialog] = None

        self.set_title("CachyOS Web App Manager")
        self.set_default_size(600, 500)

        self._build_ui()
        logger.debug("MainWindow initialized")

    def _build_ui(self) -> None:
        """Build window UI."""
        toolbar_view = Adw.ToolbarView()
        toolbar_view.add_top_bar(Adw.HeaderBar())

        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=0)

        page = Adw.PreferencesPage()
        group = Adw.PreferencesGroup()
        group.set_title("Web App Details")

        self.name_entry = Adw.EntryRow()
        self.name_entry.set_title("Name (e.g., WhatsApp)")
        group.add(self.name_entry)

        self.url_entry = Adw.EntryRow()
        self.url_entry.set_title("URL (e.g., https://web.whatsapp.com)")
        group.add(self.url_entry)

        # Icon path with chooser and download buttons
        self.icon_entry = Adw.EntryRow()
        self.icon_entry.set_title("Path to icon")

        choose_button = Gtk.Button(label="Choose...")
        choose_button.set_valign(Gtk.Align.CENTER)
        choose_button.connect("clicked", self._on_choose_icon_clicked)
        self.icon_entry.add_suffix(choose_button)

        self.download_button = Gtk.Button(label="Download")
        self.download_button.set_valign(Gtk.Align.CENTER)
        self.download_button.connect("clicked", self._on_download_icon_clicked)
        self.icon_entry.add_suffix(self.download_button)
        group.add(self.icon_entry)

        self.browser_row = Adw.ComboRow()
        self.browser_row.set_title("Browser")
        self.browser_row.set_model(Gtk.StringList.new(self.browsers))
        group.add(self.browser_row)

        self.category_row = Adw.ComboRow()
        self.category_row.set_title("Category")
        self.category_row.set_model(
            Gtk.StringList.new([category.value for category in DEFAULT_CATEGORIES])
        )
        group.add(self.category_row)

        page.add(group)
        page.set_vexpand(True)
        content.append(page)

        create_button = Gtk.Button(label="Create Web App")
        create_button.add_css_class("suggested-action")
        create_button.add_css_class("pill")
        create_button.set_margin_top(20)
        create_button.set_margin_bottom(20)
        create_button.set_halign(Gtk.Align.CENTER)
        create_button.connect("clicked", self._on_create_clicked)
        content.append(create_button)

        toolbar_view.set_content(content)
        self.set_content(toolbar_view)

    def _show_alert(self, heading: str, body: str) -> None:
        """Show a modal message."""
        dialog = Adw.AlertDialog()
        dialog.set_heading(heading)
        dialog.set_body(body)
        dialog.add_response("ok", "OK")
        dialog.set_default_response("ok")
        dialog.set_close_response("ok")
        dialog.present(self)

    def _on_choose_icon_clicked(self, _button: Gtk.Button) -> None:
        """Open file chooser to select a custom icon."""
        dialog = Gtk.FileDialog()
        dialog.set_title("Select Icon")
        dialog.set_modal(True)

        image_filter = Gtk.FileFilter()
        image_filter.set_name("Images")
        image_filter.add_pixbuf_formats()

        filters = Gio.ListStore.new(Gtk.FileFilter)
        filters.append(image_filter)
        dialog.set_filters(filters)

        self._file_dialog = dialog
        dialog.open(self, None, self._on_icon_file_dialog_response)

    def _on_icon_file_dialog_response(
        self, dialog: Gtk.FileDialog, result: Gio.AsyncResult
    ) -> None:
        """Handle the result from the icon file chooser."""
        try:
            gio_file = dialog.open_finish(result)
        except GLib.Error as err:
            if err.matches(Gio.io_error_quark(), Gio.IOErrorEnum.CANCELLED):
                logger.debug("Icon selection cancelled by user")
            else:
                logger.warning(f"Failed to open icon file: {err}")
            return
        finally:
            self._file_dialog = None

        path = gio_file.get_path() if gio_file else None
        if not path:
            logger.warning("Selected icon file has no accessible path")
            return

        self.icon_entry.set_text(path)

    def _on_download_icon_clicked(self, _button: Gtk.Button) -> None:
        """Fetch the page icon in background to avoid blocking the UI."""
        url = self.url_entry.get_text()
        if not url.strip():
            self._show_alert("Error", "Please enter a URL first.")
            return

        if self._icon_task is not None and self._icon_task.pending:
            return

        self.download_button.set_sensitive(False)
        self._icon_task = IconDownloadTask(url).start()
        GLib.timeout_add(ICON_POLL_INTERVAL_MS, self._poll_icon_task)

    def _poll_icon_task(self) -> bool:
        """Check the icon download from the main loop."""
        task = self._icon_task
        if task is None:
            return GLib.SOURCE_REMOVE

        outcome = task.poll()
        if outcome is None:
            return GLib.SOURCE_CONTINUE

        self._icon_task = None
        self.download_button.set_sensitive(True)

        if outcome.succeeded:
            self.icon_entry.set_text(str(outcome.path))
            logger.info("Icon fetched successfully")
        else:
            self._show_alert("Download Failed", str(outcome.error))

        return GLib.SOURCE_REMOVE

    def _on_create_clicked(self, _button: Gtk.Button) -> None:
        """Write the launcher for the current form values."""
        browser = self.browsers[min(self.browser_row.get_selected(), len(self.browsers) - 1)]
        category = DEFAULT_CATEGORIES[self.category_row.get_selected()]

        try:
            message = DesktopIntegration.create_launcher(
                self.name_entry.get_text(),
                self.url_entry.get_text(),
                self.icon_entry.get_text(),
                browser,
                category,
            )
        except WebAppError as e:
            logger.error(f"Error creating webapp: {e}")
            self._show_alert("Error", f"Failed to create web app: {e}")
            return

        self._show_alert("Success", message)
