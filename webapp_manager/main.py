"""Entry point for Web App Manager."""

import sys

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from .application import WebAppManagerApplication
from .utils.logger import Logger, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Run the webapp form; ``--debug`` enables console debug output."""
    argv = list(sys.argv)
    if "--debug" in argv:
        argv.remove("--debug")
        Logger.set_debug_mode(True)

    if not Gtk.init_check():
        logger.error("No graphical session available (Wayland/X11)")
        return 1

    try:
        return WebAppManagerApplication().run(argv)
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
