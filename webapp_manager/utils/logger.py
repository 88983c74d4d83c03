"""Logging system for Web App Manager.

This module provides a structured logging system with file rotation
and different log levels for development and production.

Handlers live on the ``webapp_manager`` logger; modules log through
children named after themselves so records keep their origin.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .xdg import XDGDirectories, ensure_dir

ROOT_LOGGER_NAME = "webapp_manager"


class Logger:
    """Centralized logging configuration.

    Provides both file and console logging with proper formatting
    and rotation.
    """

    _root: Optional[logging.Logger] = None
    _console_handler: Optional[logging.Handler] = None

    @classmethod
    def get_logger(cls, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
        """Get a logger, configuring the shared handlers on first use.

        Args:
            name: Logger name, usually ``__name__``

        Returns:
            Logger propagating to the configured ``webapp_manager`` logger
        """
        if cls._root is None:
            cls._root = cls._setup_logger()

        if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @classmethod
    def _setup_logger(cls) -> logging.Logger:
        """Setup the parent logger with file and console handlers."""
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        # Remove existing handlers
        logger.handlers.clear()

        detailed_formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        simple_formatter = logging.Formatter(
            fmt="%(levelname)-8s | %(name)s | %(message)s",
        )

        # Console handler (INFO and above)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(simple_formatter)
        logger.addHandler(console_handler)
        cls._console_handler = console_handler

        # File handler with rotation
        try:
            log_file = ensure_dir(XDGDirectories.get_logs_dir()) / "app.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)
        except Exception as e:
            logger.error(f"Failed to setup file logging: {e}")

        return logger

    @classmethod
    def set_debug_mode(cls, enabled: bool = True) -> None:
        """Enable or disable debug output on the console.

        Args:
            enabled: True to enable debug logging on console
        """
        if cls._root is None:
            cls._root = cls._setup_logger()
        cls._console_handler.setLevel(logging.DEBUG if enabled else logging.INFO)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return Logger.get_logger(name)
