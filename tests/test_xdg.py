"""Tests for XDG directory resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from webapp_manager.core.errors import FilesystemError
from webapp_manager.utils.xdg import XDGDirectories, ensure_dir


def test_xdg_overrides(xdg_home):
    assert XDGDirectories.get_applications_dir() == xdg_home / "data" / "applications"
    assert XDGDirectories.get_webapp_data_dir("My_App") == xdg_home / "data" / "webapps" / "My_App"
    assert XDGDirectories.get_desktop_file_path("My_App") == (
        xdg_home / "data" / "applications" / "My_App.desktop"
    )
    assert XDGDirectories.get_icon_cache_dir() == xdg_home / "cache" / "webapp-manager" / "icons"


def test_home_fallbacks(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_DATA_HOME")
    monkeypatch.delenv("XDG_CACHE_HOME")

    with patch("webapp_manager.utils.xdg.Path.home", return_value=tmp_path):
        assert XDGDirectories.get_applications_dir() == tmp_path / ".local" / "share" / "applications"
        assert XDGDirectories.get_icon_cache_dir() == (
            tmp_path / ".cache" / "webapp-manager" / "icons"
        )


def test_getters_do_not_create_directories(xdg_home):
    XDGDirectories.get_webapp_data_dir("Lazy")

    assert not (xdg_home / "data").exists()


def test_ensure_dir_wraps_os_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")

    with pytest.raises(FilesystemError) as excinfo:
        ensure_dir(blocker / "child")

    assert excinfo.value.path == Path(blocker / "child")
