"""Tests for launcher synthesis."""

import os
import stat
from unittest.mock import patch

import pytest

from webapp_manager.core.desktop_integration import DesktopIntegration, create_launcher
from webapp_manager.core.errors import FilesystemError, HomeDirectoryUnavailable, MissingField
from webapp_manager.data.models import Category


def _read_entry(path):
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "[Desktop Entry]"
    return dict(line.split("=", 1) for line in lines[1:])


@pytest.mark.parametrize(("name", "url"), [("My App", ""), ("", "https://example.com"), ("  ", "  ")])
def test_missing_fields_rejected(name, url, xdg_home, profile_creator):
    with pytest.raises(MissingField):
        create_launcher(name, url, None, "firefox", Category.NETWORK)

    assert not (xdg_home / "data" / "applications").exists()
    profile_creator.assert_not_called()


def test_punctuation_only_name_rejected(xdg_home, profile_creator):
    with pytest.raises(MissingField):
        create_launcher("!!!", "https://example.com", None, "chromium", "Network")

    assert not (xdg_home / "data" / "webapps").exists()


def test_firefox_launcher(xdg_home, profile_creator):
    message = create_launcher(
        "My App!", "https://example.com", "/tmp/icon.png", "firefox", Category.OFFICE
    )

    desktop_file = xdg_home / "data" / "applications" / "My_App.desktop"
    data_dir = xdg_home / "data" / "webapps" / "My_App"
    assert message == f"Created {desktop_file}"
    assert data_dir.is_dir()
    profile_creator.assert_called_once_with("firefox", "My_App", data_dir)

    entry = _read_entry(desktop_file)
    assert entry == {
        "Version": "1.0",
        "Type": "Application",
        "Name": "My App!",
        "Comment": "Web App for https://example.com",
        "Exec": 'firefox --class "WebApp-My_App" --name "WebApp-My_App" '
        "--new-window https://example.com -P My_App",
        "Icon": "/tmp/icon.png",
        "Terminal": "false",
        "Categories": "Office;",
        "StartupWMClass": "WebApp-My_App",
    }


def test_descriptor_key_order(xdg_home, profile_creator):
    create_launcher("Chat", "https://chat.example", "", "chromium", "Network")

    keys = [
        line.split("=", 1)[0]
        for line in (xdg_home / "data" / "applications" / "Chat.desktop")
        .read_text(encoding="utf-8")
        .splitlines()[1:]
    ]
    assert keys == [
        "Version",
        "Type",
        "Name",
        "Comment",
        "Exec",
        "Icon",
        "Terminal",
        "Categories",
        "StartupWMClass",
    ]


def test_chromium_launcher(xdg_home, profile_creator):
    create_launcher("Mail", "https://mail.example.com", None, "brave-bin", Category.NETWORK)

    data_dir = xdg_home / "data" / "webapps" / "Mail"
    entry = _read_entry(xdg_home / "data" / "applications" / "Mail.desktop")

    assert data_dir.is_dir()
    assert entry["Exec"] == f"brave --app=https://mail.example.com --user-data-dir={data_dir}"
    assert entry["Icon"] == ""
    profile_creator.assert_not_called()


def test_google_chrome_binary(xdg_home, profile_creator):
    create_launcher("Docs", "https://docs.example", None, "google-chrome", "Office")

    entry = _read_entry(xdg_home / "data" / "applications" / "Docs.desktop")
    assert entry["Exec"].split()[0] == "google-chrome-stable"


def test_profile_failure_is_not_fatal(xdg_home, profile_creator):
    profile_creator.return_value = False

    create_launcher("Tube", "https://video.example", None, "firefox", "AudioVideo")

    assert (xdg_home / "data" / "applications" / "Tube.desktop").exists()


def test_recreating_overwrites(xdg_home, profile_creator):
    create_launcher("Notes", "https://old.example", None, "chromium", "Utility")
    create_launcher("Notes", "https://new.example", None, "chromium", "Utility")

    apps_dir = xdg_home / "data" / "applications"
    assert [p.name for p in apps_dir.iterdir()] == ["Notes.desktop"]
    assert _read_entry(apps_dir / "Notes.desktop")["Comment"] == "Web App for https://new.example"


def test_desktop_file_is_executable(xdg_home, profile_creator):
    create_launcher("Exec", "https://example.com", None, "vivaldi", "Game")

    mode = os.stat(xdg_home / "data" / "applications" / "Exec.desktop").st_mode
    assert mode & stat.S_IXUSR


def test_refreshes_desktop_database(profile_creator, desktop_database):
    create_launcher("Db", "https://example.com", None, "chromium", "Development")

    desktop_database.assert_called_once()


def test_directory_failure_is_surfaced(xdg_home, profile_creator):
    # A file where the data root should be makes directory creation fail
    (xdg_home / "data").write_text("not a directory")

    with pytest.raises(FilesystemError) as excinfo:
        create_launcher("Broken", "https://example.com", None, "chromium", "Network")

    assert isinstance(excinfo.value.cause, OSError)


def test_home_unavailable(monkeypatch, profile_creator):
    monkeypatch.delenv("XDG_DATA_HOME")

    with patch(
        "webapp_manager.utils.xdg.Path.home",
        side_effect=RuntimeError("Could not determine home directory."),
    ):
        with pytest.raises(HomeDirectoryUnavailable):
            create_launcher("App", "https://example.com", None, "chromium", "Network")


def test_invalid_category_rejected(profile_creator):
    with pytest.raises(ValueError):
        DesktopIntegration.create_launcher(
            "App", "https://example.com", None, "chromium", "NotACategory"
        )
