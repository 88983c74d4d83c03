"""Shared fixtures."""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def xdg_home(tmp_path, monkeypatch):
    """Point the XDG data and cache roots at a temporary directory."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    return tmp_path


@pytest.fixture
def profile_creator():
    """Replace Firefox profile creation with a mock."""
    with patch(
        "webapp_manager.core.desktop_integration.create_firefox_profile",
        return_value=True,
    ) as creator:
        yield creator


@pytest.fixture(autouse=True)
def desktop_database():
    """Keep tests from running update-desktop-database."""
    with patch(
        "webapp_manager.core.desktop_integration.DesktopIntegration._update_desktop_database"
    ) as update:
        yield update
