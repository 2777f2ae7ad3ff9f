"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def app_home(tmp_path, monkeypatch):
    """Point settings.json and palette.json at a temp dir."""
    monkeypatch.setenv("CHATGRADIENT_HOME", str(tmp_path))
    return tmp_path
