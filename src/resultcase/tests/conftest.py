"""Shared fixtures for resultcase tests."""

import os

import pytest

from resultcase.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Isolate each test from RESULTCASE_* environment and cached settings."""
    for key in list(os.environ):
        if key.startswith("RESULTCASE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    clear_settings_cache()
    yield
    clear_settings_cache()
