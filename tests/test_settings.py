from __future__ import annotations

import importlib

import pytest

import config.settings as settings


@pytest.fixture
def reload_settings(monkeypatch):
    def _reload(value: str | None):
        if value is None:
            monkeypatch.delenv("INTERCHANGE_MAX_IMPORT_BYTES", raising=False)
        else:
            monkeypatch.setenv("INTERCHANGE_MAX_IMPORT_BYTES", value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


@pytest.mark.parametrize("value", [None, "", "lots", "5MB", "0", "-10"])
def test_max_import_bytes_falls_back_to_default(reload_settings, value) -> None:
    assert reload_settings(value).MAX_IMPORT_BYTES == 5 * 1024 * 1024


def test_max_import_bytes_from_env(reload_settings) -> None:
    assert reload_settings(" 1024 ").MAX_IMPORT_BYTES == 1024
