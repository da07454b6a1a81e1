"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from flightnet.configuration import FlightnetSettings, get_settings


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    data_directory = tmp_path / "snapshots"
    monkeypatch.setenv("FLIGHTNET_DATA_DIRECTORY", str(data_directory))
    monkeypatch.setenv("FLIGHTNET_CRUISE_SPEED_KMH", "900")
    monkeypatch.setenv("FLIGHTNET_SNAPSHOT_FILENAME", "routes.json")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert data_directory.is_dir()
        assert settings.cruise_speed_kmh == 900.0
        assert settings.snapshot_path == data_directory.resolve() / "routes.json"
    finally:
        get_settings.cache_clear()


def test_rejects_invalid_values(tmp_path) -> None:
    with pytest.raises(ValidationError):
        FlightnetSettings(data_directory=tmp_path, interface_port=70000)
    with pytest.raises(ValidationError):
        FlightnetSettings(data_directory=tmp_path, cruise_speed_kmh=0)
