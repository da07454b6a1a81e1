"""Mini README: Centralised configuration models and helpers for Flightnet.

Structure:
    * FlightnetSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FLIGHTNET_`` environment variables (or a
    local ``.env`` file), locate the snapshot file and pick the cruise speed
    used to derive route durations. The settings are cached so validation runs
    once per process; tests call ``get_settings.cache_clear()`` after patching
    the environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlightnetSettings(BaseSettings):
    """Runtime configuration for the Flightnet service and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTNET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory where network snapshots are stored.",
    )
    snapshot_filename: str = Field(
        "network.json",
        description="File name of the default network snapshot inside the data directory.",
    )
    cruise_speed_kmh: float = Field(
        800.0,
        description="Average cruise speed used to derive route durations from distances.",
        gt=0,
    )
    seed_demo_network: bool = Field(
        True,
        description="Populate the web interface with the demo network on start-up.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the web interface exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[Union[str, Path]]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def snapshot_path(self) -> Path:
        """Absolute path of the default snapshot file."""

        return self.data_directory / self.snapshot_filename


@lru_cache()
def get_settings() -> FlightnetSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FlightnetSettings()
