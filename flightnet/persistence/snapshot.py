"""Mini README: Explicit, inspectable snapshots of a flight network.

Structure:
    * AirportRecord / RouteRecord - flat records mirroring the graph values.
    * NetworkSnapshot - ordered airports and routes plus a format version.
    * take_snapshot / restore_snapshot - convert between network and snapshot.
    * encode_snapshot / decode_snapshot - JSON text codec.
    * save_network / load_network - file helpers used by the CLI and web UI.

Routes keep their stored distance and duration on restore instead of being
recomputed, so a restored network is field-for-field equal to the original.
Any malformed input raises ``SnapshotError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..geo import DEFAULT_CRUISE_SPEED_KMH
from ..logging_utils import get_logger
from ..network.graph import Airport, FlightNetwork, Route

LOGGER = get_logger(__name__)

SNAPSHOT_FORMAT_VERSION = 1


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be decoded or restored."""


class _SnapshotModel(BaseModel):
    """Base for snapshot models; non-finite floats are written as JSON constants."""

    model_config = ConfigDict(ser_json_inf_nan="constants")


class AirportRecord(_SnapshotModel):
    """Serialised airport."""

    code: str
    name: str
    country: str
    latitude: float
    longitude: float


class RouteRecord(_SnapshotModel):
    """Serialised route including its derived metrics."""

    origin: str
    destination: str
    cost: float
    distance_km: float
    duration_hours: float


class NetworkSnapshot(_SnapshotModel):
    """Complete capture of a network's airports and routes."""

    format_version: int = Field(SNAPSHOT_FORMAT_VERSION, description="Snapshot schema version")
    airports: List[AirportRecord] = Field(default_factory=list)
    routes: List[RouteRecord] = Field(default_factory=list)


def take_snapshot(network: FlightNetwork) -> NetworkSnapshot:
    """Capture airports sorted by code and routes in adjacency order."""

    airports = sorted(network.list_airports(), key=lambda airport: airport.code)
    snapshot = NetworkSnapshot(
        airports=[
            AirportRecord(
                code=airport.code,
                name=airport.name,
                country=airport.country,
                latitude=airport.latitude,
                longitude=airport.longitude,
            )
            for airport in airports
        ],
        routes=[
            RouteRecord(
                origin=route.origin,
                destination=route.destination,
                cost=route.cost,
                distance_km=route.distance_km,
                duration_hours=route.duration_hours,
            )
            for airport in airports
            for route in network.routes_from(airport.code)
        ],
    )
    LOGGER.debug(
        "Captured snapshot with %s airports and %s routes",
        len(snapshot.airports),
        len(snapshot.routes),
    )
    return snapshot


def restore_snapshot(
    snapshot: NetworkSnapshot, *, cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH
) -> FlightNetwork:
    """Build a fresh network equivalent to the captured one."""

    if snapshot.format_version != SNAPSHOT_FORMAT_VERSION:
        raise SnapshotError(f"Unsupported snapshot format version: {snapshot.format_version}")
    network = FlightNetwork(cruise_speed_kmh=cruise_speed_kmh)
    for record in snapshot.airports:
        airport = Airport(
            code=record.code,
            name=record.name,
            country=record.country,
            latitude=record.latitude,
            longitude=record.longitude,
        )
        if not network.add_airport(airport):
            raise SnapshotError(f"Duplicate airport code in snapshot: {record.code}")
    for record in snapshot.routes:
        route = Route(
            origin=record.origin,
            destination=record.destination,
            cost=record.cost,
            distance_km=record.distance_km,
            duration_hours=record.duration_hours,
        )
        if not network.insert_route(route):
            raise SnapshotError(
                f"Route {record.origin} -> {record.destination} references an unknown airport"
            )
    LOGGER.info(
        "Restored network with %s airports and %s routes",
        len(snapshot.airports),
        len(snapshot.routes),
    )
    return network


def encode_snapshot(snapshot: NetworkSnapshot) -> str:
    return snapshot.model_dump_json(indent=2)


def decode_snapshot(payload: Union[str, bytes]) -> NetworkSnapshot:
    """Parse JSON text into a snapshot, raising ``SnapshotError`` when invalid."""

    try:
        return NetworkSnapshot.model_validate_json(payload)
    except (ValidationError, UnicodeDecodeError) as error:
        raise SnapshotError(f"Snapshot payload is invalid: {error}") from error


def save_network(network: FlightNetwork, path: Union[str, Path]) -> Path:
    """Write the network snapshot as UTF-8 JSON, creating parent directories."""

    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(encode_snapshot(take_snapshot(network)), encoding="utf-8")
    LOGGER.info("Saved network snapshot to %s", target)
    return target


def load_network(
    path: Union[str, Path], *, cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH
) -> FlightNetwork:
    """Read a snapshot file and restore it. Missing files raise ``FileNotFoundError``."""

    source = Path(path).expanduser()
    snapshot = decode_snapshot(source.read_bytes())
    LOGGER.info("Loaded network snapshot from %s", source)
    return restore_snapshot(snapshot, cruise_speed_kmh=cruise_speed_kmh)
