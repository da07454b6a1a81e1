"""Mini README: In-memory graph store for the flight network.

Structure:
    * Airport - immutable node keyed by its case-sensitive code.
    * Route - immutable directed edge carrying cost, distance and duration.
    * FlightNetwork - owns airports and per-origin adjacency lists.

The store never raises on bad input: mutators return ``True`` when the
network changed and ``False`` otherwise, logging the reason at debug level.
Removing an airport cascades to every route that departs from or lands on
it, so adjacency lists never reference unknown airports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from ..geo import DEFAULT_CRUISE_SPEED_KMH, flight_duration_hours, great_circle_distance_km
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Airport:
    """Airport node with display metadata and coordinates in degrees."""

    code: str
    name: str
    country: str
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.code} ({self.name}, {self.country})"


@dataclass(frozen=True, slots=True)
class Route:
    """Directed flight between two airport codes."""

    origin: str
    destination: str
    cost: float
    distance_km: float
    duration_hours: float

    def __str__(self) -> str:
        return (
            f"{self.origin} -> {self.destination} | ${self.cost} | "
            f"{self.distance_km:.1f} km | {self.duration_hours:.1f} h"
        )


class FlightNetwork:
    """Airports plus the outgoing routes of each airport."""

    def __init__(self, *, cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH) -> None:
        self.cruise_speed_kmh = cruise_speed_kmh
        self._airports: Dict[str, Airport] = {}
        self._routes: Dict[str, List[Route]] = {}
        LOGGER.debug("Initialised FlightNetwork with cruise speed %s km/h", cruise_speed_kmh)

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(list(self._airports.values()))

    def add_airport(self, airport: Optional[Airport]) -> bool:
        """Insert an airport unless it is missing or its code is taken."""

        if airport is None:
            LOGGER.debug("Rejected empty airport payload")
            return False
        if airport.code in self._airports:
            LOGGER.debug("Rejected duplicate airport code '%s'", airport.code)
            return False
        self._airports[airport.code] = airport
        LOGGER.info("Added airport %s", airport)
        return True

    def remove_airport(self, code: str) -> bool:
        """Remove an airport and every route touching it."""

        if code not in self._airports:
            LOGGER.debug("Cannot remove unknown airport '%s'", code)
            return False
        del self._airports[code]
        dropped = len(self._routes.pop(code, []))
        for origin, routes in self._routes.items():
            kept = [route for route in routes if route.destination != code]
            dropped += len(routes) - len(kept)
            self._routes[origin] = kept
        LOGGER.info("Removed airport %s and %s connected routes", code, dropped)
        return True

    def add_route(self, origin: str, destination: str, cost: float) -> bool:
        """Create a route, deriving distance and duration from the endpoints."""

        source = self._airports.get(origin)
        target = self._airports.get(destination)
        if source is None or target is None:
            LOGGER.debug("Cannot add route %s -> %s: unknown endpoint", origin, destination)
            return False
        distance = great_circle_distance_km(
            source.latitude, source.longitude, target.latitude, target.longitude
        )
        route = Route(
            origin=origin,
            destination=destination,
            cost=cost,
            distance_km=distance,
            duration_hours=flight_duration_hours(distance, self.cruise_speed_kmh),
        )
        self._routes.setdefault(origin, []).append(route)
        LOGGER.info("Added route %s", route)
        return True

    def insert_route(self, route: Route) -> bool:
        """Append a route with pre-computed metrics, e.g. restored from a snapshot."""

        if route.origin not in self._airports or route.destination not in self._airports:
            LOGGER.debug(
                "Cannot insert route %s -> %s: unknown endpoint", route.origin, route.destination
            )
            return False
        self._routes.setdefault(route.origin, []).append(route)
        return True

    def remove_route(self, origin: str, destination: str) -> bool:
        """Remove every route from ``origin`` landing on ``destination``."""

        routes = self._routes.get(origin)
        if routes is None:
            LOGGER.debug("Cannot remove route: '%s' has no outgoing routes", origin)
            return False
        kept = [route for route in routes if route.destination != destination]
        self._routes[origin] = kept
        removed = len(routes) - len(kept)
        if removed:
            LOGGER.info("Removed %s route(s) %s -> %s", removed, origin, destination)
        return removed > 0

    def get_airport(self, code: str) -> Optional[Airport]:
        return self._airports.get(code)

    def has_airport(self, code: str) -> bool:
        return code in self._airports

    def list_airports(self) -> List[Airport]:
        """Return all airports. Callers must not rely on the ordering."""

        return list(self._airports.values())

    def routes_from(self, code: str) -> List[Route]:
        """Return outgoing routes in insertion order, empty for unknown codes."""

        return list(self._routes.get(code, ()))

    def all_routes(self) -> List[Route]:
        """Flatten every adjacency list, grouped by origin."""

        return [route for routes in self._routes.values() for route in routes]
