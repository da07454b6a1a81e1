"""Mini README: Shortest path search across the flight network.

Structure:
    * Metric - edge weight selector (ticket cost or great-circle distance).
    * find_path - Dijkstra search returning the routes to fly, or ``None``.
    * PathSummary - totals folded over a returned path for display.

``find_path`` works on whatever the network holds at call time and keeps no
state between calls. Unknown airports and unreachable destinations both
produce ``None`` rather than an exception. Edge weights are assumed to be
non-negative.

With ``direct_only`` the search only relaxes routes landing on the
destination, so the only path it can ever find is a single direct hop.
"""

from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from ..logging_utils import get_logger
from .graph import FlightNetwork, Route

LOGGER = get_logger(__name__)


class Metric(str, Enum):
    """Enumerate the supported edge weights."""

    COST = "cost"
    DISTANCE = "distance"

    @classmethod
    def from_str(cls, value: Union[str, "Metric"]) -> "Metric":
        """Coerce arbitrary casing into a valid metric."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported metric: {value}") from error

    def weight(self, route: Route) -> float:
        """Return the weight of ``route`` under this metric."""

        if self is Metric.COST:
            return route.cost
        return route.distance_km


def find_path(
    network: FlightNetwork,
    start: str,
    end: str,
    metric: Union[Metric, str] = Metric.COST,
    direct_only: bool = False,
) -> Optional[List[Route]]:
    """Return the cheapest sequence of routes from ``start`` to ``end``."""

    metric = Metric.from_str(metric)
    if not network.has_airport(start) or not network.has_airport(end):
        LOGGER.debug("Path search %s -> %s skipped: unknown airport", start, end)
        return None

    best: Dict[str, float] = {airport.code: math.inf for airport in network.list_airports()}
    best[start] = 0.0
    previous_route: Dict[str, Route] = {}
    visited: Set[str] = set()
    # Sequence number keeps equal-distance entries in push order.
    counter = itertools.count()
    frontier: List[Tuple[float, int, str]] = [(0.0, next(counter), start)]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in visited:
            continue
        visited.add(current)
        if current == end:
            break
        for route in network.routes_from(current):
            if direct_only and route.destination != end:
                continue
            candidate = best[current] + metric.weight(route)
            if candidate < best.get(route.destination, math.inf):
                best[route.destination] = candidate
                previous_route[route.destination] = route
                heapq.heappush(frontier, (candidate, next(counter), route.destination))

    if end not in previous_route:
        LOGGER.info(
            "No route found %s -> %s (metric=%s, direct_only=%s)",
            start,
            end,
            metric.value,
            direct_only,
        )
        return None

    path: List[Route] = []
    cursor = end
    while cursor != start:
        route = previous_route[cursor]
        path.append(route)
        cursor = route.origin
    path.reverse()
    LOGGER.info(
        "Found %s-hop path %s -> %s with %s %.2f",
        len(path),
        start,
        end,
        metric.value,
        best[end],
    )
    return path


@dataclass(slots=True)
class PathSummary:
    """Aggregate totals of a path returned by ``find_path``."""

    routes: List[Route]
    total_cost: float
    total_distance_km: float
    total_duration_hours: float

    @property
    def hops(self) -> int:
        return len(self.routes)

    @property
    def stops(self) -> List[str]:
        """Airport codes visited in order, including both endpoints."""

        if not self.routes:
            return []
        return [self.routes[0].origin] + [route.destination for route in self.routes]

    def describe(self) -> str:
        return (
            f"Total: ${self.total_cost:.2f}, {self.total_distance_km:.1f} km, "
            f"{self.total_duration_hours:.1f} h"
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the summary with serialisable values."""

        return {
            "stops": self.stops,
            "hops": self.hops,
            "total_cost": self.total_cost,
            "total_distance_km": self.total_distance_km,
            "total_duration_hours": self.total_duration_hours,
            "routes": [
                {
                    "origin": route.origin,
                    "destination": route.destination,
                    "cost": route.cost,
                    "distance_km": route.distance_km,
                    "duration_hours": route.duration_hours,
                }
                for route in self.routes
            ],
        }


def summarise_path(routes: Sequence[Route]) -> PathSummary:
    """Fold cost, distance and duration over a path."""

    routes = list(routes)
    return PathSummary(
        routes=routes,
        total_cost=sum(route.cost for route in routes),
        total_distance_km=sum(route.distance_km for route in routes),
        total_duration_hours=sum(route.duration_hours for route in routes),
    )
