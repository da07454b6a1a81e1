"""Mini README: Great-circle distance utilities.

Structure:
    * great_circle_distance_km - haversine distance on a spherical Earth.
    * flight_duration_hours - converts a distance into hours at cruise speed.

Route distances in the graph store come exclusively from
``great_circle_distance_km`` so the same coordinates always yield the same
double precision result.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0
DEFAULT_CRUISE_SPEED_KMH = 800.0


def great_circle_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the haversine distance in kilometres between two coordinates.

    Inputs are decimal degrees. NaN inputs propagate to a NaN result.
    """

    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(delta_lat / 2) * math.sin(delta_lat / 2)
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(delta_lon / 2)
        * math.sin(delta_lon / 2)
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def flight_duration_hours(
    distance_km: float, cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH
) -> float:
    """Approximate block time for a distance flown at constant cruise speed."""

    return distance_km / cruise_speed_kmh
