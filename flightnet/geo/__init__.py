"""Mini README: Geodesic helpers for Flightnet.

Exports the great-circle distance used to derive route distances and the
duration helper that converts distances into flight hours.
"""

from .distance import (
    DEFAULT_CRUISE_SPEED_KMH,
    EARTH_RADIUS_KM,
    flight_duration_hours,
    great_circle_distance_km,
)

__all__ = [
    "DEFAULT_CRUISE_SPEED_KMH",
    "EARTH_RADIUS_KM",
    "flight_duration_hours",
    "great_circle_distance_km",
]
