"""Mini README: Utility helpers shared by Flightnet modules."""

from .geojson import network_bounds, network_to_geojson

__all__ = ["network_bounds", "network_to_geojson"]
