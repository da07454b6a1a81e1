"""Mini README: GeoJSON export of the flight network for map rendering.

This module converts a network into a FeatureCollection of airport points
and route lines, optionally flagging the routes of a found path so map
clients can highlight them. Keeping the logic isolated avoids importing web
framework dependencies when running unit tests or reusing the helper in
scripts.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from ..network.graph import FlightNetwork, Route


def _airport_feature(airport) -> Dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [airport.longitude, airport.latitude]},
        "properties": {
            "kind": "airport",
            "code": airport.code,
            "name": airport.name,
            "country": airport.country,
            "label": str(airport),
        },
    }


def _route_feature(network: FlightNetwork, route: Route, highlighted: bool) -> Optional[Dict]:
    origin = network.get_airport(route.origin)
    destination = network.get_airport(route.destination)
    if origin is None or destination is None:
        return None
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [
                [origin.longitude, origin.latitude],
                [destination.longitude, destination.latitude],
            ],
        },
        "properties": {
            "kind": "route",
            "origin": route.origin,
            "destination": route.destination,
            "cost": route.cost,
            "distance_km": route.distance_km,
            "duration_hours": route.duration_hours,
            "highlighted": highlighted,
        },
    }


def network_to_geojson(
    network: FlightNetwork, highlight: Optional[Iterable[Route]] = None
) -> Dict:
    """Return a FeatureCollection with airports and routes.

    Routes that are the very objects listed in ``highlight`` (as returned by
    ``find_path``) carry ``highlighted: true``; identical parallel routes do not.
    Airports are emitted sorted by code so output is stable.
    """

    highlighted_ids = {id(route) for route in highlight or ()}
    airports = sorted(network.list_airports(), key=lambda airport: airport.code)
    features: List[Dict] = [_airport_feature(airport) for airport in airports]
    for airport in airports:
        for route in network.routes_from(airport.code):
            feature = _route_feature(network, route, id(route) in highlighted_ids)
            if feature is not None:
                features.append(feature)
    collection: Dict = {"type": "FeatureCollection", "features": features}
    bounds = network_bounds(network)
    if bounds is not None:
        lat_min, lon_min, lat_max, lon_max = bounds
        collection["bbox"] = [lon_min, lat_min, lon_max, lat_max]
    return collection


def network_bounds(network: FlightNetwork) -> Optional[Tuple[float, float, float, float]]:
    """Return airport bounds as (lat_min, lon_min, lat_max, lon_max), or None when empty."""

    airports = network.list_airports()
    if not airports:
        return None
    lats = [airport.latitude for airport in airports]
    lons = [airport.longitude for airport in airports]
    return (min(lats), min(lons), max(lats), max(lons))
