"""Mini README: FastAPI-powered control panel for Flightnet.

Structure:
    * create_application - application factory wiring the network endpoints.
    * Network state - one ``FlightNetwork`` owned by the application instance.

The interface exposes every graph operation (airports, routes, path search),
a GeoJSON map feed with optional path highlighting, and snapshot save/load
against the configured data directory. Handlers are coroutines so they all
run on the event loop thread, which serialises access to the network.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import JSONResponse

from ..configuration import FlightnetSettings, get_settings
from ..logging_utils import get_logger
from ..network import (
    Airport,
    FlightNetwork,
    Metric,
    Route,
    build_demo_network,
    find_path,
    summarise_path,
)
from ..persistence import SnapshotError, load_network, save_network
from ..utils.geojson import network_to_geojson

LOGGER = get_logger(__name__)


def _airport_payload(airport: Airport) -> Dict[str, object]:
    return {
        "code": airport.code,
        "name": airport.name,
        "country": airport.country,
        "latitude": airport.latitude,
        "longitude": airport.longitude,
        "label": str(airport),
    }


def _route_payload(route: Route) -> Dict[str, object]:
    return {
        "origin": route.origin,
        "destination": route.destination,
        "cost": route.cost,
        "distance_km": route.distance_km,
        "duration_hours": route.duration_hours,
    }


def _parse_metric(metric: str) -> Metric:
    try:
        return Metric.from_str(metric)
    except ValueError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def create_application(
    network: Optional[FlightNetwork] = None,
    settings: Optional[FlightnetSettings] = None,
) -> FastAPI:
    """Create the FastAPI application around a single network instance."""

    settings = settings or get_settings()
    if network is None:
        if settings.seed_demo_network:
            network = build_demo_network(cruise_speed_kmh=settings.cruise_speed_kmh)
        else:
            network = FlightNetwork(cruise_speed_kmh=settings.cruise_speed_kmh)

    app = FastAPI(title="Flightnet Control Panel", version="0.1.0")
    app.state.network = network
    app.state.settings = settings
    LOGGER.debug("Created application with %s airports", len(network))

    def current_network(request: Request) -> FlightNetwork:
        return request.app.state.network

    @app.get("/airports")
    async def list_airports(request: Request) -> JSONResponse:
        """Return all airports sorted by code for stable UI lists."""

        airports = sorted(current_network(request).list_airports(), key=lambda a: a.code)
        return JSONResponse({"airports": [_airport_payload(airport) for airport in airports]})

    @app.post("/airports")
    async def add_airport(
        request: Request,
        code: str = Form(...),
        name: str = Form(...),
        country: str = Form(...),
        latitude: float = Form(..., ge=-90.0, le=90.0),
        longitude: float = Form(..., ge=-180.0, le=180.0),
    ) -> JSONResponse:
        """Register an airport. Codes are upper-cased as typed by operators."""

        airport = Airport(
            code=code.strip().upper(),
            name=name,
            country=country,
            latitude=latitude,
            longitude=longitude,
        )
        if not current_network(request).add_airport(airport):
            raise HTTPException(
                status_code=400, detail=f"Airport {airport.code} already exists"
            )
        return JSONResponse({"airport": _airport_payload(airport)}, status_code=201)

    @app.delete("/airports/{code}")
    async def remove_airport(request: Request, code: str) -> JSONResponse:
        """Remove an airport together with every route touching it."""

        if not current_network(request).remove_airport(code):
            raise HTTPException(status_code=404, detail=f"Airport {code} not found")
        return JSONResponse({"removed": code})

    @app.get("/airports/{code}/routes")
    async def routes_from(request: Request, code: str) -> JSONResponse:
        """List outgoing routes, empty for airports without any."""

        routes = current_network(request).routes_from(code)
        return JSONResponse({"origin": code, "routes": [_route_payload(r) for r in routes]})

    @app.post("/routes")
    async def add_route(
        request: Request,
        origin: str = Form(...),
        destination: str = Form(...),
        cost: float = Form(...),
    ) -> JSONResponse:
        """Create a route; distance and duration are derived by the network."""

        network = current_network(request)
        if not network.add_route(origin, destination, cost):
            raise HTTPException(
                status_code=400,
                detail=f"Cannot add route {origin} -> {destination}: unknown airport",
            )
        route = network.routes_from(origin)[-1]
        return JSONResponse({"route": _route_payload(route)}, status_code=201)

    @app.delete("/routes")
    async def remove_route(request: Request, origin: str, destination: str) -> JSONResponse:
        """Remove all routes between the ordered airport pair."""

        if not current_network(request).remove_route(origin, destination):
            raise HTTPException(
                status_code=404, detail=f"No route {origin} -> {destination} to remove"
            )
        return JSONResponse({"removed": {"origin": origin, "destination": destination}})

    @app.get("/find-path")
    async def search_path(
        request: Request,
        start: str,
        end: str,
        metric: str = "cost",
        direct_only: bool = False,
    ) -> JSONResponse:
        """Return the best path and its totals, or 404 when none exists."""

        chosen = _parse_metric(metric)
        path = find_path(current_network(request), start, end, chosen, direct_only)
        if path is None:
            raise HTTPException(status_code=404, detail="No route found")
        summary = summarise_path(path)
        payload = summary.as_dict()
        payload["description"] = summary.describe()
        payload["metric"] = chosen.value
        payload["direct_only"] = direct_only
        return JSONResponse(payload)

    @app.get("/map")
    async def network_map(
        request: Request,
        start: Optional[str] = None,
        end: Optional[str] = None,
        metric: str = "cost",
        direct_only: bool = False,
    ) -> JSONResponse:
        """Return the network as GeoJSON, highlighting a path when requested."""

        network = current_network(request)
        highlight: List[Route] = []
        if start and end:
            highlight = find_path(network, start, end, _parse_metric(metric), direct_only) or []
        return JSONResponse(network_to_geojson(network, highlight=highlight))

    @app.post("/snapshot/save")
    async def save_snapshot(request: Request) -> JSONResponse:
        """Persist the network to the configured snapshot file."""

        network = current_network(request)
        path = save_network(network, settings.snapshot_path)
        return JSONResponse(
            {
                "path": str(path),
                "airports": len(network),
                "routes": len(network.all_routes()),
            }
        )

    @app.post("/snapshot/load")
    async def load_snapshot(request: Request) -> JSONResponse:
        """Replace the network with the configured snapshot file."""

        try:
            network = load_network(settings.snapshot_path, cruise_speed_kmh=settings.cruise_speed_kmh)
        except FileNotFoundError as error:
            raise HTTPException(
                status_code=404, detail=f"No snapshot at {settings.snapshot_path}"
            ) from error
        except SnapshotError as error:
            LOGGER.warning("Rejected snapshot %s: %s", settings.snapshot_path, error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        request.app.state.network = network
        return JSONResponse(
            {
                "path": str(settings.snapshot_path),
                "airports": len(network),
                "routes": len(network.all_routes()),
            }
        )

    return app
