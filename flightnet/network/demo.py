"""Mini README: Deterministic demo network for previews and tests.

The web interface seeds itself with this network when
``FLIGHTNET_SEED_DEMO_NETWORK`` is enabled so operators can try searches
before building their own network.
"""

from __future__ import annotations

from ..geo import DEFAULT_CRUISE_SPEED_KMH
from ..logging_utils import get_logger
from .graph import Airport, FlightNetwork

LOGGER = get_logger(__name__)

DEMO_AIRPORTS = (
    Airport("JFK", "John F. Kennedy International", "United States", 40.64, -73.78),
    Airport("LHR", "London Heathrow", "United Kingdom", 51.47, -0.45),
    Airport("LAX", "Los Angeles International", "United States", 33.94, -118.41),
    Airport("CDG", "Paris Charles de Gaulle", "France", 49.01, 2.55),
    Airport("NRT", "Tokyo Narita", "Japan", 35.77, 140.39),
)

DEMO_ROUTES = (
    ("JFK", "LHR", 500.0),
    ("JFK", "LAX", 400.0),
    ("LAX", "LHR", 450.0),
    ("LHR", "CDG", 120.0),
    ("JFK", "CDG", 650.0),
    ("LAX", "NRT", 700.0),
    ("CDG", "NRT", 820.0),
    ("NRT", "LAX", 690.0),
)


def build_demo_network(*, cruise_speed_kmh: float = DEFAULT_CRUISE_SPEED_KMH) -> FlightNetwork:
    """Return a small transatlantic and transpacific network."""

    network = FlightNetwork(cruise_speed_kmh=cruise_speed_kmh)
    for airport in DEMO_AIRPORTS:
        network.add_airport(airport)
    for origin, destination, cost in DEMO_ROUTES:
        network.add_route(origin, destination, cost)
    LOGGER.debug(
        "Built demo network with %s airports and %s routes",
        len(DEMO_AIRPORTS),
        len(DEMO_ROUTES),
    )
    return network
