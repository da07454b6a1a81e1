"""Mini README: Flight network graph and path search.

Exports the graph store, its value types and the shortest path search so
interfaces and scripts can build networks and query them without knowing
the module layout.
"""

from .demo import build_demo_network
from .graph import Airport, FlightNetwork, Route
from .path_finder import Metric, PathSummary, find_path, summarise_path

__all__ = [
    "Airport",
    "FlightNetwork",
    "Metric",
    "PathSummary",
    "Route",
    "build_demo_network",
    "find_path",
    "summarise_path",
]
