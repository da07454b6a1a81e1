"""Mini README: Core package initializer for Flightnet.

Flightnet models a flight network as airports (nodes) joined by directed,
weighted routes (edges). The package is split into ``geo`` for the
great-circle maths, ``network`` for the graph store and path search,
``persistence`` for snapshots, ``utils`` for map exports and ``interface``
for the web control panel.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
