"""Mini README: Interactive interfaces for Flightnet.

Exports the FastAPI application factory that powers the control panel. The
command-line entry point lives in ``flight_network_cli.py`` at the
repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
