"""Mini README: Persistence helpers for Flightnet.

Networks are stored as explicit JSON snapshots rather than pickled object
graphs so files stay readable and stable across releases.
"""

from .snapshot import (
    AirportRecord,
    NetworkSnapshot,
    RouteRecord,
    SnapshotError,
    decode_snapshot,
    encode_snapshot,
    load_network,
    restore_snapshot,
    save_network,
    take_snapshot,
)

__all__ = [
    "AirportRecord",
    "NetworkSnapshot",
    "RouteRecord",
    "SnapshotError",
    "decode_snapshot",
    "encode_snapshot",
    "load_network",
    "restore_snapshot",
    "save_network",
    "take_snapshot",
]
