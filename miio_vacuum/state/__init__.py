"""State vocabulary for miIO robot vacuums."""

from .vacuum_states import (
    CHARGER_OFFLINE,
    CHARGING_ERROR,
    CLEANING_STATES,
    STATE_CODES,
    DeviceError,
    VacuumState,
    map_area,
    map_error,
    map_state,
)

__all__ = [
    "VacuumState",
    "DeviceError",
    "STATE_CODES",
    "CLEANING_STATES",
    "CHARGING_ERROR",
    "CHARGER_OFFLINE",
    "map_state",
    "map_error",
    "map_area",
]
