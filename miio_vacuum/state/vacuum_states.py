"""State codes and fault values reported by the vacuum."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class VacuumState(str, Enum):
    """Semantic labels for the raw ``state`` codes."""

    INITIATING = "initiating"
    CHARGER_OFFLINE = "charger-offline"
    WAITING = "waiting"
    CLEANING = "cleaning"
    RETURNING = "returning"
    CHARGING = "charging"
    CHARGING_ERROR = "charging-error"
    PAUSED = "paused"
    SPOT_CLEANING = "spot-cleaning"
    ERROR = "error"
    SHUTTING_DOWN = "shutting-down"
    UPDATING = "updating"
    DOCKING = "docking"
    GOING_TO_LOCATION = "going-to-location"
    ZONE_CLEANING = "zone-cleaning"
    ROOM_CLEANING = "room-cleaning"
    DUST_COLLECTION = "dust-collection"
    FULL = "full"


STATE_CODES: dict[int, VacuumState] = {
    1: VacuumState.INITIATING,
    2: VacuumState.CHARGER_OFFLINE,
    3: VacuumState.WAITING,
    5: VacuumState.CLEANING,
    6: VacuumState.RETURNING,
    8: VacuumState.CHARGING,
    9: VacuumState.CHARGING_ERROR,
    10: VacuumState.PAUSED,
    11: VacuumState.SPOT_CLEANING,
    12: VacuumState.ERROR,
    13: VacuumState.SHUTTING_DOWN,
    14: VacuumState.UPDATING,
    15: VacuumState.DOCKING,
    16: VacuumState.GOING_TO_LOCATION,
    17: VacuumState.ZONE_CLEANING,
    18: VacuumState.ROOM_CLEANING,
    22: VacuumState.DUST_COLLECTION,
    100: VacuumState.FULL,
}

CLEANING_STATES = frozenset(
    {
        VacuumState.CLEANING.value,
        VacuumState.SPOT_CLEANING.value,
        VacuumState.ZONE_CLEANING.value,
        VacuumState.ROOM_CLEANING.value,
    }
)


class DeviceError(BaseModel):
    """A fault reported by the device, exposed through the ``error`` property."""

    model_config = ConfigDict(frozen=True)

    code: int | str
    message: str


CHARGING_ERROR = DeviceError(code="charging-error", message="Error during charging")
CHARGER_OFFLINE = DeviceError(code="charger-offline", message="Charger is offline")


def map_state(code: int) -> str:
    """Return the label for a raw state code, tagging codes we do not know."""

    state = STATE_CODES.get(code)
    if state is None:
        return f"unknown-{code}"
    return state.value


def map_error(code: int) -> DeviceError | None:
    """Return the fault for a raw error code, ``None`` when there is none."""

    # TODO: replace the generic message once a table of firmware error codes exists
    if code == 0:
        return None
    return DeviceError(code=code, message=f"Unknown error {code}")


def map_area(value: float) -> float:
    """Convert the device's mm² area readings to m²."""

    return value / 1_000_000
