"""Derive capability state from semantic property changes."""

from __future__ import annotations

import logging
from typing import Any

from .capabilities import (
    AdjustableFanSpeed,
    AutonomousCleaning,
    CapabilityRegistry,
    ChargingState,
    ErrorState,
)
from .snapshot import Snapshot
from .state import CHARGER_OFFLINE, CHARGING_ERROR, CLEANING_STATES, VacuumState

_LOGGER = logging.getLogger(__name__)

_FAULT_STATES = {
    VacuumState.CHARGING_ERROR.value: CHARGING_ERROR,
    VacuumState.CHARGER_OFFLINE.value: CHARGER_OFFLINE,
}


class StateProjector:
    """Translate ``state`` and ``fanSpeed`` changes into capability updates."""

    def __init__(self, snapshot: Snapshot, capabilities: CapabilityRegistry) -> None:
        """Read the shared snapshot and update the device's capabilities."""

        self._snapshot = snapshot
        self._capabilities = capabilities

    def property_updated(self, key: str, value: Any, old_value: Any) -> None:
        """Apply the derived-state rules for one property change."""

        if key == "state":
            _LOGGER.debug("State changed from %s to %s", old_value, value)
            self._project_state(value)
        elif key == "fanSpeed":
            fan = self._capabilities.get(AdjustableFanSpeed)
            if fan is not None:
                fan.update_fan_speed(value)

    def _project_state(self, state: Any) -> None:
        charging = self._capabilities.get(ChargingState)
        if charging is not None:
            charging.update_charging(state == VacuumState.CHARGING)

        if state in (VacuumState.CHARGING, VacuumState.PAUSED):
            return
        self._set_cleaning(state in CLEANING_STATES)

        if state == VacuumState.ERROR:
            self._set_error(self._snapshot.get("error"))
        elif state in _FAULT_STATES:
            self._set_error(_FAULT_STATES[state])

    def _set_cleaning(self, cleaning: bool) -> None:
        capability = self._capabilities.get(AutonomousCleaning)
        if capability is not None:
            capability.update_cleaning(cleaning)

    def _set_error(self, error: Any) -> None:
        capability = self._capabilities.get(ErrorState)
        if capability is not None:
            capability.update_error(error)
