"""Mi Robot Vacuum support.

The vacuum has no ``get_prop`` call; its properties are read from the
``get_status`` and ``get_consumable`` replies instead.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from ..capabilities import (
    AdjustableFanSpeed,
    AutonomousCleaning,
    BatteryLevel,
    ChargingState,
    ErrorState,
)
from ..config import VacuumConfig
from ..dispatcher import RefreshDirective, Sleep
from ..history import (
    CleaningHistory,
    HistoryDay,
    parse_clean_summary,
    parse_history_day,
    to_timestamp,
)
from ..properties import Transform
from ..state import map_area, map_error, map_state
from ..transport import Transport
from .base import BaseDevice

_LOGGER = logging.getLogger(__name__)

_PROPERTY_SPEC: tuple[tuple[str, str | None, Transform | None], ...] = (
    ("error_code", "error", map_error),
    ("state", None, map_state),
    ("battery", "batteryLevel", None),
    ("clean_time", "cleanTime", None),
    ("clean_area", "cleanArea", map_area),
    ("fan_power", "fanSpeed", None),
    ("in_cleaning", None, None),
    # Consumables, wear time of brushes and filters
    ("main_brush_work_time", "mainBrushWorkTime", None),
    ("side_brush_work_time", "sideBrushWorkTime", None),
    ("filter_work_time", "filterWorkTime", None),
    ("sensor_dirty_time", "sensorDirtyTime", None),
    ("water_box_mode", "waterBoxMode", None),
    ("auto_dust_collection", "autoDustCollection", None),
    ("dust_collection_status", "dustCollectionStatus", None),
)


class VacuumDevice(BaseDevice):
    """Robot vacuum speaking the miIO ``app_*`` command set."""

    device_type = "miio:vacuum"

    def __init__(
        self,
        transport: Transport,
        *,
        config: VacuumConfig | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Declare the vacuum properties and capabilities."""

        super().__init__(transport, config=config, sleep=sleep)
        self._sleep = sleep or asyncio.sleep
        for raw_key, name, transform in _PROPERTY_SPEC:
            self.table.define(raw_key, name, transform)

        self.add_capability(BatteryLevel())
        self.add_capability(ChargingState())
        self.add_capability(AutonomousCleaning())
        self.add_capability(ErrorState())
        self.add_capability(AdjustableFanSpeed())

    def _refresh_state(self) -> RefreshDirective:
        return RefreshDirective(("state",), self.config.refresh_delay)

    def _refresh_setting(self, name: str) -> RefreshDirective:
        return RefreshDirective((name,), self.config.setting_refresh_delay)

    async def async_get_device_info(self) -> Any:
        """Return the ``miIO.info`` payload."""

        return await self.async_call("miIO.info", check=False)

    async def async_get_serial_number(self) -> str:
        """Return the serial number printed on the device."""

        result = await self.async_call("get_serial_number", check=False)
        return result[0]["serial_number"]

    async def async_get_room_map(self) -> Any:
        """Return the mapping between segment ids and rooms."""

        return await self.async_call("get_room_mapping", check=False)

    async def async_get_timer(self) -> Any:
        """Return the scheduled cleaning timers."""

        return await self.async_call("get_timer", check=False)

    async def async_activate_cleaning(self) -> Any:
        """Start a cleaning session."""

        return await self.async_call("app_start", [], self._refresh_state())

    async def async_pause(self) -> Any:
        """Pause the current cleaning session."""

        return await self.async_call("app_pause", [], self._refresh_state())

    async def async_deactivate_cleaning(self) -> Any:
        """Stop the current cleaning session."""

        return await self.async_call("app_stop", [], self._refresh_state())

    async def async_activate_charging(self) -> Any:
        """Stop cleaning and return to the dock.

        Docking straight from an active clean is unreliable, so the job is
        paused (or stopped when it cannot be paused) and the device gets a
        moment to settle before ``app_charge`` is sent.
        """

        try:
            await self.async_pause()
        except Exception as exc:
            _LOGGER.debug("Pause failed (%s), stopping cleaning instead", exc)
            await self.async_deactivate_cleaning()
        await self._sleep(self.config.charge_settle_delay.total_seconds())
        return await self.async_call("app_charge", [], self._refresh_state())

    async def async_activate_spot_clean(self) -> Any:
        """Start cleaning the current spot."""

        return await self.async_call("app_spot", [], self._refresh_setting("state"))

    async def async_clean_rooms(self, rooms: Sequence[int]) -> Any:
        """Clean the given room segments."""

        return await self.async_call(
            "app_segment_clean", list(rooms), self._refresh_state()
        )

    async def async_resume_clean_rooms(self, rooms: Sequence[int]) -> Any:
        """Resume a paused segment clean."""

        return await self.async_call(
            "resume_segment_clean", list(rooms), self._refresh_state()
        )

    async def async_clean_zones(self, zones: Sequence[Any]) -> Any:
        """Clean rectangular zones.

        Each zone is ``[x1, y1, x2, y2, passes]`` in map coordinates; a single
        zone may be passed on its own. Maps are 51200 x 51200 with the dock
        at the centre (25600, 25600).
        """

        return await self.async_call(
            "app_zoned_clean", list(zones), self._refresh_state()
        )

    async def async_send_to_location(self, x: int, y: int) -> Any:
        """Drive to the map coordinate ``(x, y)``."""

        return await self.async_call("app_goto_target", [x, y], self._refresh_state())

    async def async_start_dust_collection(self) -> Any:
        """Empty the dustbin into the dock."""

        return await self.async_call(
            "app_start_collect_dust", [], self._refresh_state()
        )

    async def async_stop_dust_collection(self) -> Any:
        """Stop emptying the dustbin."""

        return await self.async_call("app_stop_collect_dust", [], self._refresh_state())

    async def async_change_fan_speed(self, speed: int) -> Any:
        """Set the fan power, usually 38, 60 or 77."""

        return await self.async_call(
            "set_custom_mode", [speed], self._refresh_setting("fanSpeed")
        )

    async def async_get_water_box_mode(self) -> Any:
        """Return the water box mode (S6 and later)."""

        result = await self.async_call(
            "get_water_box_custom_mode",
            [],
            self._refresh_setting("waterBoxMode"),
            check=False,
        )
        return result[0]

    async def async_set_water_box_mode(self, mode: int) -> Any:
        """Set the water box mode (S6 and later)."""

        return await self.async_call(
            "set_water_box_custom_mode", [mode], self._refresh_setting("waterBoxMode")
        )

    async def async_find(self) -> None:
        """Make the device play its locator sound."""

        await self.async_call("find_me", [""], check=False)

    async def async_get_history(self) -> CleaningHistory:
        """Return the run count and the days the device has cleaned on."""

        result = await self.async_call("get_clean_summary", check=False)
        return parse_clean_summary(result)

    async def async_get_history_for_day(self, day: datetime | int) -> HistoryDay:
        """Return the runs recorded on ``day``, as listed by the summary."""

        result = await self.async_call(
            "get_clean_record", [to_timestamp(day)], check=False
        )
        return parse_history_day(day, result)

