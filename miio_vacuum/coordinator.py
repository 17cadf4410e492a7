"""Periodic status polling for vacuum devices."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Any

from .device_types.base import BaseDevice


class VacuumCoordinator:
    """Reload every property of a device on a fixed interval."""

    def __init__(
        self,
        device: BaseDevice,
        *,
        refresh_interval: timedelta | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Bind the device and the event loop used for scheduling."""

        self.device = device
        self.update_interval = refresh_interval or device.config.monitor_interval
        self._loop = loop or asyncio.get_event_loop()
        self._logger = logger or logging.getLogger(__name__)
        self._refresh_task: asyncio.TimerHandle | None = None
        self._pending_tasks: set[asyncio.Task[Any]] = set()
        self.last_update_success = False

    @property
    def _refresh_interval_seconds(self) -> float:
        return self.update_interval.total_seconds()

    async def async_refresh(self) -> dict[str, Any] | None:
        """Poll the device once, logging failures instead of raising."""

        try:
            data = await self.device.async_refresh()
        except Exception as exc:
            self._logger.warning("Polling %s failed: %s", self.device, exc)
            self.last_update_success = False
            return None
        self.last_update_success = True
        return data

    def async_schedule_refresh(self) -> asyncio.TimerHandle:
        """Start polling every ``update_interval``."""

        def _wrapper() -> None:
            task = self._loop.create_task(self.async_refresh())
            self._pending_tasks.add(task)
            task.add_done_callback(self._pending_tasks.discard)
            self._refresh_task = self._loop.call_later(
                self._refresh_interval_seconds, _wrapper
            )

        if self._refresh_task is not None:
            self._refresh_task.cancel()
        self._refresh_task = self._loop.call_later(
            self._refresh_interval_seconds, _wrapper
        )
        return self._refresh_task

    def cancel_refresh(self) -> None:
        """Stop polling."""

        if self._refresh_task is not None:
            self._refresh_task.cancel()
            self._refresh_task = None
