"""Issue device commands and refresh the properties they affect."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .snapshot import SnapshotLoader
from .transport import Transport, check_result

_LOGGER = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class RefreshDirective:
    """Properties to reload once a command had time to take effect.

    ``delay`` of ``None`` uses the dispatcher's default delay.
    """

    properties: tuple[str, ...]
    delay: timedelta | None = None

    def __post_init__(self) -> None:
        if self.delay is not None and self.delay < timedelta(0):
            raise ValueError("Refresh delay cannot be negative")


class CommandDispatcher:
    """Call the transport and schedule follow-up property refreshes."""

    def __init__(
        self,
        transport: Transport,
        loader: SnapshotLoader,
        *,
        default_refresh_delay: timedelta = timedelta(seconds=1),
        sleep: Sleep | None = None,
    ) -> None:
        """Bind the transport and the loader used for refreshes."""

        self._transport = transport
        self._loader = loader
        self._default_refresh_delay = default_refresh_delay
        self._sleep = sleep or asyncio.sleep
        self._pending_refreshes: set[asyncio.Task[Any]] = set()

    @property
    def pending_refreshes(self) -> int:
        """Return how many refreshes have not finished yet."""

        return len(self._pending_refreshes)

    async def async_invoke(
        self,
        method: str,
        args: Sequence[Any] = (),
        refresh: RefreshDirective | None = None,
        *,
        check: bool = True,
    ) -> Any:
        """Call ``method`` and return its result.

        Transport failures propagate before any refresh is scheduled. With
        ``check`` the reply goes through :func:`check_result`, which raises
        when the device rejects the command.
        """

        _LOGGER.debug("Calling %s with %s", method, args)
        result = await self._transport.call(method, list(args))
        if refresh is not None:
            self._schedule_refresh(refresh)
        if check:
            return check_result(result)
        return result

    async def async_wait_for_refreshes(self) -> None:
        """Wait until every scheduled refresh has completed."""

        while self._pending_refreshes:
            await asyncio.gather(*self._pending_refreshes, return_exceptions=True)

    def _schedule_refresh(self, refresh: RefreshDirective) -> None:
        delay = (
            refresh.delay if refresh.delay is not None else self._default_refresh_delay
        )
        _LOGGER.debug(
            "Refreshing %s in %.3fs", list(refresh.properties), delay.total_seconds()
        )
        task = asyncio.create_task(self._async_refresh(refresh.properties, delay))
        self._pending_refreshes.add(task)
        task.add_done_callback(self._refresh_done)

    async def _async_refresh(
        self, properties: tuple[str, ...], delay: timedelta
    ) -> None:
        await self._sleep(delay.total_seconds())
        await self._loader.async_load(properties)

    def _refresh_done(self, task: asyncio.Task[Any]) -> None:
        self._pending_refreshes.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _LOGGER.warning("Refreshing properties after a command failed: %s", exc)
