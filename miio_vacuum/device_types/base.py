"""Device model shared by the concrete device types."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from ..capabilities import Capability, CapabilityRegistry
from ..config import VacuumConfig
from ..dispatcher import CommandDispatcher, RefreshDirective, Sleep
from ..projector import StateProjector
from ..properties import PropertyTable
from ..snapshot import PropertyObserver, Snapshot, SnapshotLoader
from ..transport import Transport

C = TypeVar("C", bound=Capability)


class BaseDevice:
    """Own the snapshot of a device and wire its processing pipeline.

    Property changes are delivered first to the state projector, then to the
    capabilities, then to observers added with :meth:`add_property_observer`.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        config: VacuumConfig | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Create the empty snapshot and the components that share it."""

        self.config = config or VacuumConfig()
        self.table = PropertyTable()
        self.snapshot = Snapshot()
        self._capabilities = CapabilityRegistry()
        self._transport = transport
        self._loader = SnapshotLoader(
            transport,
            self.table,
            self.snapshot,
            status_method=self.config.status_method,
            consumable_method=self.config.consumable_method,
        )
        self._dispatcher = CommandDispatcher(
            transport,
            self._loader,
            default_refresh_delay=self.config.refresh_delay,
            sleep=sleep,
        )
        self._projector = StateProjector(self.snapshot, self._capabilities)
        self.snapshot.add_observer(self._projector.property_updated)
        self.snapshot.add_observer(self._capabilities.property_updated)

    def add_capability(self, capability: C) -> C:
        """Register a capability on this device."""

        return self._capabilities.add(capability)

    def capability(self, kind: type[C]) -> C | None:
        """Return the capability of type ``kind`` if the device carries it."""

        return self._capabilities.get(kind)

    def has_capability(self, name: str) -> bool:
        """Return True when the device carries the capability ``name``."""

        return self._capabilities.has(name)

    @property
    def capabilities(self) -> dict[str, Capability]:
        """Return a mapping of capability name to instance."""

        return self._capabilities.capabilities

    def add_property_observer(self, observer: PropertyObserver) -> Callable[[], None]:
        """Observe property changes after capabilities have been updated."""

        return self.snapshot.add_observer(observer)

    def get_property(self, name: str) -> Any:
        """Return the current value of the semantic property ``name``."""

        return self.snapshot.get(name)

    @property
    def properties(self) -> dict[str, Any]:
        """Return a copy of every known property value."""

        return self.snapshot.as_dict()

    async def async_load_properties(self, names: Sequence[str]) -> dict[str, Any]:
        """Load ``names`` from the device into the snapshot."""

        return await self._loader.async_load(names)

    async def async_refresh(self, names: Sequence[str] | None = None) -> dict[str, Any]:
        """Reload ``names``, or every defined property when omitted."""

        return await self._loader.async_load(
            list(self.table.names if names is None else names)
        )

    async def async_call(
        self,
        method: str,
        args: Sequence[Any] = (),
        refresh: RefreshDirective | None = None,
        *,
        check: bool = True,
    ) -> Any:
        """Send a command through the dispatcher."""

        return await self._dispatcher.async_invoke(method, args, refresh, check=check)

    async def async_wait_for_refreshes(self) -> None:
        """Wait for refreshes scheduled by earlier commands."""

        await self._dispatcher.async_wait_for_refreshes()
