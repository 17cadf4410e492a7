"""Semantic property snapshot and the loader that fills it."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .exceptions import TransportError
from .properties import PropertyTable
from .transport import Transport

_LOGGER = logging.getLogger(__name__)

PropertyObserver = Callable[[str, Any, Any], None]


class Snapshot:
    """Current semantic property values of one device."""

    def __init__(self) -> None:
        """Start empty with no observers."""

        self._values: dict[str, Any] = {}
        self._observers: list[PropertyObserver] = []

    def add_observer(self, observer: PropertyObserver) -> Callable[[], None]:
        """Append ``observer`` and return a callback that removes it."""

        self._observers.append(observer)

        def _remove() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _remove

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of ``name`` or ``default``."""

        return self._values.get(name, default)

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of every known value."""

        return dict(MappingProxyType(self._values))

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def apply(self, values: Mapping[str, Any]) -> list[str]:
        """Write ``values`` and notify observers about the keys that changed.

        All values are stored before the first notification so observers
        always read a consistent snapshot.
        """

        changes: list[tuple[str, Any, Any]] = []
        for key, value in values.items():
            known = key in self._values
            old_value = self._values.get(key)
            self._values[key] = value
            if not known or old_value != value:
                changes.append((key, value, old_value))

        for key, value, old_value in changes:
            for observer in list(self._observers):
                observer(key, value, old_value)
        return [key for key, _value, _old in changes]


def _first_payload(method: str, result: Any) -> Mapping[str, Any]:
    """Unwrap the one-element list the device replies with."""

    if isinstance(result, Mapping):
        return result
    if isinstance(result, Sequence) and not isinstance(result, str | bytes) and result:
        payload = result[0]
        if isinstance(payload, Mapping):
            return payload
    raise TransportError(f"Unexpected reply to {method}: {result!r}")


class SnapshotLoader:
    """Fetch status and consumable data and project it into a snapshot."""

    def __init__(
        self,
        transport: Transport,
        table: PropertyTable,
        snapshot: Snapshot,
        *,
        status_method: str = "get_status",
        consumable_method: str = "get_consumable",
    ) -> None:
        """Bind the transport, definitions and the snapshot to write into."""

        self._transport = transport
        self._table = table
        self._snapshot = snapshot
        self._status_method = status_method
        self._consumable_method = consumable_method

    async def async_fetch(self, names: Sequence[str]) -> dict[str, Any]:
        """Return the projected values for ``names`` without storing them."""

        raw_keys = [self._table.raw_key_for(name) for name in names]
        status_result, consumable_result = await asyncio.gather(
            self._transport.call(self._status_method, []),
            self._transport.call(self._consumable_method, []),
        )
        status = _first_payload(self._status_method, status_result)
        consumables = _first_payload(self._consumable_method, consumable_result)

        mapped: dict[str, Any] = {}
        for raw_key in raw_keys:
            if raw_key in status:
                raw_value = status[raw_key]
            else:
                raw_value = consumables.get(raw_key)
            name, value = self._table.project(raw_key, raw_value)
            mapped[name] = value
        return mapped

    async def async_load(self, names: Sequence[str]) -> dict[str, Any]:
        """Fetch ``names``, store them in the snapshot and return them."""

        mapped = await self.async_fetch(names)
        _LOGGER.debug("Loaded properties %s", mapped)
        self._snapshot.apply(mapped)
        return mapped
