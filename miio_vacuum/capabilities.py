"""Capabilities a device can carry and the hooks that update them."""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from .state import DeviceError

C = TypeVar("C", bound="Capability")

CapabilityListener = Callable[[Any], None]


class Capability:
    """Base class for a named bundle of device behaviour."""

    name: ClassVar[str] = "capability"

    def __init__(self) -> None:
        """Prepare listener storage."""

        self._listeners: list[CapabilityListener] = []

    def add_listener(self, listener: CapabilityListener) -> Callable[[], None]:
        """Call ``listener`` with the new value whenever it changes."""

        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _emit(self, value: Any) -> None:
        for listener in list(self._listeners):
            listener(value)

    def property_updated(self, key: str, value: Any, old_value: Any) -> None:
        """Observe a raw property change; most capabilities ignore them."""


class ChargingState(Capability):
    """Whether the device is currently charging."""

    name = "charging-state"

    def __init__(self) -> None:
        super().__init__()
        self.charging = False

    def update_charging(self, charging: bool) -> None:
        """Store the charging flag, notifying on change."""

        if charging == self.charging:
            return
        self.charging = charging
        self._emit(charging)


class AutonomousCleaning(Capability):
    """Whether the device is running a cleaning job."""

    name = "autonomous-cleaning"

    def __init__(self) -> None:
        super().__init__()
        self.cleaning = False

    def update_cleaning(self, cleaning: bool) -> None:
        """Store the cleaning flag, notifying on change."""

        if cleaning == self.cleaning:
            return
        self.cleaning = cleaning
        self._emit(cleaning)


class ErrorState(Capability):
    """The fault the device currently reports, if any."""

    name = "error-state"

    def __init__(self) -> None:
        super().__init__()
        self.error: DeviceError | None = None

    def update_error(self, error: DeviceError | None) -> None:
        """Store ``error``, notifying on change."""

        if error == self.error:
            return
        self.error = error
        self._emit(error)


class AdjustableFanSpeed(Capability):
    """Suction power level of the fan."""

    name = "adjustable-fan-speed"

    def __init__(self) -> None:
        super().__init__()
        self.fan_speed: int | None = None

    def update_fan_speed(self, fan_speed: int | None) -> None:
        """Store the fan speed, notifying on change."""

        if fan_speed == self.fan_speed:
            return
        self.fan_speed = fan_speed
        self._emit(fan_speed)


class BatteryLevel(Capability):
    """Battery charge in percent, read from the ``batteryLevel`` property."""

    name = "battery-level"

    def __init__(self) -> None:
        super().__init__()
        self.battery_level: int | None = None

    def property_updated(self, key: str, value: Any, old_value: Any) -> None:
        if key != "batteryLevel" or value == self.battery_level:
            return
        self.battery_level = value
        self._emit(value)


class CapabilityRegistry:
    """Named capabilities carried by one device."""

    def __init__(self) -> None:
        """Start without capabilities."""

        self._capabilities: dict[str, Capability] = {}

    def add(self, capability: C) -> C:
        """Register ``capability`` under its name."""

        self._capabilities[capability.name] = capability
        return capability

    def get(self, kind: type[C]) -> C | None:
        """Return the registered capability of type ``kind``."""

        capability = self._capabilities.get(kind.name)
        if isinstance(capability, kind):
            return capability
        return None

    def has(self, name: str) -> bool:
        """Return True when a capability called ``name`` is registered."""

        return name in self._capabilities

    @property
    def capabilities(self) -> dict[str, Capability]:
        """Return a mapping of capability name to instance."""

        return dict(MappingProxyType(self._capabilities))

    def property_updated(self, key: str, value: Any, old_value: Any) -> None:
        """Forward a property change to every capability in order."""

        for capability in list(self._capabilities.values()):
            capability.property_updated(key, value, old_value)
