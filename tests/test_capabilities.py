"""Tests for the capability registry and update hooks."""

from miio_vacuum.capabilities import (
    AutonomousCleaning,
    BatteryLevel,
    CapabilityRegistry,
    ChargingState,
    ErrorState,
)
from miio_vacuum.state import DeviceError


def test_listeners_fire_only_on_change() -> None:
    """Repeated values are not re-announced."""

    charging = ChargingState()
    events: list[bool] = []
    remove = charging.add_listener(events.append)

    charging.update_charging(True)
    charging.update_charging(True)
    charging.update_charging(False)
    remove()
    charging.update_charging(True)

    assert events == [True, False]
    assert charging.charging is True


def test_error_state_clears() -> None:
    """Errors can be raised and cleared."""

    errors = ErrorState()
    seen: list[DeviceError | None] = []
    errors.add_listener(seen.append)
    fault = DeviceError(code=3, message="Unknown error 3")

    errors.update_error(fault)
    errors.update_error(DeviceError(code=3, message="Unknown error 3"))
    errors.update_error(None)

    assert seen == [fault, None]


def test_registry_lookup_by_type() -> None:
    """Capabilities are looked up by their class."""

    registry = CapabilityRegistry()
    cleaning = registry.add(AutonomousCleaning())

    assert registry.get(AutonomousCleaning) is cleaning
    assert registry.get(ChargingState) is None
    assert registry.has("autonomous-cleaning")
    assert list(registry.capabilities) == ["autonomous-cleaning"]


def test_registry_forwards_property_updates() -> None:
    """The generic hook reaches capabilities that read raw properties."""

    registry = CapabilityRegistry()
    battery = registry.add(BatteryLevel())

    registry.property_updated("batteryLevel", 42, None)
    registry.property_updated("state", "cleaning", None)

    assert battery.battery_level == 42
