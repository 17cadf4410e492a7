"""Property projection and command layer for miIO robot vacuums."""

from __future__ import annotations

from .capabilities import (
    AdjustableFanSpeed,
    AutonomousCleaning,
    BatteryLevel,
    Capability,
    ChargingState,
    ErrorState,
)
from .config import VacuumConfig, load_config
from .coordinator import VacuumCoordinator
from .device_types import BaseDevice, VacuumDevice
from .dispatcher import CommandDispatcher, RefreshDirective
from .exceptions import CommandRejectedError, PropertyDefinitionError, TransportError
from .properties import PropertyDefinition, PropertyTable
from .snapshot import Snapshot, SnapshotLoader
from .state import DeviceError, VacuumState
from .transport import HttpRpcTransport, Transport, check_result

__all__ = [
    "AdjustableFanSpeed",
    "AutonomousCleaning",
    "BaseDevice",
    "BatteryLevel",
    "Capability",
    "ChargingState",
    "CommandDispatcher",
    "CommandRejectedError",
    "DeviceError",
    "ErrorState",
    "HttpRpcTransport",
    "PropertyDefinition",
    "PropertyDefinitionError",
    "PropertyTable",
    "RefreshDirective",
    "Snapshot",
    "SnapshotLoader",
    "Transport",
    "TransportError",
    "VacuumConfig",
    "VacuumCoordinator",
    "VacuumDevice",
    "VacuumState",
    "check_result",
    "load_config",
]
