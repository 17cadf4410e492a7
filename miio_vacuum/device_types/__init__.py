"""Device type implementations."""

from .base import BaseDevice
from .vacuum import VacuumDevice

__all__ = [
    "BaseDevice",
    "VacuumDevice",
]
