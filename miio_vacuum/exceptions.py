"""Exceptions raised by the vacuum adapter."""

from __future__ import annotations

from typing import Any


class TransportError(RuntimeError):
    """Raised when the RPC transport cannot complete a call."""


class CommandRejectedError(RuntimeError):
    """Raised when the device answers a command with a non-success result."""

    def __init__(self, result: Any) -> None:
        """Keep the raw device reply for callers that want to inspect it."""

        super().__init__(f"Could not perform operation, device replied {result!r}")
        self.result = result


class PropertyDefinitionError(ValueError):
    """Raised when a property table is declared with conflicting entries."""
