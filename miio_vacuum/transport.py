"""RPC transport contract and an HTTP gateway implementation."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from typing import Any, Protocol

import httpx

from .config import VacuumConfig
from .exceptions import CommandRejectedError, TransportError

_LOGGER = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to perform a miIO remote procedure call."""

    async def call(self, method: str, args: Sequence[Any]) -> Any:
        """Invoke ``method`` on the device and return its raw result."""


def check_result(result: Any) -> Any:
    """Return ``result`` when the device acknowledged the command.

    Devices answer successful commands with ``["ok"]`` or ``0``; any other
    reply is treated as a rejection.
    """

    if result is None or result == 0:
        return result
    if (
        isinstance(result, Sequence)
        and not isinstance(result, str | bytes)
        and result
        and result[0] == "ok"
    ):
        return result
    raise CommandRejectedError(result)


class HttpRpcTransport:
    """Relay miIO JSON-RPC calls through an HTTP gateway."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        """Bind the HTTP client and the gateway endpoint."""

        self._client = client
        self._url = url
        self._ids = itertools.count(1)

    @classmethod
    def from_config(
        cls, client: httpx.AsyncClient, config: VacuumConfig
    ) -> HttpRpcTransport:
        """Build a transport for the gateway named in ``config``."""

        if not config.gateway_url:
            raise ValueError("The config has no gateway_url")
        return cls(client, config.gateway_url)

    async def call(self, method: str, args: Sequence[Any] = ()) -> Any:
        """POST ``method`` to the gateway and unwrap the JSON-RPC reply."""

        request = {"id": next(self._ids), "method": method, "params": list(args)}
        _LOGGER.debug("-> %s", request)
        try:
            response = await self._client.post(self._url, json=request)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportError(f"Call to {method} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(f"Malformed reply to {method}: {exc}") from exc
        _LOGGER.debug("<- %s", payload)
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected reply to {method}: {payload!r}")
        error = payload.get("error")
        if error is not None:
            message = error.get("message") if isinstance(error, dict) else error
            raise TransportError(f"Device rejected {method}: {message}")
        return payload.get("result")
