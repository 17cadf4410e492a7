"""Pytest configuration for the vacuum adapter tests."""

from __future__ import annotations

import asyncio
import inspect
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

root_path = Path(__file__).resolve().parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))


class FakeTransport:
    """Transport double replying from canned results and recording calls."""

    def __init__(self) -> None:
        """Start with an empty status and consumable payload."""

        self.calls: list[tuple[str, list[Any]]] = []
        self.status: dict[str, Any] = {}
        self.consumables: dict[str, Any] = {}
        self.replies: dict[str, Any] = {}
        self.failures: dict[str, Exception] = {}

    async def call(self, method: str, args: Sequence[Any] = ()) -> Any:
        """Record the call, then fail or reply as configured."""

        self.calls.append((method, list(args)))
        await asyncio.sleep(0)
        if method in self.failures:
            raise self.failures[method]
        if method == "get_status":
            return [dict(self.status)]
        if method == "get_consumable":
            return [dict(self.consumables)]
        return self.replies.get(method, ["ok"])

    def methods(self) -> list[str]:
        """Return the called method names in order."""

        return [method for method, _args in self.calls]


class RecordingSleep:
    """Sleep double that records delays without waiting."""

    def __init__(self, transport: FakeTransport | None = None) -> None:
        """Optionally interleave sleeps with the transport call log."""

        self.delays: list[float] = []
        self._transport = transport

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self._transport is not None:
            self._transport.calls.append(("<sleep>", [delay]))
        await asyncio.sleep(0)


@pytest.fixture
def transport() -> FakeTransport:
    """Provide a fresh fake transport."""

    return FakeTransport()


@pytest.fixture
def sleep(transport: FakeTransport) -> RecordingSleep:
    """Provide a sleep double that logs into the transport call list."""

    return RecordingSleep(transport)


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute coroutine tests within a dedicated event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    kwargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_function(**kwargs))
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True
