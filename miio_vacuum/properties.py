"""Declarative mapping from raw device fields to semantic properties."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .exceptions import PropertyDefinitionError

Transform = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True, slots=True)
class PropertyDefinition:
    """Describe how one raw field is exposed to callers."""

    raw_key: str
    name: str
    transform: Transform = field(default=_identity, compare=False)

    def apply(self, raw_value: Any) -> Any:
        """Return the semantic value for ``raw_value``.

        A missing raw value stays ``None``; transforms only see values from
        the device's declared domain.
        """

        if raw_value is None:
            return None
        return self.transform(raw_value)


class PropertyTable:
    """Registry of property definitions keyed by raw field name."""

    def __init__(self) -> None:
        """Start with an empty table."""

        self._definitions: dict[str, PropertyDefinition] = {}
        self._reverse: dict[str, str] = {}

    def define(
        self,
        raw_key: str,
        name: str | None = None,
        transform: Transform | None = None,
    ) -> PropertyDefinition:
        """Register ``raw_key`` under the semantic ``name``."""

        semantic_name = name or raw_key
        if raw_key in self._definitions:
            raise PropertyDefinitionError(f"Raw key {raw_key!r} is already defined")
        if semantic_name in self._reverse:
            raise PropertyDefinitionError(
                f"Property name {semantic_name!r} is already defined"
            )
        definition = PropertyDefinition(
            raw_key=raw_key,
            name=semantic_name,
            transform=transform or _identity,
        )
        self._definitions[raw_key] = definition
        self._reverse[semantic_name] = raw_key
        return definition

    def raw_key_for(self, name: str) -> str:
        """Translate a semantic name back to its raw key.

        Unknown names are returned unchanged so raw fields can be queried
        directly.
        """

        return self._reverse.get(name, name)

    def definition(self, raw_key: str) -> PropertyDefinition | None:
        """Return the definition registered for ``raw_key``."""

        return self._definitions.get(raw_key)

    def project(self, raw_key: str, raw_value: Any) -> tuple[str, Any]:
        """Return the ``(name, value)`` pair exposed for a raw field."""

        definition = self._definitions.get(raw_key)
        if definition is None:
            return raw_key, raw_value
        return definition.name, definition.apply(raw_value)

    @property
    def names(self) -> tuple[str, ...]:
        """Return every semantic name in declaration order."""

        return tuple(self._reverse)

    @property
    def definitions(self) -> dict[str, PropertyDefinition]:
        """Return a copy of the raw key to definition mapping."""

        return dict(MappingProxyType(self._definitions))

    def __contains__(self, raw_key: object) -> bool:
        return raw_key in self._definitions

    def __iter__(self) -> Iterator[PropertyDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
