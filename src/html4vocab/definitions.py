from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .dtd import DTD

WILDCARD = "*"


class AttributeType(enum.Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class CharacterDefinition:
    """A named character entity and its decimal codepoint."""

    name: str
    value: int

    @property
    def char(self) -> str:
        return chr(self.value)


@dataclass(frozen=True)
class ElementDefinition:
    lowercase: str
    uppercase: str
    inline: bool
    empty: bool
    dtd: DTD = DTD.STRICT

    @classmethod
    def from_name(cls, name: str, inline: bool, empty: bool, dtd: DTD = DTD.STRICT) -> ElementDefinition:
        return cls(name.lower(), name.upper(), inline, empty, dtd)


def _freeze(mapping: Mapping[str, object]) -> MappingProxyType:
    return MappingProxyType(dict(sorted(mapping.items())))


@dataclass(frozen=True)
class AttributeDefinition:
    """An attribute with its type and DTD per element.

    Keys are lowercase element names or WILDCARD. A value of None on a
    concrete element means the attribute explicitly does not apply there,
    overriding the wildcard.
    """

    name: str
    types_by_element: Mapping[str, AttributeType | None] = field(default_factory=dict)
    dtds_by_element: Mapping[str, DTD | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "types_by_element", _freeze(self.types_by_element))
        object.__setattr__(self, "dtds_by_element", _freeze(self.dtds_by_element))

    @property
    def elements(self) -> list[str]:
        """Concrete element keys, wildcard excluded."""
        return [key for key in self.types_by_element if key != WILDCARD]

    def _lookup(self, table: Mapping[str, object], element: str) -> object:
        element = element.lower()
        if element in table:
            return table[element]
        return table.get(WILDCARD)

    def type_for(self, element: str) -> AttributeType | None:
        """Resolve the attribute's type on an element, or None if it does not apply."""
        result = self._lookup(self.types_by_element, element)
        return result if isinstance(result, AttributeType) else None

    def dtd_for(self, element: str) -> DTD | None:
        result = self._lookup(self.dtds_by_element, element)
        return result if isinstance(result, DTD) else None

    def applies_to(self, element: str) -> bool:
        return self.type_for(element) is not None

    def merged_with(self, other: AttributeDefinition) -> AttributeDefinition:
        """Union of both definitions; per element, entries from `other` win."""
        types = {**self.types_by_element, **other.types_by_element}
        dtds = {**self.dtds_by_element, **other.dtds_by_element}
        return AttributeDefinition(self.name, types, dtds)
