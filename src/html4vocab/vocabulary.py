"""The three vocabulary tables, built once and shared read-only."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import NamedTuple

from .definitions import AttributeDefinition, CharacterDefinition, ElementDefinition
from .loader import DocumentLoader
from .parsers import NodeSource, parse_attributes, parse_characters, parse_elements

logger = logging.getLogger(__name__)


class _Tables(NamedTuple):
    characters: Mapping[str, CharacterDefinition]
    elements: Mapping[str, ElementDefinition]
    attributes: Mapping[str, AttributeDefinition]


class Vocabulary:
    """Owns a document source and the tables parsed from it.

    Nothing is parsed until a table is first requested. The first request
    builds all three tables under a lock and publishes them together; if any
    parser raises, nothing is published and the error propagates.
    """

    __slots__ = ("_lock", "_tables", "source")

    source: NodeSource
    _tables: _Tables | None

    def __init__(self, source: NodeSource | None = None) -> None:
        self.source = source if source is not None else DocumentLoader()
        self._tables = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        state = "loaded" if self.loaded else "not loaded"
        return f"<Vocabulary {self.source!r} ({state})>"

    @property
    def loaded(self) -> bool:
        return self._tables is not None

    def _build(self) -> _Tables:
        tables = self._tables
        if tables is not None:
            return tables
        with self._lock:
            tables = self._tables
            if tables is None:
                characters = parse_characters(self.source)
                elements = parse_elements(self.source)
                attributes = parse_attributes(self.source)
                tables = _Tables(characters, elements, attributes)
                self._tables = tables
                logger.debug(
                    "vocabulary loaded: %d characters, %d elements, %d attributes",
                    len(characters),
                    len(elements),
                    len(attributes),
                )
            return tables

    def load(self) -> Vocabulary:
        self._build()
        return self

    @property
    def characters(self) -> Mapping[str, CharacterDefinition]:
        return self._build().characters

    @property
    def elements(self) -> Mapping[str, ElementDefinition]:
        return self._build().elements

    @property
    def attributes(self) -> Mapping[str, AttributeDefinition]:
        return self._build().attributes


_default: Vocabulary | None = None
_default_lock = threading.Lock()


def default_vocabulary() -> Vocabulary:
    """Process-wide vocabulary over $HTML4VOCAB_RESOURCES or the bundled documents."""
    global _default
    with _default_lock:
        if _default is None:
            _default = Vocabulary(DocumentLoader.from_environment())
    return _default


def characters() -> Mapping[str, CharacterDefinition]:
    return default_vocabulary().characters


def elements() -> Mapping[str, ElementDefinition]:
    return default_vocabulary().elements


def attributes() -> Mapping[str, AttributeDefinition]:
    return default_vocabulary().attributes
