"""Table parsers for the HTML 4.01 reference documents.

Each parser issues one query against its document, folds the matched rows (or
``<pre>`` blocks) into a dict and returns it as a read-only mapping sorted by
name. A row that does not have the expected shape raises a
StructuralMismatch and the whole table is abandoned.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol, TypeVar

from lxml import html as lxml_html

from .definitions import WILDCARD, AttributeDefinition, AttributeType, CharacterDefinition, ElementDefinition
from .dtd import DTD, classify
from .errors import CellNotFoundError, ScopeDeclarationError

logger = logging.getLogger(__name__)

CHARACTERS_RESOURCE = "characters.html"
ELEMENTS_RESOURCE = "elements.html"
ATTRIBUTES_RESOURCE = "attributes.html"

# Rows of the index tables are the <tr>s whose first cell is the "Name" column
ROW_QUERY = "//tr[td[1]/@title='Name']"
ENTITY_BLOCK_QUERY = "//pre"

ENTITY_PATTERN = re.compile(r'<!ENTITY ([A-Za-z0-9]+) +CDATA "&#([0-9]+);"')

# HTML 4.01 DTD, %inline; minus #PCDATA
FONTSTYLE: frozenset[str] = frozenset({"TT", "I", "B", "BIG", "SMALL"})
PHRASE: frozenset[str] = frozenset({"EM", "STRONG", "DFN", "CODE", "SAMP", "KBD", "VAR", "CITE", "ABBR", "ACRONYM"})
SPECIAL: frozenset[str] = frozenset({"A", "IMG", "OBJECT", "BR", "SCRIPT", "MAP", "Q", "SUB", "SUP", "SPAN", "BDO"})
FORMCTRL: frozenset[str] = frozenset({"INPUT", "SELECT", "TEXTAREA", "LABEL", "BUTTON"})

# BR and SCRIPT are formatted on their own lines
INLINE_ELEMENTS: frozenset[str] = (FONTSTYLE | PHRASE | SPECIAL | FORMCTRL) - {"BR", "SCRIPT"}

EMPTY_MARKER = "E"
NUMBER_MARKER = "NUMBER"

_ELEMENT_NAMES = r"([A-Z0-9]+(?:, ?[A-Z0-9]+)*)"
INCLUSIVE_SCOPE = re.compile(rf"^{_ELEMENT_NAMES}$", re.IGNORECASE)
EXCLUSIVE_SCOPE = re.compile(rf"^All elements but {_ELEMENT_NAMES}$", re.IGNORECASE)
_NAME_SEPARATOR = re.compile(r",\s*")
_WHITESPACE_RUN = re.compile(r"\s+")


class NodeSource(Protocol):
    def load_nodes(self, resource_name: str, query: str) -> list[lxml_html.HtmlElement]: ...


V = TypeVar("V")


def _sorted_table(table: dict[str, V]) -> Mapping[str, V]:
    return MappingProxyType(dict(sorted(table.items())))


def cell_value(row: lxml_html.HtmlElement, index: int) -> str:
    """Return the stripped text of the row's index-th element child.

    Text, comments and processing instructions between cells are not counted.

    Raises:
        CellNotFoundError: If the row has no element child at that position
    """
    cells = [child for child in row if isinstance(child.tag, str)]
    if index < 0 or index >= len(cells):
        raise CellNotFoundError(index)
    return cells[index].text_content().strip()


def is_inline(name: str) -> bool:
    return name.upper() in INLINE_ELEMENTS


def parse_characters(source: NodeSource) -> Mapping[str, CharacterDefinition]:
    # The HTML 4 tables leave out the XML entity &apos;
    characters: dict[str, CharacterDefinition] = {"apos": CharacterDefinition("apos", ord("'"))}

    for pre in source.load_nodes(CHARACTERS_RESOURCE, ENTITY_BLOCK_QUERY):
        found = 0
        for match in ENTITY_PATTERN.finditer(pre.text_content()):
            name, code = match.groups()
            characters[name] = CharacterDefinition(name, int(code))
            found += 1
        if not found:
            logger.warning("<pre> block in %s declares no character entities", CHARACTERS_RESOURCE)

    logger.debug("parsed %d character entities", len(characters))
    return _sorted_table(characters)


def parse_elements(source: NodeSource) -> Mapping[str, ElementDefinition]:
    elements: dict[str, ElementDefinition] = {}

    for row in source.load_nodes(ELEMENTS_RESOURCE, ROW_QUERY):
        name = cell_value(row, 0)
        empty = cell_value(row, 3)
        dtd = cell_value(row, 5)

        definition = ElementDefinition.from_name(name, is_inline(name), empty == EMPTY_MARKER, classify(dtd))
        if definition.lowercase in elements:
            logger.debug("element %s listed more than once; keeping the last row", definition.uppercase)
        elements[definition.lowercase] = definition

    logger.debug("parsed %d elements", len(elements))
    return _sorted_table(elements)


def attribute_type(name: str, type_code: str) -> AttributeType:
    """Presence-only attributes are declared as their own name in parentheses."""
    if type_code == f"({name})":
        return AttributeType.BOOLEAN
    if type_code == NUMBER_MARKER:
        return AttributeType.NUMBER
    return AttributeType.STRING


def element_names(names: str) -> list[str]:
    return [name.lower() for name in _NAME_SEPARATOR.split(names)]


def scope_entries(
    scope: str, attr_type: AttributeType, dtd: DTD
) -> tuple[dict[str, AttributeType | None], dict[str, DTD | None]]:
    """Expand a scope declaration into per-element type and DTD entries.

    Raises:
        ScopeDeclarationError: If the declaration matches neither form
    """
    normalized = _WHITESPACE_RUN.sub(" ", scope.strip())
    types: dict[str, AttributeType | None] = {}
    dtds: dict[str, DTD | None] = {}

    match = INCLUSIVE_SCOPE.match(normalized)
    if match:
        for element in element_names(match.group(1)):
            types[element] = attr_type
            dtds[element] = dtd
        return types, dtds

    match = EXCLUSIVE_SCOPE.match(normalized)
    if match:
        types[WILDCARD] = attr_type
        dtds[WILDCARD] = dtd
        for element in element_names(match.group(1)):
            types[element] = None
            dtds[element] = None
        return types, dtds

    raise ScopeDeclarationError(scope)


def parse_attributes(source: NodeSource) -> Mapping[str, AttributeDefinition]:
    attributes: dict[str, AttributeDefinition] = {}

    for row in source.load_nodes(ATTRIBUTES_RESOURCE, ROW_QUERY):
        name = cell_value(row, 0).lower()
        scope = cell_value(row, 1)
        type_code = cell_value(row, 2)
        dtd_code = cell_value(row, 5)

        types, dtds = scope_entries(scope, attribute_type(name, type_code), classify(dtd_code))
        definition = AttributeDefinition(name, types, dtds)

        # The same attribute is described by one row per group of elements
        previous = attributes.get(name)
        if previous is not None:
            definition = previous.merged_with(definition)
        attributes[name] = definition

    logger.debug("parsed %d attributes", len(attributes))
    return _sorted_table(attributes)
