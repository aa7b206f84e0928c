from .definitions import WILDCARD, AttributeDefinition, AttributeType, CharacterDefinition, ElementDefinition
from .dtd import DTD, classify
from .errors import (
    CellNotFoundError,
    QueryError,
    ResourceNotFoundError,
    ScopeDeclarationError,
    StructuralMismatch,
    VocabularyError,
)
from .loader import DocumentLoader
from .parsers import cell_value, parse_attributes, parse_characters, parse_elements
from .stubs import element_stub, element_stubs, write_stubs
from .vocabulary import Vocabulary, attributes, characters, default_vocabulary, elements

__all__ = [
    "DTD",
    "WILDCARD",
    "AttributeDefinition",
    "AttributeType",
    "CellNotFoundError",
    "CharacterDefinition",
    "DocumentLoader",
    "ElementDefinition",
    "QueryError",
    "ResourceNotFoundError",
    "ScopeDeclarationError",
    "StructuralMismatch",
    "Vocabulary",
    "VocabularyError",
    "attributes",
    "cell_value",
    "characters",
    "classify",
    "default_vocabulary",
    "element_stub",
    "element_stubs",
    "elements",
    "parse_attributes",
    "parse_characters",
    "parse_elements",
    "write_stubs",
]
