"""Error types and message definitions for vocabulary extraction.

A structural mismatch means a reference document no longer has the shape the
table parsers were written against. It is never recovered from: the table
being built is abandoned and the error propagates to the caller.
"""

from __future__ import annotations


def generate_error_message(code: str, detail: str | None = None) -> str:
    """Generate a human-readable error message from an error code.

    Args:
        code: The error code string (kebab-case format)
        detail: Optional context (cell text, resource name, index) for the message

    Returns:
        Human-readable error message string
    """
    messages = {
        "missing-cell": f"Table row has no cell at position {detail}",
        "unrecognized-scope": f"Attribute scope matches neither an element list nor 'All elements but ...': {detail!r}",
        "resource-not-found": f"Reference document not found: {detail}",
        "invalid-query": f"Not a valid XPath query: {detail!r}",
    }
    return messages.get(code, code)


class VocabularyError(Exception):
    """Base class for every error raised while building the vocabulary."""


class ResourceNotFoundError(VocabularyError):
    def __init__(self, resource_name: str) -> None:
        self.resource_name = resource_name
        super().__init__(generate_error_message("resource-not-found", resource_name))


class QueryError(VocabularyError, ValueError):
    """A node query handed to the document loader is not valid XPath."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(generate_error_message("invalid-query", query))


class StructuralMismatch(VocabularyError, ValueError):
    """A row or cell does not have the shape the parser expects."""

    code: str = "structural-mismatch"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        self.message = generate_error_message(self.code, detail)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.detail!r})"


class CellNotFoundError(StructuralMismatch, LookupError):
    code = "missing-cell"

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(str(index))


class ScopeDeclarationError(StructuralMismatch):
    code = "unrecognized-scope"
