"""Render templating-API method stubs from element definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TextIO

from .definitions import ElementDefinition

ELEMENT_TEMPLATE = """\
    public static Element {method}(Object... contents)
    {{
        return element("{tag}", contents);
    }}
"""


def element_stub(definition: ElementDefinition) -> str:
    """The factory method for one element: upper-case method name, lower-case tag."""
    return ELEMENT_TEMPLATE.format(method=definition.uppercase, tag=definition.lowercase)


def element_stubs(elements: Mapping[str, ElementDefinition]) -> str:
    return "".join(element_stub(elements[name]) for name in elements)


def write_stubs(elements: Mapping[str, ElementDefinition], stream: TextIO) -> None:
    for name in elements:
        stream.write(element_stub(elements[name]))
