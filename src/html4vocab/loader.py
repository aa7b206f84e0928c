"""Load reference documents and answer XPath queries against them."""

from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path

from lxml import etree
from lxml import html as lxml_html

from .errors import QueryError, ResourceNotFoundError

logger = logging.getLogger(__name__)

RESOURCES_ENV_VAR = "HTML4VOCAB_RESOURCES"
DATA_PACKAGE = "html4vocab.data"


def parse_document(text: str) -> lxml_html.HtmlElement:
    """Parse HTML 4 source into its root element.

    libxml2's HTML parser closes the end tags HTML 4 leaves optional
    (``</td>``, ``</tr>``, ``</p>``), so every cell ends up inside its row.
    """
    return lxml_html.document_fromstring(text)


class DocumentLoader:
    """Opens named reference documents and runs XPath queries over them.

    Documents come from the bundled ``html4vocab.data`` package unless
    ``resource_dir`` is given. Each document is parsed at most once per loader.
    """

    __slots__ = ("_documents", "resource_dir")

    resource_dir: Path | None
    _documents: dict[str, lxml_html.HtmlElement]

    def __init__(self, resource_dir: str | os.PathLike[str] | None = None) -> None:
        self.resource_dir = Path(resource_dir) if resource_dir is not None else None
        self._documents = {}

    @classmethod
    def from_environment(cls) -> DocumentLoader:
        """Use $HTML4VOCAB_RESOURCES when set, the bundled documents otherwise."""
        return cls(os.environ.get(RESOURCES_ENV_VAR) or None)

    def __repr__(self) -> str:
        source = str(self.resource_dir) if self.resource_dir is not None else DATA_PACKAGE
        return f"DocumentLoader({source!r})"

    def read_text(self, resource_name: str) -> str:
        if self.resource_dir is not None:
            path = self.resource_dir / resource_name
            if not path.is_file():
                raise ResourceNotFoundError(str(path))
            return path.read_text(encoding="utf-8")

        resource = resources.files(DATA_PACKAGE).joinpath(resource_name)
        if not resource.is_file():
            raise ResourceNotFoundError(resource_name)
        return resource.read_text(encoding="utf-8")

    def load(self, resource_name: str) -> lxml_html.HtmlElement:
        """Return the parsed root element of a resource."""
        document = self._documents.get(resource_name)
        if document is None:
            logger.debug("parsing %s from %r", resource_name, self)
            document = parse_document(self.read_text(resource_name))
            self._documents[resource_name] = document
        return document

    def load_nodes(self, resource_name: str, query: str) -> list[lxml_html.HtmlElement]:
        """Return the elements of a resource selected by an XPath query, in document order.

        Raises:
            ResourceNotFoundError: If the document does not exist
            QueryError: If the query is not valid XPath
        """
        document = self.load(resource_name)
        try:
            return document.xpath(query)
        except etree.XPathError as exc:
            raise QueryError(query) from exc
