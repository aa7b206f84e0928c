import tempfile
import unittest
from pathlib import Path

import html4vocab
from html4vocab import CellNotFoundError, DocumentLoader, QueryError, ResourceNotFoundError
from html4vocab.loader import parse_document
from html4vocab.parsers import ENTITY_BLOCK_QUERY, ROW_QUERY, cell_value

INDEX = """<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN">
<html><head><title>Index</title></head>
<body>
<p>Legend: Deprecated, Loose DTD
<table border="1">
<thead>
<tr><th title="Name">Name<th title="Empty">Empty</tr>
</thead>
<tbody>
<tr><td title="Name"><a href="#BR">BR</a><td title="Empty">E
<tr><td title="Name"><a href="#P">P</a><td title="Empty">&nbsp;
<tr><td title="Note">no name<td title="Name">misplaced
</tbody>
</table>
<pre>&lt;!ENTITY nbsp CDATA "&amp;#160;"&gt;</pre>
<div><pre>second block</pre></div>
</body>
</html>
"""


class TestParseDocument(unittest.TestCase):
    def setUp(self):
        self.root = parse_document(INDEX)

    def test_row_query_selects_rows_named_in_first_cell(self):
        rows = self.root.xpath(ROW_QUERY)
        self.assertEqual([cell_value(row, 0) for row in rows], ["BR", "P"])

    def test_omitted_end_tags_keep_cells_in_their_rows(self):
        rows = self.root.xpath(ROW_QUERY)
        self.assertEqual([cell_value(row, 1) for row in rows], ["E", ""])
        with self.assertRaises(CellNotFoundError):
            cell_value(rows[0], 2)

    def test_entity_blocks_are_decoded(self):
        blocks = self.root.xpath(ENTITY_BLOCK_QUERY)
        self.assertEqual(len(blocks), 2)
        self.assertEqual(blocks[0].text_content(), '<!ENTITY nbsp CDATA "&#160;">')

    def test_cells_skip_comments(self):
        row = parse_document("<table><tr><td>a</td><!-- b --><td>c</td></tr></table>").xpath("//tr")[0]
        self.assertEqual(len(row), 3)
        self.assertEqual(cell_value(row, 1), "c")


class TestDocumentLoader(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.directory = Path(self._tmp.name)
        (self.directory / "index.html").write_text(INDEX, encoding="utf-8")
        self.loader = DocumentLoader(self.directory)

    def test_load_nodes(self):
        rows = self.loader.load_nodes("index.html", ROW_QUERY)
        self.assertEqual(len(rows), 2)
        self.assertEqual(len(self.loader.load_nodes("index.html", "//pre")), 2)

    def test_document_is_parsed_once(self):
        self.assertIs(self.loader.load("index.html"), self.loader.load("index.html"))

    def test_invalid_query(self):
        with self.assertRaises(QueryError) as cm:
            self.loader.load_nodes("index.html", "//tr[td[1]")
        self.assertEqual(cm.exception.query, "//tr[td[1]")
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIn("Not a valid XPath query", str(cm.exception))

    def test_missing_document(self):
        with self.assertRaises(ResourceNotFoundError) as cm:
            self.loader.load_nodes("missing.html", "//pre")
        self.assertTrue(str(cm.exception).endswith("missing.html"))

    def test_bundled_documents(self):
        loader = DocumentLoader()
        self.assertEqual(repr(loader), "DocumentLoader('html4vocab.data')")
        self.assertEqual(len(loader.load_nodes("elements.html", ROW_QUERY)), 91)
        self.assertEqual(len(loader.load_nodes("characters.html", ENTITY_BLOCK_QUERY)), 3)



class TestPublicNames(unittest.TestCase):
    def test_exports_resolve(self):
        for name in html4vocab.__all__:
            self.assertTrue(hasattr(html4vocab, name), name)

    def test_nodes_are_queried_through_the_loader_only(self):
        self.assertNotIn("query", html4vocab.__all__)
        self.assertNotIn("matches", html4vocab.__all__)
        self.assertFalse(hasattr(html4vocab, "SelectorError"))

if __name__ == "__main__":
    unittest.main()
