import io
import unittest

from html4vocab import DTD, ElementDefinition, element_stub, element_stubs, write_stubs

EXPECTED_A = """\
    public static Element A(Object... contents)
    {
        return element("a", contents);
    }
"""


class TestStubs(unittest.TestCase):
    def setUp(self):
        self.elements = {
            "a": ElementDefinition.from_name("A", inline=True, empty=False),
            "br": ElementDefinition.from_name("br", inline=False, empty=True),
            "frame": ElementDefinition.from_name("Frame", inline=False, empty=True, dtd=DTD.FRAMESET),
        }

    def test_element_stub(self):
        self.assertEqual(element_stub(self.elements["a"]), EXPECTED_A)

    def test_method_name_is_uppercase_and_tag_lowercase(self):
        stub = element_stub(self.elements["frame"])
        self.assertIn("public static Element FRAME(Object... contents)", stub)
        self.assertIn('return element("frame", contents);', stub)

    def test_element_stubs_follow_table_order(self):
        text = element_stubs(self.elements)
        self.assertTrue(text.startswith(EXPECTED_A))
        self.assertLess(text.index(" BR("), text.index(" FRAME("))
        self.assertEqual(text.count("public static Element"), 3)

    def test_write_stubs(self):
        out = io.StringIO()
        write_stubs(self.elements, out)
        self.assertEqual(out.getvalue(), element_stubs(self.elements))


if __name__ == "__main__":
    unittest.main()
