import unittest

from interval_quiz.core.markdown_renderer import MarkdownRenderer


class TestMarkdownRenderer(unittest.TestCase):
    def setUp(self):
        self.renderer = MarkdownRenderer()

    def test_empty_text_placeholder(self):
        self.assertIn("No content provided", self.renderer.render_fragment("   "))

    def test_prompt_with_sharp_is_not_a_heading(self):
        fragment = self.renderer.render_fragment("C# is the 2nd of which note?")
        self.assertIn("<p>C# is the 2nd of which note?</p>", fragment)

    def test_tables_enabled(self):
        fragment = self.renderer.render_fragment("| a | b |\n|---|---|\n| 1 | 2 |")
        self.assertIn("<table>", fragment)
        self.assertIn("<td>1</td>", fragment)

    def test_raw_html_escaped(self):
        fragment = self.renderer.render_fragment("<script>alert(1)</script>")
        self.assertNotIn("<script>", fragment)

    def test_full_document_uses_font_size(self):
        document = self.renderer.render_full_document("**hi**", title="Round <1>", font_size=20)
        self.assertTrue(document.startswith("<!doctype html>"))
        self.assertIn("font-size: 20pt", document)
        self.assertIn("<strong>hi</strong>", document)
        self.assertIn("Round &lt;1&gt;", document)


if __name__ == "__main__":
    unittest.main()
