"""
Tests for the block transformer.
"""

import unittest

from minigfm.block_parser import BlockParser


class TestHeaders(unittest.TestCase):
    """Test header conversion."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_header_levels(self):
        """Test headers from level 1 to 6."""
        for level in range(1, 7):
            self.assertEqual(self.parser.parse("#" * level + " Title"), f"<h{level}>Title</h{level}>")

    def test_too_many_hashes(self):
        """Test that seven hashes are not a header."""
        self.assertEqual(self.parser.parse("####### seven"), "<p>####### seven</p>")

    def test_missing_space(self):
        """Test that a header needs a space after the hashes."""
        self.assertEqual(self.parser.parse("#hashtag"), "<p>#hashtag</p>")

    def test_leading_backslash(self):
        """Test that a line starting with a backslash is not a header."""
        self.assertEqual(self.parser.parse("\\# literal"), "<p>\\# literal</p>")


class TestLists(unittest.TestCase):
    """Test list item conversion."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_task_items(self):
        """Test checked and unchecked task items."""
        self.assertEqual(
            self.parser.parse("- [x] done"),
            '<li><input type="checkbox" checked disabled> done</li>',
        )
        self.assertEqual(
            self.parser.parse("* [ ] todo"),
            '<li><input type="checkbox" disabled> todo</li>',
        )
        self.assertEqual(
            self.parser.parse("+ [X] Done"),
            '<li><input type="checkbox" checked disabled> Done</li>',
        )

    def test_unordered_items(self):
        """Test all unordered list markers."""
        self.assertEqual(
            self.parser.parse("- one\n* two\n+ three"),
            "<li>one</li>\n<li>two</li>\n<li>three</li>",
        )

    def test_indented_item(self):
        """Test that indentation before the marker is allowed."""
        self.assertEqual(self.parser.parse("  - nested"), "<li>nested</li>")

    def test_ordered_items_keep_numbers(self):
        """Test that ordered items echo their numeral."""
        self.assertEqual(
            self.parser.parse("1. first\n5. second"),
            "<li>1. first</li>\n<li>5. second</li>",
        )

    def test_bold_line_is_not_item(self):
        """Test that a line starting with bold markup is a paragraph."""
        self.assertEqual(self.parser.parse("**bold** start"), "<p>**bold** start</p>")


class TestHorizontalRule(unittest.TestCase):
    """Test horizontal rule conversion."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_rules(self):
        """Test the different rule spellings."""
        for source in ["---", "***", "___", "- - -", "* * *", "-----", "   ---"]:
            self.assertEqual(self.parser.parse(source), "<hr/>", source)

    def test_mixed_characters_not_rule(self):
        """Test that mixed characters do not form a rule."""
        self.assertEqual(self.parser.parse("-*-"), "<p>-*-</p>")


class TestBlockQuotes(unittest.TestCase):
    """Test block quote conversion."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_simple_quote(self):
        """Test a single level quote."""
        self.assertEqual(self.parser.parse("> quote"), "<blockquote>quote</blockquote>")

    def test_nested_quote(self):
        """Test that the number of markers gives the depth."""
        expected = "<blockquote><blockquote>deep</blockquote></blockquote>"
        self.assertEqual(self.parser.parse(">> deep"), expected)
        self.assertEqual(self.parser.parse("> > deep"), expected)
        self.assertEqual(
            self.parser.parse(">>> deeper"),
            "<blockquote>" * 3 + "deeper" + "</blockquote>" * 3,
        )

    def test_marker_needs_whitespace(self):
        """Test that a marker glued to text does not start a quote."""
        self.assertEqual(self.parser.parse(">deep"), "<p>>deep</p>")
        self.assertEqual(self.parser.parse('<a href="x"\n>link</a>'), '<a href="x"\n>link</a>')

    def test_empty_quote_line_removed(self):
        """Test that quote lines without content disappear."""
        self.assertEqual(self.parser.parse(">"), "")
        self.assertEqual(
            self.parser.parse("> a\n>\n> b"),
            "<blockquote>a</blockquote><br /><blockquote>b</blockquote>",
        )


class TestTables(unittest.TestCase):
    """Test table detection."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_table(self):
        """Test a table with alignment."""
        self.assertEqual(
            self.parser.parse("| A | B |\n|---|:-:|\n| 1 | 2 |"),
            "<table><thead><tr><th>A</th><th align=\"center\">B</th></tr></thead>"
            "<tbody><tr><td>1</td><td align=\"center\">2</td></tr></tbody></table>",
        )

    def test_table_followed_by_paragraph(self):
        """Test that the paragraph after a table stays separate."""
        self.assertEqual(
            self.parser.parse("| A |\n|---|\n| 1 |\n\nAfter"),
            "<table><thead><tr><th>A</th></tr></thead><tbody><tr><td>1</td></tr></tbody></table>"
            "<br /><p>After</p>",
        )

    def test_pipe_without_separator_is_text(self):
        """Test that a pipe alone does not make a table."""
        self.assertEqual(self.parser.parse("a | b\nc | d"), "<p>a | b\nc | d</p>")


class TestParagraphs(unittest.TestCase):
    """Test paragraph wrapping."""

    def setUp(self):
        """Set up test fixtures."""
        self.parser = BlockParser()

    def test_blank_line_splits_paragraphs(self):
        """Test that blank lines separate paragraphs."""
        self.assertEqual(self.parser.parse("First\n\nSecond"), "<p>First</p><br /><p>Second</p>")
        self.assertEqual(self.parser.parse("First\n\n\n\nSecond"), "<p>First</p><br /><p>Second</p>")

    def test_hard_break_splits_paragraphs(self):
        """Test that backslash-newline splits paragraphs."""
        self.assertEqual(self.parser.parse("a\\\nb"), "<p>a</p><br /><p>b</p>")

    def test_single_newline_kept(self):
        """Test that a single newline stays inside the paragraph."""
        self.assertEqual(self.parser.parse("line1\nline2"), "<p>line1\nline2</p>")

    def test_blank_edges_ignored(self):
        """Test that leading and trailing blank lines add no paragraphs."""
        self.assertEqual(self.parser.parse("\n\nText\n\n"), "<p>Text</p>")
        self.assertEqual(self.parser.parse(""), "")

    def test_code_block_placeholder_not_wrapped(self):
        """Test that a protected code block is not put inside <p>."""
        self.assertEqual(self.parser.parse("\x02CODEBLOCK0\x03"), "\x02CODEBLOCK0\x03")

    def test_text_around_code_block_wrapped(self):
        """Test that lines next to a code block become separate paragraphs."""
        self.assertEqual(
            self.parser.parse("before\n\x02CODEBLOCK0\x03\nafter *x*"),
            "<p>before</p>\n\x02CODEBLOCK0\x03\n<p>after *x*</p>",
        )
        self.assertEqual(
            self.parser.parse("<li>item</li>\n\x02CODEBLOCK0\x03"),
            "<li>item</li>\n\x02CODEBLOCK0\x03",
        )

    def test_html_chunk_not_wrapped(self):
        """Test that chunks starting with a tag are kept as they are."""
        self.assertEqual(self.parser.parse("<div>raw</div>"), "<div>raw</div>")


if __name__ == "__main__":
    unittest.main()
