"""
Block transformer for the MiniGFM parser

This module rewrites line- and paragraph-level constructs (headers, lists,
horizontal rules, block quotes and tables) into HTML block elements and
wraps whatever text is left into paragraphs.
"""

import logging
import re

from .protector import PLACEHOLDER_END, PLACEHOLDER_START
from .table import parse_table

logger = logging.getLogger(__name__)


class BlockParser:
    """
    Parser for block-level Markdown elements.

    Rules are applied one after another to the whole text, each one seeing
    the output of the previous. Paragraph wrapping must stay last: it relies
    on converted blocks already starting with an HTML tag.
    """

    def __init__(self):
        # Compile regex patterns for efficiency
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Compile regex patterns used for block parsing."""
        self.header_pattern = re.compile(r"^(?!\\)[ \t]*(#{1,6}) ([^\n]+)$", re.MULTILINE)

        self.task_item_pattern = re.compile(r"^[ \t]*[-*+][ \t]+\[([ xX])\][ \t]([^\n]+)$", re.MULTILINE)
        # Content starting with another marker is a rule like "- - -", not an item
        self.unordered_item_pattern = re.compile(r"^[ \t]*[-*+] (?![-*+](?: |$))([^\n]+)$", re.MULTILINE)
        self.ordered_item_pattern = re.compile(r"^[ \t]*(\d+\.) ([^\n]+)$", re.MULTILINE)

        self.horizontal_rule_pattern = re.compile(r"^ {0,3}([*_-])(?: *\1){2,}[ \t]*$", re.MULTILINE)

        # The last marker needs whitespace or the line end after it: ">text" is not a quote
        self.block_quote_pattern = re.compile(r"^[ \t]*((?:>[ \t]*)*>(?:[ \t]+|$))([^\n]*)$", re.MULTILINE)

        self.table_pattern = re.compile(
            r"^([^\n]*\|[^\n]*)\n"  # header
            r"([-:| ]*\|[-:| ]*)(?:\n|$)"  # alignment separator
            r"((?:[^\n]*\|[^\n]*(?:\n|$))*)",  # body
            re.MULTILINE,
        )

        self.paragraph_split_pattern = re.compile(r"\n{2,}|\\\n")
        self.block_start_pattern = re.compile(r"^<\w+")
        self.code_block_split_pattern = re.compile("(" + PLACEHOLDER_START + r"CODEBLOCK\d+" + PLACEHOLDER_END + ")")

    def parse(self, text: str) -> str:
        """
        Transform block-level elements of protected text into HTML.

        Args:
            text: Text with code protected and user HTML sanitised

        Returns:
            Text with block elements converted, inline markup untouched
        """
        text = self.header_pattern.sub(self._render_header, text)
        text = self.task_item_pattern.sub(self._render_task_item, text)
        text = self.unordered_item_pattern.sub(r"<li>\1</li>", text)
        text = self.ordered_item_pattern.sub(r"<li>\1 \2</li>", text)
        text = self.horizontal_rule_pattern.sub("<hr/>", text)
        text = self.block_quote_pattern.sub(self._render_block_quote, text)
        text = self.table_pattern.sub(self._render_table, text)
        return self._wrap_paragraphs(text)

    def _render_header(self, match: re.Match) -> str:
        level = len(match.group(1))
        return f"<h{level}>{match.group(2)}</h{level}>"

    def _render_task_item(self, match: re.Match) -> str:
        checked = "checked " if match.group(1).lower() == "x" else ""
        return f'<li><input type="checkbox" {checked}disabled> {match.group(2)}</li>'

    def _render_block_quote(self, match: re.Match) -> str:
        depth = match.group(1).count(">")
        content = match.group(2)
        if not content.strip():
            return ""
        return "<blockquote>" * depth + content + "</blockquote>" * depth

    def _render_table(self, match: re.Match) -> str:
        table = parse_table(match.group(1), match.group(2), match.group(3))
        # Keep the line break so the next line does not stick to the table
        if match.group(0).endswith("\n"):
            table += "\n"
        return table

    def _wrap_paragraphs(self, text: str) -> str:
        """Wrap bare text chunks in <p> and join all chunks with <br />."""
        chunks = []
        for chunk in self.paragraph_split_pattern.split(text):
            chunk = self._wrap_chunk(chunk)
            if chunk:
                chunks.append(chunk)

        logger.debug(f"Block pass produced {len(chunks)} chunks")
        return "<br />".join(chunks)

    def _wrap_chunk(self, chunk: str) -> str:
        # Text on lines around a code block gets paragraphs of its own
        pieces = []
        for index, piece in enumerate(self.code_block_split_pattern.split(chunk)):
            piece = piece.strip("\n")
            if not piece.strip():
                continue

            if index % 2 or self.block_start_pattern.match(piece):
                pieces.append(piece)
            else:
                pieces.append(f"<p>{piece}</p>")
        return "\n".join(pieces)
