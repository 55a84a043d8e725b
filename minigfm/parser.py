"""
Main parser for MiniGFM

This module provides the MiniGFM class that runs the whole text rewriting
pipeline: escaping, code protection, block transformation, inline
transformation and code restoration.
"""

import logging
from typing import Any, Dict, Optional

from .block_parser import BlockParser
from .escaper import safe_html, unescape_markdown
from .highlighting import Highlighter
from .inline_parser import InlineParser
from .protector import CodeStore, strip_comments

logger = logging.getLogger(__name__)


class MiniGFM:
    """
    Markdown to HTML converter for a GitHub-Flavored Markdown subset.

    The processing model is a fixed sequence of passes over the text:
    1. Escaping: resolve backslash-escaped punctuation
    2. Protection: hide code behind placeholders, drop comments, sanitise HTML
    3. Block Parsing: headers, lists, rules, block quotes, tables, paragraphs
    4. Inline Parsing: emphasis, strikethrough, autolinks, images, links
    5. Restoration: put (optionally highlighted) code back

    Only the configuration is kept on the instance, so one parser can be
    shared between threads.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the parser.

        Args:
            options: Optional parser configuration:
                - unsafe: pass user HTML through untouched (default False)
                - highlighter: Highlighter used for fenced code blocks
        """
        self.options = options or {}

        self.unsafe: bool = bool(self.options.get("unsafe", False))
        self.highlighter: Optional[Highlighter] = self.options.get("highlighter")

        # Initialize components
        self.block_parser = BlockParser()
        self.inline_parser = InlineParser({"unsafe": self.unsafe})

    def parse(self, markdown: Any) -> str:
        """
        Convert Markdown text to an HTML fragment.

        Args:
            markdown: The Markdown text to convert

        Returns:
            HTML string, or empty string if input is not a string
        """
        if not isinstance(markdown, str):
            logger.debug(f"Expected str, got {type(markdown).__name__}, returning empty output")
            return ""

        code_store = CodeStore()

        text = unescape_markdown(markdown)
        text = code_store.protect(text)
        text = strip_comments(text)
        if not self.unsafe:
            text = safe_html(text)

        text = self.block_parser.parse(text)
        text = self.inline_parser.parse(text)

        return code_store.restore(text, self.highlighter)


def markdown_to_html(text: str, **options) -> str:
    """
    Convert Markdown text to HTML.

    Args:
        text: Markdown text to convert
        **options: Parser options, see MiniGFM.__init__()

    Returns:
        HTML string
    """
    parser = MiniGFM(options)
    return parser.parse(text)
