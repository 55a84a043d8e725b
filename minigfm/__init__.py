"""
MiniGFM v1.0

A small Markdown to HTML converter supporting the commonly used part of
GitHub-Flavored Markdown.

This module provides:
- Headers, paragraphs and horizontal rules
- Ordered, unordered and task lists
- Nested block quotes
- Fenced code blocks (optionally highlighted) and inline code
- Tables with column alignment
- Bold, italic, strikethrough, links, images and autolinks
- Escaping and sanitising of user HTML

Usage:
    from minigfm import MiniGFM, PygmentsHighlighter

    parser = MiniGFM()
    html = parser.parse("# Hello World\\n\\nThis is **bold** text.")

    # Highlight fenced code blocks with Pygments
    parser = MiniGFM({"highlighter": PygmentsHighlighter()})

    # Convenience function
    html = markdown_to_html("**Bold** and *italic* text", unsafe=True)
"""

from .block_parser import BlockParser
from .escaper import escape_html, safe_html, unescape_markdown
from .highlighting import Highlighter, PygmentsHighlighter
from .inline_parser import InlineParser
from .parser import MiniGFM, markdown_to_html
from .protector import CodeBlock, CodeStore
from .table import TableAlignment, parse_table

__version__ = "1.0.0"
__all__ = [
    "MiniGFM",
    "markdown_to_html",
    "BlockParser",
    "InlineParser",
    "CodeBlock",
    "CodeStore",
    "Highlighter",
    "PygmentsHighlighter",
    "TableAlignment",
    "parse_table",
    "escape_html",
    "safe_html",
    "unescape_markdown",
]
