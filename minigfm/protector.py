"""
Code protection for the MiniGFM parser

Fenced code blocks and inline code spans are swapped for inert placeholder
tokens before any Markdown rule runs, and swapped back (optionally
highlighted) once the block and inline passes are done.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .escaper import escape_html
from .highlighting import Highlighter

logger = logging.getLogger(__name__)

# STX/ETX never reach later passes from user input, see CodeStore.protect()
PLACEHOLDER_START = "\x02"
PLACEHOLDER_END = "\x03"
CODE_BLOCK_PLACEHOLDER = PLACEHOLDER_START + "CODEBLOCK{index}" + PLACEHOLDER_END
CODE_SPAN_PLACEHOLDER = PLACEHOLDER_START + "CODESPAN{index}" + PLACEHOLDER_END

_PLACEHOLDER_CHARS_PATTERN = re.compile("[" + PLACEHOLDER_START + PLACEHOLDER_END + "]")
_FENCED_CODE_PATTERN = re.compile(
    r"^(`{3,4})[ ]*([^\s`]*)[ \t]*\n(?:(.*?)\n)?\1(?!`)",
    re.MULTILINE | re.DOTALL,
)
_CODE_SPAN_PATTERN = re.compile(r"`([^`]+)`")
_COMMENT_PATTERN = re.compile(r"%%[\n ][^%]+[\n ]%%")
_CODE_BLOCK_TOKEN_PATTERN = re.compile(PLACEHOLDER_START + r"CODEBLOCK(\d+)" + PLACEHOLDER_END)
_CODE_SPAN_TOKEN_PATTERN = re.compile(PLACEHOLDER_START + r"CODESPAN(\d+)" + PLACEHOLDER_END)


@dataclass
class CodeBlock:
    """Fenced code block taken out of the document."""

    language: str
    code: str


def strip_comments(text: str) -> str:
    """Remove ``%% ... %%`` comment regions entirely."""
    return _COMMENT_PATTERN.sub("", text)


class CodeStore:
    """
    Per-call placeholder table for protected code.

    A new store must be created for every document: indices are only
    meaningful for the text returned by the same store's protect().
    """

    def __init__(self):
        self.code_blocks: List[CodeBlock] = []
        self.code_spans: List[str] = []

    def protect(self, text: str) -> str:
        """
        Replace fenced code blocks and inline code spans with placeholders.

        Args:
            text: Markdown text with backslash escapes already resolved

        Returns:
            Text in which all code content is hidden behind placeholder tokens
        """
        text = _PLACEHOLDER_CHARS_PATTERN.sub("", text)
        text = _FENCED_CODE_PATTERN.sub(self._store_code_block, text)
        text = _CODE_SPAN_PATTERN.sub(self._store_code_span, text)
        logger.debug(f"Protected {len(self.code_blocks)} code blocks and {len(self.code_spans)} code spans")
        return text

    def _store_code_block(self, match: re.Match) -> str:
        code = match.group(3) or ""
        self.code_blocks.append(CodeBlock(language=match.group(2).strip(), code=code.strip("\n")))
        return CODE_BLOCK_PLACEHOLDER.format(index=len(self.code_blocks) - 1)

    def _store_code_span(self, match: re.Match) -> str:
        # Code spans never see the general sanitising pass, so escape now
        self.code_spans.append(escape_html(match.group(1)))
        return CODE_SPAN_PLACEHOLDER.format(index=len(self.code_spans) - 1)

    def restore(self, text: str, highlighter: Optional[Highlighter] = None) -> str:
        """
        Put protected code back in place of its placeholders.

        Args:
            text: Fully transformed HTML still containing placeholders
            highlighter: Optional object with highlight(code, language) and
                highlight_auto(code) methods returning HTML

        Returns:
            Final HTML
        """

        def restore_span(match: re.Match) -> str:
            index = int(match.group(1))
            if index >= len(self.code_spans):
                return ""
            return f"<code>{self.code_spans[index]}</code>"

        def restore_block(match: re.Match) -> str:
            index = int(match.group(1))
            if index >= len(self.code_blocks):
                return ""
            return self._render_code_block(self.code_blocks[index], highlighter)

        text = _CODE_SPAN_TOKEN_PATTERN.sub(restore_span, text)
        return _CODE_BLOCK_TOKEN_PATTERN.sub(restore_block, text)

    def _render_code_block(self, block: CodeBlock, highlighter: Optional[Highlighter]) -> str:
        content = self._highlight(block, highlighter)
        if block.language:
            lang = escape_html(block.language)
            return f'<pre><code class="hljs {lang} lang-{lang}">{content}</code></pre>'
        return f"<pre><code>{content}</code></pre>"

    def _highlight(self, block: CodeBlock, highlighter: Optional[Highlighter]) -> str:
        if highlighter is None:
            return escape_html(block.code)

        try:
            if block.language:
                return highlighter.highlight(block.code, block.language)
            return highlighter.highlight_auto(block.code)
        except Exception as e:
            logger.warning(f"Highlighting failed for language '{block.language}', using plain code: {e}")
            return escape_html(block.code)
