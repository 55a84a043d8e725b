"""
Syntax highlighting backends for fenced code blocks
"""

import logging
from abc import ABC, abstractmethod

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer

logger = logging.getLogger(__name__)


class Highlighter(ABC):
    """
    Interface the parser expects from a highlighting capability.

    Both methods return an HTML fragment that is inserted verbatim inside
    ``<pre><code>``, so implementations must escape the code themselves.
    Any exception raised makes the parser fall back to plain code.
    """

    @abstractmethod
    def highlight(self, code: str, language: str) -> str:
        # Raises pygments.util.ClassNotFound for unknown languages
        lexer = get_lexer_by_name(language)
        return self._format(code, lexer)

    def highlight_auto(self, code: str) -> str:
        lexer = guess_lexer(code)
        logger.debug(f"Guessed lexer {lexer.name} for code block")
        return self._format(code, lexer)

    def _format(self, code: str, lexer: Lexer) -> str:
        # Pygments ends the output with a newline, plain code blocks have none
        return highlight(code, lexer, self.formatter).rstrip("\n")
