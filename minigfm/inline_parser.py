"""
Inline transformer for the MiniGFM parser

This module handles span-level elements like emphasis, strikethrough,
autolinks, images and links inside already converted block HTML.
"""

import re
from typing import Any, Dict, Optional

from .escaper import escape_html, is_dangerous_url


class InlineParser:
    """
    Parser for inline Markdown elements.

    Each rule is a single regex substitution; spans are not parsed
    recursively, so e.g. a link inside bold text only works because the
    bold rule runs first and leaves the link markup alone.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = options or {}
        self.unsafe = bool(self.options.get("unsafe", False))

        # Compile regex patterns for efficiency
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Compile regex patterns used for inline parsing."""
        self.bold_pattern = re.compile(r"(\*\*|__)(.+?)\1")
        # "_" inside words (snake_case, URLs) is not emphasis
        self.italic_pattern = re.compile(
            r"(?<![\w*])_(?![_\s])(.+?)(?<![_\s])_(?![\w*])"
            r"|(?<!\*)\*(?![*\s])(.+?)(?<![*\s])\*(?!\*)"
        )
        self.strikethrough_pattern = re.compile(r"~~(.+?)~~")

        self.url_autolink_pattern = re.compile(r"<((?:https?://|ftp://|mailto:|tel:)[^>\s]+)>")
        self.email_autolink_pattern = re.compile(r"<([^\s@<>]+@[^\s@<>]+\.[^\s@<>]+)>")

        self.image_pattern = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
        self.link_pattern = re.compile(r"\[([^\]]+)\]\(([^)\s]+)(?: \"([^)\"]+)\")?\)")

    def parse(self, text: str) -> str:
        """
        Convert inline Markdown in block HTML.

        Args:
            text: Output of the block transformer

        Returns:
            HTML with inline elements converted
        """
        text = self.bold_pattern.sub(r"<strong>\2</strong>", text)
        text = self.italic_pattern.sub(self._render_italic, text)
        text = self.strikethrough_pattern.sub(r"<del>\1</del>", text)
        text = self.url_autolink_pattern.sub(self._render_url_autolink, text)
        text = self.email_autolink_pattern.sub(self._render_email_autolink, text)
        text = self.image_pattern.sub(self._render_image, text)
        return self.link_pattern.sub(self._render_link, text)

    def _render_italic(self, match: re.Match) -> str:
        content = match.group(1) if match.group(1) is not None else match.group(2)
        return f"<em>{content}</em>"

    def _render_url_autolink(self, match: re.Match) -> str:
        url = match.group(1)
        return f'<a href="{escape_html(url)}">{url}</a>'

    def _render_email_autolink(self, match: re.Match) -> str:
        address = match.group(1)
        return f'<a href="mailto:{escape_html(address)}">{address}</a>'

    def _render_image(self, match: re.Match) -> str:
        alt_text, url = match.group(1), match.group(2)
        src = self._url_attr("src", url)
        return f'<img{src} alt="{escape_html(alt_text)}"></img>'

    def _render_link(self, match: re.Match) -> str:
        text, url, title = match.group(1), match.group(2), match.group(3)
        href = self._url_attr("href", url)
        title_attr = f' title="{escape_html(title)}"' if title else ""
        return f"<a{href}{title_attr}>{text}</a>"

    def _url_attr(self, name: str, url: str) -> str:
        """Build `` name="url"``, or nothing for script URLs in safe mode."""
        if not self.unsafe and is_dangerous_url(url):
            return ""
        return f' {name}="{escape_html(url)}"'
