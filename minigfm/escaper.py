"""
Escaping and sanitising helpers for the MiniGFM parser

This module provides:
- Resolution of backslash-escaped Markdown punctuation
- HTML escaping of the five HTML-significant characters
- Sanitising of user HTML (denylisted tags and script URLs)
"""

import re
from typing import Dict

ESCAPE_MAP: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

DENYLISTED_TAGS = (
    "script",
    "iframe",
    "object",
    "embed",
    "frame",
    "link",
    "meta",
    "style",
    "svg",
    "math",
)

DANGEROUS_URL_SCHEMES = ("javascript:", "vbscript:", "data:")

_BACKSLASH_ESCAPE_PATTERN = re.compile(r"\\([\\*_{}\[\]()#+\-.!])")
_HTML_CHARS_PATTERN = re.compile(r"[&<>\"']")
_DENYLISTED_TAG_PATTERN = re.compile(
    r"<(/?)\s*(?:" + "|".join(DENYLISTED_TAGS) + r")\b[^>]*>",
    re.IGNORECASE,
)
# Attribute assignment whose (quoted or bare) value starts with javascript: or data:
_SCRIPT_ATTRIBUTE_PATTERN = re.compile(
    r"\s(?!data-)[\w-]+\s*=\s*"
    r"(?:\"\s*(?:javascript|data):[^\"]*\"|'\s*(?:javascript|data):[^']*'|(?:javascript|data):[^\s>]*)",
    re.IGNORECASE,
)


def unescape_markdown(text: str) -> str:
    """
    Replace backslash-escaped punctuation with the literal character.

    Only ``\\ * _ { } [ ] ( ) # + - . !`` are recognised; any other
    backslash is left untouched.

    Args:
        text: Raw Markdown text

    Returns:
        Text with escape backslashes dropped
    """
    return _BACKSLASH_ESCAPE_PATTERN.sub(r"\1", text)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` in a single left-to-right pass."""
    return _HTML_CHARS_PATTERN.sub(lambda match: ESCAPE_MAP[match.group(0)], text)


def safe_html(text: str) -> str:
    """
    Neutralise dangerous user HTML.

    Opening and closing tags from DENYLISTED_TAGS are HTML-escaped so they
    render as text. Attribute assignments with a ``javascript:`` or ``data:``
    value are removed, except for ``data-*`` attributes.

    Args:
        text: Text that may contain raw HTML

    Returns:
        Sanitised text
    """
    text = _DENYLISTED_TAG_PATTERN.sub(lambda match: escape_html(match.group(0)), text)
    return _SCRIPT_ATTRIBUTE_PATTERN.sub("", text)


def is_dangerous_url(url: str) -> bool:
    """Check if URL uses a scheme that can run script in the browser."""
    return url.strip().lower().startswith(DANGEROUS_URL_SCHEMES)
