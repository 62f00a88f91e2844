"""
HTML to plain text flattening for HoYoLAB wiki content.

Wiki descriptions and module values arrive as HTML strings, or as arrays of
HTML fragments where only the first fragment carries the display text.
Both are sanitized with BeautifulSoup (unsafe elements and comments are
dropped, text is kept) and rendered to plain text.
"""

import logging
import re
from typing import Any

from bs4 import BeautifulSoup, Comment
from bs4.builder import ParserRejectedMarkup

log = logging.getLogger(__name__)

_PARAGRAPH_BREAK = re.compile(r"</p><p>")
_INLINE_TAGS = re.compile(r"</?(p|strong)>")
_SPACE_RUNS = re.compile(r" {2,}")

_UNSAFE_TAGS = [
    "script",
    "style",
    "noscript",
    "template",
    "iframe",
    "frame",
    "frameset",
    "object",
    "embed",
    "applet",
    "form",
    "input",
    "button",
    "select",
    "textarea",
    "link",
    "meta",
    "base",
]


def _as_html(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _render_body_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_UNSAFE_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()
    return soup.get_text()


def _extract_fragment(fragments: list | tuple) -> str:
    if not fragments:
        return ""
    first = _as_html(fragments[0])
    joined = _PARAGRAPH_BREAK.sub(" ", first)
    stripped = _INLINE_TAGS.sub("", joined)
    return _render_body_text(stripped).strip()


def _extract_scalar(html: str) -> str:
    spaced = _INLINE_TAGS.sub(" ", html)
    text = _render_body_text(spaced)
    return _SPACE_RUNS.sub(" ", text).strip()


def extract_text(value: Any) -> str:
    """
    Flatten an HTML string or HTML fragment array to plain text.

    Fragment arrays contribute only their first element; ``</p><p>``
    boundaries inside it become a single space. For scalar strings the
    ``<p>``/``<strong>`` tags are replaced with spaces so adjacent words
    stay apart, and the resulting space runs are collapsed.

    Never raises on malformed markup. The worst case is an empty string.

    Entities are decoded, so ``"a &lt;b&gt; c"`` yields ``"a <b> c"``. That
    output is no longer markup-free: extracting it a second time parses
    ``<b>`` as a tag and gives ``"a c"``. Plain text without angle brackets
    is stable under repeated extraction.
    """
    try:
        if isinstance(value, (list, tuple)):
            return _extract_fragment(value)
        return _extract_scalar(_as_html(value))
    except (ParserRejectedMarkup, TypeError, ValueError) as e:
        log.warning("Could not extract text from HTML value: %s", e)
        return ""
