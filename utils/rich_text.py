"""
Canonical form of rich-text markup (cell content, captions).

Rich text is kept the way the markup parser reads it back:

    a<br/>b        ->  a<br>b
    a & b          ->  a &amp; b
    a<U+00A0>b     ->  a&nbsp;b
    "   "          ->  " "      (whitespace-only runs collapse)

Storing content in this form makes ``parse_table_html(render_table_html(doc))``
return ``doc`` unchanged.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

_MARKUP_CHARS = re.compile(r"[<>&\xa0]")


def escape_text(text: str) -> str:
    """Escape plain text for use as rich text."""
    return EntitySubstitution.substitute_xml(text).replace("\xa0", "&nbsp;")


RICH_TEXT_FORMATTER = HTMLFormatter(
    entity_substitution=escape_text,
    void_element_close_prefix="",
)


def normalize_rich_text(markup: str) -> str:
    if not markup:
        return markup
    if not _MARKUP_CHARS.search(markup) and not markup.isspace():
        return markup
    soup = BeautifulSoup(markup, "html.parser")
    return soup.decode_contents(formatter=RICH_TEXT_FORMATTER)
