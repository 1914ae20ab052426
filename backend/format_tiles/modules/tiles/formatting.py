from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Optional

import bleach
import markdown

from format_tiles.core.constants import TextFormat

logger = logging.getLogger("tiles")

ALLOWED_TAGS = [
    *bleach.ALLOWED_TAGS,
    "div", "span", "p", "br", "hr", "img",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
    "pre", "sup", "sub", "figure", "figcaption",
    "audio", "video", "source",
]
ALLOWED_ATTRIBUTES = {
    **bleach.ALLOWED_ATTRIBUTES,
    "*": ["class", "id", "title", "lang", "dir"],
    "img": ["src", "alt", "width", "height"],
    "audio": ["src", "controls"],
    "video": ["src", "controls", "width", "height", "poster"],
    "source": ["src", "type"],
    "td": ["colspan", "rowspan"],
    "th": ["colspan", "rowspan", "scope"],
}


@dataclass(frozen=True)
class FormatOptions:
    noclean: bool = False
    overflowdiv: bool = False
    context_id: Optional[int] = None


def html_div(content: str, css_class: str = "") -> str:
    if css_class:
        return f'<div class="{html.escape(css_class, quote=True)}">{content}</div>'
    return f"<div>{content}</div>"


def text_to_html(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", "<br />\n")


def clean_text(text: str) -> str:
    return bleach.clean(text, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRIBUTES, strip=True)


def format_text(text: Optional[str], text_format: Optional[int] = TextFormat.MOODLE,
                options: Optional[FormatOptions] = None) -> str:
    """Render user-authored text as HTML.

    Trusted text (noclean) skips sanitising. With overflowdiv the result is
    wrapped so wide content scrolls instead of breaking the layout.
    """
    options = options or FormatOptions()
    text = text or ""
    logger.debug("[Tiles] Formatting text (format %s) for context %s", text_format, options.context_id)

    if text_format == TextFormat.PLAIN:
        result = text_to_html(html.escape(text))
    else:
        if text_format == TextFormat.MARKDOWN:
            result = markdown.markdown(text, extensions=["markdown.extensions.extra"])
        elif text_format == TextFormat.HTML:
            result = text
        else:
            result = text_to_html(text)
        if not options.noclean:
            result = clean_text(result)

    if options.overflowdiv:
        result = html_div(result, "no-overflow")
    return result
