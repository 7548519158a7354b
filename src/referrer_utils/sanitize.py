"""
Text sanitizing for values that leave the classifier.

Search terms and UTM values come straight from a URL a visitor's browser
sent us, so anything handed to templates or storage goes through
``sanitize_text`` first. ``clean_header`` is the lighter pass applied to the
raw Referer header before it enters the classifier.
"""

import html
import re

# <script>/<style> blocks are removed with their contents
_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
# A "<" only opens a tag when a letter, "/", "!" or "?" follows it
_TAG_RE = re.compile(r"<[A-Za-z/!?][^>]*>")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_tags(value: str) -> str:
    """Remove markup, including the contents of script and style blocks."""
    value = _SCRIPT_STYLE_RE.sub("", value)
    value = _TAG_RE.sub("", value)
    return value


def sanitize_text(value: str | None) -> str:
    """
    Make a user-supplied value safe for display.

    - Strip tags (and script/style contents)
    - Remove control characters (line breaks and tabs included)
    - Collapse runs of whitespace
    - Trim

    Returns an empty string for None or values that are nothing but markup.

    Examples:
        >>> sanitize_text("  wordpress   plugins ")
        'wordpress plugins'

        >>> sanitize_text("<b>summer</b>-sale")
        'summer-sale'
    """
    if not value:
        return ""

    value = strip_tags(value)
    value = _CONTROL_RE.sub(" ", value)
    value = _WHITESPACE_RE.sub(" ", value)
    return value.strip()


def clean_header(value: str | None) -> str:
    """
    Clean a raw Referer header value.

    Entities are unescaped before tags are stripped so an encoded tag can't
    survive the pass. Whitespace inside the value is left alone; a URL
    containing spaces is rejected later by the validator.
    """
    if not value:
        return ""

    value = html.unescape(value)
    value = strip_tags(value)
    value = _CONTROL_RE.sub("", value)
    return value.strip()
