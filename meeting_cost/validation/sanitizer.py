"""
Free-Text Sanitization

Meeting descriptions are typed by users and shown back to them.
This is a defense-in-depth filter for plain display text, NOT an HTML
parser. It does not try to produce valid markup; it removes anything
that could execute or render as markup.

Order of operations:
1. Control and zero-width characters (so they cannot hide a tag or scheme)
2. <...> spans, keeping the text between them
3. Any leftover < or >
4. javascript: / data: prefixes, until none remain
5. Trim, truncate, trim again

DESIGN DECISION: Never raise. Anything that is not a string becomes "".
"""

import re
from typing import Any


DEFAULT_MAX_LENGTH = 500

_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")
_ZERO_WIDTH_CHARS = re.compile("[\u200b-\u200d\u2060\ufeff]")
_TAG = re.compile(r"<[^>]*>")
_ANGLE_BRACKETS = re.compile(r"[<>]")
_BLOCKED_SCHEMES = re.compile(r"javascript:|data:")


def _strip_schemes(text: str) -> str:
    # "javajavascript:script:" collapses to "javascript:" after one pass
    while True:
        stripped = _BLOCKED_SCHEMES.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def sanitize_string(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Clean a free-text value for storage and display.

    Args:
        value: Anything; non-strings yield ""
        max_length: Maximum length of the result

    Returns:
        The cleaned, trimmed, truncated string
    """
    if not isinstance(value, str) or max_length <= 0:
        return ""

    text = _CONTROL_CHARS.sub("", value)
    text = _ZERO_WIDTH_CHARS.sub("", text)
    text = _TAG.sub("", text)
    text = _ANGLE_BRACKETS.sub("", text)
    text = _strip_schemes(text)

    return text.strip()[:max_length].strip()
