#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zviz/utils/escape.py
"""Text escaping for HTML output.

Every piece of caller-supplied text and every attribute value passes through
:func:`html_escape` at render time.

"""

from __future__ import annotations

import re

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

_HTML_SPECIAL_RE = re.compile("[&<>\"']")


def html_escape(text: str) -> str:
    """Escape the five HTML special characters in text.

    Each of ``&``, ``<``, ``>``, ``"`` and ``'`` is replaced by its named
    entity in a single pass, so ampersands introduced by a substitution are
    never escaped again.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for element content and quoted attribute values

    Examples
    --------
        >>> html_escape("<a href='x'>Tom & Jerry</a>")
        '&lt;a href=&apos;x&apos;&gt;Tom &amp; Jerry&lt;/a&gt;'

    """
    if not text:
        return text

    # &apos; instead of the &#x27; produced by html.escape
    return _HTML_SPECIAL_RE.sub(lambda match: _HTML_ENTITIES[match.group(0)], text)


__all__ = ["html_escape"]
