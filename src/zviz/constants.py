#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for zviz.

Constants are organized by category:
1. Markup - tag names and attribute names used by the builders
2. Page Shell - defaults for the standalone page wrapper
"""

from __future__ import annotations

# =============================================================================
# Markup
# =============================================================================

DIV_TAG = "div"
LINK_TAG = "a"
STYLE_TAG = "style"
CLASS_ATTRIBUTE = "class"
HREF_ATTRIBUTE = "href"

HEADER_CELL_TAG = "th"
DATA_CELL_TAG = "td"

# =============================================================================
# Page Shell
# =============================================================================

DEFAULT_PAGE_TITLE = "zviz"
DEFAULT_PAGE_LANGUAGE = "en"
DEFAULT_PAGE_CHARSET = "utf-8"
DEFAULT_INCLUDE_DEFAULT_CSS = True

DEFAULT_CSS = """body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    line-height: 1.4;
    margin: 1em;
    color: #222;
}
table {
    border-collapse: collapse;
    margin: 0.5em 0;
}
th, td {
    border: 1px solid #ccc;
    padding: 0.25em 0.5em;
    text-align: left;
    vertical-align: top;
}
th {
    background-color: #f2f2f2;
}
a {
    color: #0366d6;
    text-decoration: none;
}
a:hover {
    text-decoration: underline;
}"""
