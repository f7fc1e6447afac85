"""HTML fragment builder and page shell."""

from zviz.html.nodes import Container, Node, RawText, Table, Text, div
from zviz.html.page import DEFAULT_CSS, render_page, write_page

__all__ = [
    "Node",
    "Text",
    "RawText",
    "Container",
    "Table",
    "div",
    "DEFAULT_CSS",
    "render_page",
    "write_page",
]
