#  Copyright (c) 2025 Tom Villani, Ph.D.
"""zviz - build HTML fragments for diagnostics pages.

Build a tree of containers, divs, links, style blocks and sparse tables, then
render it to a single escaped HTML string.

Examples
--------
    >>> from zviz import Container
    >>> root = Container()
    >>> table = root.new_table("channels", num_header_rows=1)
    >>> _ = table.cell(0, 0).text("Channel")
    >>> _ = table.cell(0, 1).link("ch-1", "/channel/1")
    >>> html = root.render()

"""

from zviz.exceptions import OutputWriteError, RenderingError, ValidationError, ZvizError
from zviz.html import Container, Node, RawText, Table, Text, div, render_page, write_page
from zviz.logging_utils import configure_logging
from zviz.options import PageOptions
from zviz.utils.escape import html_escape

__version__ = "0.1.0"

__all__ = [
    "Node",
    "Text",
    "RawText",
    "Container",
    "Table",
    "div",
    "html_escape",
    "render_page",
    "write_page",
    "PageOptions",
    "configure_logging",
    "ZvizError",
    "ValidationError",
    "RenderingError",
    "OutputWriteError",
    "__version__",
]
