#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zviz/html/page.py
"""Standalone page rendering.

Wraps a rendered fragment in a complete HTML document and optionally writes
it to a file or binary stream.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from zviz.constants import DEFAULT_CSS
from zviz.exceptions import OutputWriteError
from zviz.html.nodes import Node
from zviz.options import PageOptions
from zviz.utils.escape import html_escape

logger = logging.getLogger(__name__)


def _build_stylesheet(options: PageOptions) -> str:
    sheets = []
    if options.include_default_css:
        sheets.append(DEFAULT_CSS)
    if options.extra_css:
        sheets.append(options.extra_css)
    return "\n".join(sheets)


def render_page(root: Node, options: Optional[PageOptions] = None) -> str:
    """Render a node as a complete HTML document.

    Parameters
    ----------
    root : Node
        Root of the fragment to embed in ``<body>``
    options : PageOptions or None, default = None
        Page configuration. Defaults are used when None.

    Returns
    -------
    str
        HTML document text

    """
    options = options or PageOptions()

    parts = [
        "<!DOCTYPE html>",
        f'<html lang="{html_escape(options.language)}">',
        "<head>",
        f'<meta charset="{html_escape(options.charset)}">',
        f"<title>{html_escape(options.title)}</title>",
    ]

    stylesheet = _build_stylesheet(options)
    if stylesheet:
        parts.append(f"<style>\n{stylesheet}\n</style>")

    parts.extend(
        [
            "</head>",
            "<body>",
            root.render(),
            "</body>",
            "</html>",
        ]
    )
    return "\n".join(parts) + "\n"


def write_page(root: Node, output: Union[str, Path, IO[bytes]], options: Optional[PageOptions] = None) -> None:
    """Render a node as a complete HTML document and write it as UTF-8.

    Parameters
    ----------
    root : Node
        Root of the fragment to embed in ``<body>``
    output : str, Path, or IO[bytes]
        Output file path or binary stream
    options : PageOptions or None, default = None
        Page configuration

    Raises
    ------
    OutputWriteError
        If the output cannot be written

    """
    data = render_page(root, options).encode("utf-8")

    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(str(path), original_error=e) from e
        logger.debug("Wrote %d bytes to %s", len(data), path)
    else:
        try:
            output.write(data)
        except (OSError, ValueError) as e:
            raise OutputWriteError(repr(output), original_error=e) from e
        logger.debug("Wrote %d bytes to stream", len(data))


__all__ = ["DEFAULT_CSS", "render_page", "write_page"]
