#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zviz/html/nodes.py
"""Markup node classes for building HTML fragments.

A fragment is a tree of nodes rooted at a :class:`Container`. Builder methods
on :class:`Container` append children and return either the container itself
(for chaining) or the new child (for further population). Calling
:meth:`Node.render` on the root serializes the whole tree.

Node Hierarchy
--------------
- Text: leaf text, escaped at render time
- RawText: leaf text emitted verbatim (style sheets)
- Container: optionally tagged element with attributes and children
- Table: sparse grid of cell containers with header rows and columns

Rendering is a read-only traversal, so rendering the same tree twice yields
the same string. Empty tagged containers render self-closing
(``<div class="x"/>``), including elements that HTML5 does not treat as void.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from zviz.constants import (
    CLASS_ATTRIBUTE,
    DATA_CELL_TAG,
    DIV_TAG,
    HEADER_CELL_TAG,
    HREF_ATTRIBUTE,
    LINK_TAG,
    STYLE_TAG,
)
from zviz.exceptions import ValidationError
from zviz.utils.escape import html_escape

logger = logging.getLogger(__name__)

NodeT = TypeVar("NodeT", bound="Node")
Populate = Callable[["Container"], object]


class Node(ABC):
    """Base class for all markup nodes.

    A node belongs to at most one container. Ownership is tracked with a flag
    only; nodes hold no reference to their parent.

    """

    _attached: bool = False

    @abstractmethod
    def render(self) -> str:
        """Render this node and its descendants to HTML.

        Returns
        -------
        str
            HTML fragment markup

        """
        pass


@dataclass
class Text(Node):
    """Leaf text node, escaped when rendered.

    Parameters
    ----------
    content : str, default = ""
        Raw (unescaped) text

    """

    content: str = ""

    def render(self) -> str:
        """Render the escaped text."""
        return html_escape(self.content)


@dataclass
class RawText(Node):
    """Leaf text node rendered verbatim.

    Only for structural content such as style sheets. Callers are responsible
    for the content being valid inside its parent element.

    Parameters
    ----------
    content : str, default = ""
        Markup emitted as-is

    """

    content: str = ""

    def render(self) -> str:
        """Render the text unchanged."""
        return self.content


class Container(Node):
    """Ordered composite node with an optional tag.

    An untagged container is a transparent grouping: it renders only the
    concatenation of its children. A tagged container renders its attributes
    (escaped, in insertion order) and either a self-closing tag when it has no
    children or an open/close pair around its rendered children.

    Parameters
    ----------
    tag : str or None, default = None
        Element name, or None for a transparent grouping
    attributes : dict of str to str, optional
        Initial attributes. Only valid for tagged containers.

    Examples
    --------
        >>> root = Container()
        >>> _ = root.new_div("box").text("Tom & Jerry")
        >>> _ = root.link("docs", "https://example.com/?a=1&b=2")
        >>> root.render()
        '<div class="box">Tom &amp; Jerry</div><a href="https://example.com/?a=1&amp;b=2">docs</a>'

    """

    def __init__(self, tag: Optional[str] = None, attributes: Optional[dict[str, str]] = None):
        """Initialize an empty container."""
        self.tag = tag
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []
        for name, value in (attributes or {}).items():
            self.attribute(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r}, attributes={self.attributes!r}, children={len(self.children)})"

    def _new_item(self, node: NodeT) -> NodeT:
        node._attached = True
        self.children.append(node)
        return node

    def append(self, node: NodeT) -> NodeT:
        """Append an already-built node and return it.

        Parameters
        ----------
        node : Node
            Node to take ownership of

        Returns
        -------
        Node
            The appended node

        Raises
        ------
        ValidationError
            If the node already belongs to a container, or is this container or
            one of its ancestors

        """
        if node._attached:
            raise ValidationError(
                f"{type(node).__name__} already belongs to a container",
                parameter_name="node",
                parameter_value=node,
            )
        if _subtree_contains(node, self):
            raise ValidationError(
                f"Appending {type(node).__name__} would make it contain itself",
                parameter_name="node",
                parameter_value=node,
            )
        return self._new_item(node)

    def attribute(self, name: str, value: str) -> Container:
        """Set or overwrite an attribute.

        Parameters
        ----------
        name : str
            Attribute name, emitted verbatim
        value : str
            Raw attribute value, escaped at render time

        Returns
        -------
        Container
            This container

        Raises
        ------
        ValidationError
            If this container has no tag

        """
        if self.tag is None:
            raise ValidationError(
                f"Cannot set attribute {name!r} on an untagged container",
                parameter_name="name",
                parameter_value=name,
            )
        self.attributes[name] = value
        return self

    def text(self, value: str) -> Container:
        """Append a text node. Returns this container."""
        self._new_item(Text(content=value))
        return self

    def link(self, text: str, url: str) -> Container:
        """Append an ``<a href="url">text</a>`` child. Returns this container."""
        self._new_item(Container(LINK_TAG)).attribute(HREF_ATTRIBUTE, url).text(text)
        return self

    def div(self, css_class: str, populate: Populate) -> Container:
        """Append a ``div`` populated by a callback.

        Parameters
        ----------
        css_class : str
            Value of the new div's ``class`` attribute
        populate : callable
            Called synchronously with the new div before it is appended

        Returns
        -------
        Container
            This container (not the new div)

        """
        self._new_item(div(css_class, populate))
        return self

    def new_div(self, css_class: str) -> Container:
        """Append an empty ``div`` with the given class and return it."""
        return self._new_item(Container(DIV_TAG)).attribute(CLASS_ATTRIBUTE, css_class)

    def add_style(self, css: str) -> Container:
        """Append a ``<style>`` block. The CSS is not escaped.

        Callers must not pass content containing ``</style>``.
        """
        self._new_item(Container(STYLE_TAG)).append(RawText(content=css))
        return self

    def new_table(self, css_class: str, num_header_rows: int = 0, num_header_columns: int = 0) -> Table:
        """Append an empty table and return it."""
        return self._new_item(
            Table(css_class, num_header_rows=num_header_rows, num_header_columns=num_header_columns)
        )

    def render(self) -> str:
        """Render this container and its children to HTML."""
        parts: list[str] = []
        if self.tag is not None:
            parts.append(f"<{self.tag}")
            for name, value in self.attributes.items():
                parts.append(f' {name}="{html_escape(value)}"')
            if not self.children:
                parts.append("/>")
                return "".join(parts)
            parts.append(">")

        for child in self.children:
            parts.append(child.render())

        if self.tag is not None:
            parts.append(f"</{self.tag}>")
        return "".join(parts)


def div(css_class: str, populate: Optional[Populate] = None) -> Container:
    """Build a standalone ``div`` not yet attached to a parent.

    Parameters
    ----------
    css_class : str
        Value of the ``class`` attribute
    populate : callable, optional
        Called synchronously with the new div

    Returns
    -------
    Container
        The new div

    """
    container = Container(DIV_TAG).attribute(CLASS_ATTRIBUTE, css_class)
    if populate is not None:
        populate(container)
    return container


def _subtree_contains(root: Node, target: Node) -> bool:
    stack = [root]
    while stack:
        current = stack.pop()
        if current is target:
            return True
        if isinstance(current, Table):
            stack.extend(current.cells.values())
        if isinstance(current, Container):
            stack.extend(current.children)
    return False


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}", parameter_name=name, parameter_value=value)


class Table(Container):
    """Sparse two-dimensional grid of cell containers.

    A ``table``-tagged container whose content lives only in its cells. The
    generic builders (``text``, ``link``, ``new_div``, ``append`` and so on)
    and ``attribute`` raise :class:`ValidationError` on a table; populate
    cells through :meth:`cell` instead.

    Cells are keyed by ``(column, row)`` and created on first access through
    :meth:`cell`. The grid bounds are the smallest size containing every
    accessed coordinate; positions never accessed render as empty
    self-closing cells.

    The first ``num_header_rows`` rows render inside ``<thead>`` with ``<th>``
    for every column. In the remaining rows, the first ``num_header_columns``
    columns render as ``<th>`` and the rest as ``<td>``.

    Parameters
    ----------
    css_class : str
        Value of the table's ``class`` attribute
    num_header_rows : int, default = 0
        Count of leading header rows
    num_header_columns : int, default = 0
        Count of leading header columns in body rows

    Notes
    -----
    Cells are untagged containers, so a cell holding ``"v"`` renders as
    ``<td>v</td>`` rather than wrapping its content in a ``<div>``. A cell that
    was accessed but left empty renders as ``<td></td>``; positions never
    accessed render as ``<td/>``.

    Examples
    --------
        >>> table = Table("t", num_header_rows=1)
        >>> _ = table.cell(0, 0).text("Name")
        >>> _ = table.cell(0, 1).text("x")
        >>> table.render()
        '<table class="t"><thead><tr><th>Name</th></tr></thead><tbody><tr><td>x</td></tr></tbody></table>'

    """

    def __init__(self, css_class: str, num_header_rows: int = 0, num_header_columns: int = 0):
        """Initialize an empty table."""
        super().__init__("table")
        self.css_class = css_class
        self.cells: dict[tuple[int, int], Container] = {}
        self._num_columns = 0
        self._num_rows = 0
        self.num_header_rows = 0
        self.num_header_columns = 0
        self.set_num_header_rows(num_header_rows)
        self.set_num_header_columns(num_header_columns)

    def __repr__(self) -> str:
        return (
            f"Table(css_class={self.css_class!r}, num_columns={self._num_columns}, num_rows={self._num_rows}, "
            f"cells={len(self.cells)})"
        )

    def _new_item(self, node: NodeT) -> NodeT:
        raise ValidationError(
            f"Cannot add {type(node).__name__} directly to a table; use cell()",
            parameter_name="node",
            parameter_value=node,
        )

    def attribute(self, name: str, value: str) -> Table:
        """Reject attributes; a table renders only its ``class``."""
        raise ValidationError(
            f"Cannot set attribute {name!r} on a table; pass css_class instead",
            parameter_name="name",
            parameter_value=name,
        )

    @property
    def num_columns(self) -> int:
        """Column count of the grid."""
        return self._num_columns

    @property
    def num_rows(self) -> int:
        """Row count of the grid."""
        return self._num_rows

    def set_num_header_rows(self, count: int) -> Table:
        """Set the count of leading header rows. Returns this table."""
        _check_non_negative("num_header_rows", count)
        self.num_header_rows = count
        return self

    def set_num_header_columns(self, count: int) -> Table:
        """Set the count of leading header columns. Returns this table."""
        _check_non_negative("num_header_columns", count)
        self.num_header_columns = count
        return self

    def cell(self, column: int, row: int) -> Container:
        """Return the cell at ``(column, row)``, creating it if absent.

        Accessing a cell grows the grid to at least ``column + 1`` columns and
        ``row + 1`` rows. Repeated calls return the same container.

        Parameters
        ----------
        column : int
            Zero-based column index
        row : int
            Zero-based row index

        Returns
        -------
        Container
            The untagged cell container

        Raises
        ------
        ValidationError
            If either coordinate is negative

        """
        _check_non_negative("column", column)
        _check_non_negative("row", row)

        if column >= self._num_columns or row >= self._num_rows:
            self._num_columns = max(self._num_columns, column + 1)
            self._num_rows = max(self._num_rows, row + 1)
            logger.debug("Table %r grew to %d columns x %d rows", self.css_class, self._num_columns, self._num_rows)

        key = (column, row)
        cell = self.cells.get(key)
        if cell is None:
            cell = Container()
            cell._attached = True
            self.cells[key] = cell
        return cell

    def _render_row(self, parts: list[str], row: int, header_row: bool) -> None:
        parts.append("<tr>")
        for column in range(self._num_columns):
            if header_row or column < self.num_header_columns:
                tag = HEADER_CELL_TAG
            else:
                tag = DATA_CELL_TAG
            cell = self.cells.get((column, row))
            if cell is None:
                parts.append(f"<{tag}/>")
            else:
                parts.append(f"<{tag}>{cell.render()}</{tag}>")
        parts.append("</tr>")

    def render(self) -> str:
        """Render the table to HTML."""
        parts = [f'<table class="{html_escape(self.css_class)}">']

        if self.num_header_rows > 0:
            parts.append("<thead>")
            for row in range(self.num_header_rows):
                self._render_row(parts, row, header_row=True)
            parts.append("</thead>")

        parts.append("<tbody>")
        for row in range(self.num_header_rows, self._num_rows):
            self._render_row(parts, row, header_row=False)
        parts.append("</tbody>")

        parts.append("</table>")
        return "".join(parts)


__all__ = [
    "Node",
    "Text",
    "RawText",
    "Container",
    "Table",
    "div",
]
