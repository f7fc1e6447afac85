"""Configuration options for the page shell.

Options are frozen dataclasses; use :meth:`CloneFrozenMixin.create_updated`
to derive a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from zviz.constants import (
    DEFAULT_INCLUDE_DEFAULT_CSS,
    DEFAULT_PAGE_CHARSET,
    DEFAULT_PAGE_LANGUAGE,
    DEFAULT_PAGE_TITLE,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class PageOptions(CloneFrozenMixin):
    """Configuration for wrapping a rendered fragment in an HTML document.

    Parameters
    ----------
    title : str, default "zviz"
        Text of the ``<title>`` element (escaped).
    language : str, default "en"
        Value of the ``<html lang="...">`` attribute (escaped).
    charset : str, default "utf-8"
        Value of the ``<meta charset>`` declaration (escaped).
    include_default_css : bool, default True
        Embed the built-in stylesheet in a ``<style>`` block.
    extra_css : str or None, default None
        Additional raw CSS appended after the default stylesheet. Not escaped.

    """

    title: str = field(
        default=DEFAULT_PAGE_TITLE,
        metadata={"help": "Document title"},
    )
    language: str = field(
        default=DEFAULT_PAGE_LANGUAGE,
        metadata={"help": "Document language code for <html lang>"},
    )
    charset: str = field(
        default=DEFAULT_PAGE_CHARSET,
        metadata={"help": "Character set declared in <meta charset>"},
    )
    include_default_css: bool = field(
        default=DEFAULT_INCLUDE_DEFAULT_CSS,
        metadata={"help": "Embed the built-in stylesheet"},
    )
    extra_css: Optional[str] = field(
        default=None,
        metadata={"help": "Additional raw CSS appended to the stylesheet"},
    )


__all__ = ["CloneFrozenMixin", "PageOptions"]
