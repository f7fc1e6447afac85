"""Utility helpers for zviz."""

from zviz.utils.escape import html_escape

__all__ = ["html_escape"]
