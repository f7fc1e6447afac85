#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit and property tests for HTML escaping."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zviz.utils.escape import html_escape

_SPECIAL = "&<>\"'"


@pytest.mark.unit
class TestHtmlEscape:
    """Test html_escape substitutions."""

    def test_empty_string(self) -> None:
        """Test that empty input returns empty output."""
        assert html_escape("") == ""

    @pytest.mark.parametrize(
        "char,entity",
        [
            ("&", "&amp;"),
            ("<", "&lt;"),
            (">", "&gt;"),
            ('"', "&quot;"),
            ("'", "&apos;"),
        ],
    )
    def test_each_special_character(self, char: str, entity: str) -> None:
        """Test the named entity for each special character."""
        assert html_escape(char) == entity

    def test_ampersand_from_substitution_not_reescaped(self) -> None:
        """Test that entities introduced by a substitution are left alone."""
        assert html_escape("<&>") == "&lt;&amp;&gt;"

    def test_existing_entity_is_escaped(self) -> None:
        """Test that text that already looks like an entity is escaped again."""
        assert html_escape("&lt;") == "&amp;lt;"

    def test_mixed_text(self) -> None:
        """Test escaping inside ordinary text."""
        assert html_escape("a < b && c > 'd'") == "a &lt; b &amp;&amp; c &gt; &apos;d&apos;"

    def test_non_ascii_untouched(self) -> None:
        """Test that non-ASCII text passes through."""
        assert html_escape("héllo → 世界") == "héllo → 世界"


@pytest.mark.unit
@pytest.mark.security
class TestHtmlEscapeProperties:
    """Property-based tests for html_escape."""

    @given(st.text().filter(lambda s: not any(c in s for c in _SPECIAL)))
    def test_identity_without_special_characters(self, text: str) -> None:
        """Test that text without special characters is returned unchanged."""
        assert html_escape(text) == text

    @given(st.text())
    def test_no_raw_markup_characters_survive(self, text: str) -> None:
        """Test that no markup-significant character survives escaping."""
        escaped = html_escape(text)
        for char in "<>\"'":
            assert char not in escaped

    @given(st.text(alphabet=st.sampled_from(list(_SPECIAL) + ["a", " "]), min_size=1))
    def test_escaping_twice_double_escapes(self, text: str) -> None:
        """Test that escaping is not idempotent when special characters are present."""
        once = html_escape(text)
        if any(c in text for c in _SPECIAL):
            assert html_escape(once) != once
        else:
            assert html_escape(once) == once

    @given(st.text())
    def test_length_never_shrinks(self, text: str) -> None:
        """Test that escaping only ever grows the text."""
        assert len(html_escape(text)) >= len(text)
