"""Hypothesis property-based tests for the combinator algebra.

Covers:
- or_ is left-biased
- zero_or_more is total and counts consecutive successes
- maybe never fails
- map/bind preserve cursor threading
"""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from comblex.syntax.cursor import Cursor, ParseResult
from comblex.syntax.parser.primitives import maybe, regexp, zero_or_more

source_text = st.text(alphabet="aab b1", min_size=0, max_size=40)


@st.composite
def cursors(draw: st.DrawFn) -> Cursor:
    """Draw a cursor at a valid offset into a small-alphabet source."""
    source = draw(source_text)
    offset = draw(st.integers(min_value=0, max_value=len(source)))
    return Cursor(source, offset)


single_char_patterns = st.sampled_from([r"a", r"b", r"[ab]", r"[0-9]", r" "])


class TestOrProperties:
    """Ordered choice properties."""

    @given(cursor=cursors(), left=single_char_patterns, right=single_char_patterns)
    def test_or_is_left_biased(self, cursor: Cursor, left: str, right: str) -> None:
        """PROPERTY: if a succeeds, a.or_(b) yields exactly a's result."""
        a = regexp(left)
        b = regexp(right)
        a_result = a.parse(cursor)

        if a_result is not None:
            event("left=success")
            assert a.or_(b).parse(cursor) == a_result
        else:
            event("left=failure")
            assert a.or_(b).parse(cursor) == b.parse(cursor)


class TestZeroOrMoreProperties:
    """Repetition properties."""

    @given(cursor=cursors(), pattern=single_char_patterns)
    def test_zero_or_more_is_total(self, cursor: Cursor, pattern: str) -> None:
        """PROPERTY: zero_or_more never returns None."""
        result = zero_or_more(regexp(pattern)).parse(cursor)

        assert isinstance(result, ParseResult)

    @given(cursor=cursors(), pattern=single_char_patterns)
    def test_zero_or_more_counts_consecutive_successes(
        self, cursor: Cursor, pattern: str
    ) -> None:
        """PROPERTY: length equals the number of consecutive item matches."""
        item = regexp(pattern)
        expected = 0
        walk = cursor
        while (step := item.parse(walk)) is not None:
            assert isinstance(step, ParseResult)
            expected += 1
            walk = step.cursor

        result = zero_or_more(item).parse(cursor)

        assert isinstance(result, ParseResult)
        event(f"count={min(expected, 3)}")
        assert len(result.value) == expected
        assert result.cursor == walk


class TestMaybeProperties:
    """Optional matching properties."""

    @given(cursor=cursors(), pattern=single_char_patterns)
    def test_maybe_never_fails(self, cursor: Cursor, pattern: str) -> None:
        """PROPERTY: maybe(p) always yields a ParseResult."""
        result = maybe(regexp(pattern)).parse(cursor)

        assert isinstance(result, ParseResult)
        if result.value is None:
            assert result.cursor == cursor


class TestMapProperties:
    """map preserves cursor threading."""

    @given(cursor=cursors())
    def test_map_keeps_cursor(self, cursor: Cursor) -> None:
        """PROPERTY: map changes the value only."""
        parser = regexp(r"[ab]+")
        plain = parser.parse(cursor)
        mapped = parser.map(len).parse(cursor)

        if plain is None:
            assert mapped is None
        else:
            assert isinstance(plain, ParseResult)
            assert mapped == ParseResult(len(plain.value), plain.cursor)
