"""Whitespace handling for token-level grammars.

Tokens consume their TRAILING whitespace, so a grammar built from token()
only has to skip whitespace once, before the first token (lexeme_start).
"""

import re

from comblex.syntax.parser.core import Parser
from comblex.syntax.parser.primitives import constant, regexp, zero_or_more

__all__ = ["WHITESPACE", "ignored", "lexeme_start", "token"]

# Spaces, tabs and both line ending characters.
WHITESPACE: Parser[str] = regexp(r"[ \n\r\t]+").named("whitespace")

ignored: Parser[tuple[str, ...]] = zero_or_more(WHITESPACE).named("ignored")


def token(pattern: str | re.Pattern[str], flags: int = 0) -> Parser[str]:
    """Match pattern, then skip trailing whitespace.

    Args:
        pattern: Pattern source or compiled pattern
        flags: re flags (only valid with a pattern string)

    Returns:
        Parser yielding the matched text without the whitespace
    """
    return regexp(pattern, flags).bind(lambda value: ignored.and_(constant(value)))


def lexeme_start[T](parser: Parser[T]) -> Parser[T]:
    """Skip leading whitespace, then run parser."""
    return ignored.and_(parser)
