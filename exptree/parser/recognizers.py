# exptree/parser/recognizers.py
"""
Single-token recognizers.

Each recognizer looks at the token under a cursor and, when it matches,
returns the extracted value together with the advanced cursor. A miss
returns None; since cursors are immutable the caller's position is never
touched.
"""

from typing import Optional, Tuple, Union

from .tokenizer import Cursor, TokenType

MULTIPLICATIVE_OPERATORS = ('*', '/')
ADDITIVE_OPERATORS = ('+', '-')


def _symbol(cursor: Cursor, accepted) -> Optional[Tuple[str, Cursor]]:
    token = cursor.peek()
    if token is not None and token.type == TokenType.SYMBOL and token.value in accepted:
        return token.value, cursor.advance()
    return None


def number(cursor: Cursor) -> Optional[Tuple[Union[int, float], Cursor]]:
    token = cursor.peek()
    if token is not None and token.type == TokenType.NUMBER:
        return token.value, cursor.advance()
    return None


def identifier(cursor: Cursor) -> Optional[Tuple[str, Cursor]]:
    token = cursor.peek()
    if token is not None and token.type == TokenType.IDENTIFIER:
        return token.value, cursor.advance()
    return None


def multiplicative_operator(cursor: Cursor) -> Optional[Tuple[str, Cursor]]:
    return _symbol(cursor, MULTIPLICATIVE_OPERATORS)


def additive_operator(cursor: Cursor) -> Optional[Tuple[str, Cursor]]:
    return _symbol(cursor, ADDITIVE_OPERATORS)


def exact_character(cursor: Cursor, char: str) -> Optional[Cursor]:
    """Accept exactly ``char``; only the advanced cursor is returned."""
    matched = _symbol(cursor, (char,))
    return matched[1] if matched else None
