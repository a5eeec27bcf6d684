# exptree/parser/tokenizer.py

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union


class TokenType(Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Union[int, float, str]
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        if self.type == TokenType.NUMBER and isinstance(self.value, float):
            return format(self.value, 'g')
        return str(self.value)


@dataclass(frozen=True)
class Cursor:
    """
    A position in a TokenStream.

    Cursors are immutable values: advance() returns a new cursor and leaves
    this one where it was, so a saved cursor is a free backtracking point.
    """
    stream: "TokenStream"
    index: int = 0

    @property
    def at_end(self) -> bool:
        return self.index >= len(self.stream)

    def peek(self) -> Optional[Token]:
        if self.at_end:
            return None
        return self.stream[self.index]

    def advance(self) -> "Cursor":
        if self.at_end:
            raise IndexError("cannot advance past the end of the token stream")
        return Cursor(self.stream, self.index + 1)

    def remaining(self) -> int:
        return max(len(self.stream) - self.index, 0)

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, remaining={self.remaining()})"


class TokenStream:
    """An immutable token sequence handing out cursors."""

    def __init__(self, tokens: Iterable[Token]):
        self.tokens = tuple(tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def cursor(self) -> Cursor:
        return Cursor(self, 0)

    def render(self) -> str:
        """Token list as shown to the user, one space between tokens."""
        return " ".join(str(token) for token in self.tokens)

    def __repr__(self) -> str:
        return f"TokenStream({self.render()!r})"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Tokenizer:
    """Tokenizer for arithmetic expressions: numbers, identifiers and single-character symbols."""

    @staticmethod
    def tokenize(text: str) -> List[Token]:
        tokens: List[Token] = []

        for line_num, line in enumerate(text.split('\n'), 1):
            pos = 0
            while pos < len(line):
                while pos < len(line) and line[pos].isspace():
                    pos += 1
                if pos >= len(line):
                    continue
                start = pos
                if _is_digit(line[pos]):
                    while pos < len(line) and _is_digit(line[pos]):
                        pos += 1
                    if pos + 1 < len(line) and line[pos] == '.' and _is_digit(line[pos + 1]):
                        pos += 1
                        while pos < len(line) and _is_digit(line[pos]):
                            pos += 1
                        value = float(line[start:pos])
                    else:
                        value = int(line[start:pos])
                    tokens.append(Token(TokenType.NUMBER, value, line_num, start + 1))
                elif line[pos].isalpha():
                    while pos < len(line) and line[pos].isalnum():
                        pos += 1
                    tokens.append(Token(TokenType.IDENTIFIER, line[start:pos], line_num, start + 1))
                else:
                    tokens.append(Token(TokenType.SYMBOL, line[pos], line_num, start + 1))
                    pos += 1
        return tokens

    @staticmethod
    def create_token_stream(text: str) -> TokenStream:
        return TokenStream(Tokenizer.tokenize(text))
