# exptree/parser/error_handler.py

from typing import List


class ParseError(Exception):
    """Raised when a token sequence is not a complete expression."""
    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"Parse error at {line}:{column}: {message}")


class EvaluationError(Exception):
    """Fatal failure of a numeric evaluation, e.g. a zero divisor."""


class MalformedTreeError(EvaluationError):
    """A tree breaks the node invariants (bad operator, missing child, identifier leaf under evaluate)."""


class ErrorHandler:
    """
    Error collection for the non-raising parse API.

    Errors are kept as (message, line, column) triples so that every problem
    found for one input line can be reported together.
    """
    def __init__(self):
        self.errors = []

    def add_error(self, message: str, line: int = 0, column: int = 0) -> None:
        """Add an error with position information"""
        self.errors.append((message, line, column))

    def get_formatted_errors(self) -> List[str]:
        """Get formatted error messages"""
        return [f"Error at line {line}, column {col}: {msg}" for msg, line, col in self.errors]
