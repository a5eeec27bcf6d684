# exptree/parser/__init__.py

from .error_handler import ErrorHandler, ParseError, EvaluationError, MalformedTreeError
from .config import ParserConfig
from .tokenizer import Token, TokenType, Cursor, TokenStream, Tokenizer
from . import recognizers

# Import these after the basic components to avoid circular imports
from .expression_parser import ExpressionParser, parse, parse_expression, parse_expression_full

__all__ = [
    'ErrorHandler',
    'ParseError',
    'EvaluationError',
    'MalformedTreeError',
    'ParserConfig',
    'Token',
    'TokenType',
    'Cursor',
    'TokenStream',
    'Tokenizer',
    'recognizers',
    'ExpressionParser',
    'parse',
    'parse_expression',
    'parse_expression_full'
]
