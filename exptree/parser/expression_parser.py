# exptree/parser/expression_parser.py

from typing import Any, Dict, Optional, Tuple, Union

from exptree.ast.expression_ast import (
    ExpressionTree,
    copy_tree,
    identifier_node,
    number_node,
    release_tree,
    symbol_node
)
from exptree.utils.logging_config import get_logger
from . import recognizers
from .config import ParserConfig
from .error_handler import ErrorHandler, ParseError
from .tokenizer import Cursor, Token, Tokenizer, TokenStream

logger = get_logger(__name__)

ParseOutcome = Tuple[ExpressionTree, Cursor]


class ExpressionParser:
    """
    A backtracking recursive descent parser for arithmetic expressions.

    Grammar, loosest layer first::

        expression := term [ ('+' | '-') expression ]
        term       := factor [ ('*' | '/') factor ]
        factor     := number | identifier | '(' expression ')'

    Additive chains are right-associative (``1+2+3`` is ``1+(2+3)``) and a
    term holds at most one multiplicative operator, so ``2*3*4`` leaves
    ``*4`` unconsumed. Every layer works on its own cursor value; a failed
    alternative releases what it built and restarts from the caller's cursor.
    """

    def __init__(self, tokens: TokenStream, error_handler: Optional[ErrorHandler] = None,
                 config: Optional[ParserConfig] = None):
        self.tokens = tokens
        self.error_handler = error_handler if error_handler else ErrorHandler()
        self.config = config if config else ParserConfig()
        self.nesting_level = 0
        self.nesting_exceeded = False
        # (layer, token index) -> outcome; stored trees are private copies
        self.subexpr_cache: Dict[Tuple[str, int], Optional[ParseOutcome]] = {}

    def parse(self) -> Optional[ParseOutcome]:
        """Parse an expression from the start of the stream; trailing tokens are left to the caller."""
        logger.debug("Starting parse for: %s", self.tokens.render())
        try:
            return self.tree_expression(self.tokens.cursor())
        finally:
            self._clear_cache()

    def parse_complete(self) -> ExpressionTree:
        """Parse the whole stream into one tree or raise ParseError."""
        if len(self.tokens) == 0:
            raise ParseError("Empty expression", 1, 1)
        outcome = self.parse()
        if outcome is None:
            first = self.tokens[0]
            raise ParseError(f"No expression could be parsed starting at '{first}'", first.line, first.column)
        tree, rest = outcome
        if not rest.at_end:
            release_tree(tree)
            token = rest.peek()
            raise ParseError(f"Unexpected token '{token}' after expression", token.line, token.column)
        logger.debug("Completed parse: %s", tree)
        return tree

    def tree_expression(self, cursor: Cursor) -> Optional[ParseOutcome]:
        return self._cached("expression", cursor, lambda c: self._binary_layer(
            c, self.tree_term, recognizers.additive_operator, self.tree_expression, "expression"))

    def tree_term(self, cursor: Cursor) -> Optional[ParseOutcome]:
        return self._cached("term", cursor, lambda c: self._binary_layer(
            c, self.tree_factor, recognizers.multiplicative_operator, self.tree_factor, "term"))

    def tree_factor(self, cursor: Cursor) -> Optional[ParseOutcome]:
        return self._cached("factor", cursor, self._factor)

    def _binary_layer(self, cursor: Cursor, operand, operator, right_operand, layer: str) -> Optional[ParseOutcome]:
        left = operand(cursor)
        if left is None:
            return None
        left_tree, work = left

        matched = operator(work)
        if matched is not None:
            op, work = matched
            right = right_operand(work)
            if right is not None:
                right_tree, work = right
                node = symbol_node(op, left_tree, right_tree)
                logger.debug("Parsed %s: %s", layer, node)
                return node, work

        # Drop the left operand and retry a lone operand from the caller's cursor.
        released = release_tree(left_tree)
        logger.debug("Backtracking %s at token %d, released %d node(s)", layer, cursor.index, released)
        return operand(cursor)

    def _factor(self, cursor: Cursor) -> Optional[ParseOutcome]:
        matched = recognizers.number(cursor)
        if matched is not None:
            value, rest = matched
            return number_node(value), rest

        matched = recognizers.identifier(cursor)
        if matched is not None:
            name, rest = matched
            return identifier_node(name), rest

        rest = recognizers.exact_character(cursor, '(')
        if rest is None:
            return None
        if self.nesting_level >= self.config.max_nesting_level:
            self._report_nesting(cursor.peek())
            return None
        self.nesting_level += 1
        try:
            inner = self.tree_expression(rest)
        finally:
            self.nesting_level -= 1
        if inner is None:
            return None
        tree, rest = inner
        closed = recognizers.exact_character(rest, ')')
        if closed is None:
            release_tree(tree)
            return None
        logger.debug("Parsed parenthesized expression: %s", tree)
        return tree, closed

    def _cached(self, layer: str, cursor: Cursor, parse_layer) -> Optional[ParseOutcome]:
        if not self.config.enable_memoization:
            return parse_layer(cursor)
        key = (layer, cursor.index)
        if key in self.subexpr_cache:
            cached = self.subexpr_cache[key]
            if cached is None:
                return None
            logger.debug("Using cached %s at token %d", layer, cursor.index)
            return copy_tree(cached[0]), cached[1]
        outcome = parse_layer(cursor)
        self.subexpr_cache[key] = None if outcome is None else (copy_tree(outcome[0]), outcome[1])
        return outcome

    def _clear_cache(self) -> None:
        for cached in self.subexpr_cache.values():
            if cached is not None:
                release_tree(cached[0])
        self.subexpr_cache.clear()

    def _report_nesting(self, token: Token) -> None:
        if self.nesting_exceeded:
            return
        self.nesting_exceeded = True
        logger.warning("Maximum nesting level (%d) exceeded", self.config.max_nesting_level)
        self.error_handler.add_error(
            f"Maximum nesting level ({self.config.max_nesting_level}) exceeded",
            token.line, token.column
        )


def _as_stream(source: Union[str, TokenStream]) -> TokenStream:
    if isinstance(source, TokenStream):
        return source
    return Tokenizer.create_token_stream(source)


def parse(tokens: Union[str, TokenStream], config: Optional[ParserConfig] = None) -> Optional[ParseOutcome]:
    """Run the top-level expression layer on a fresh cursor; returns (tree, remaining cursor) or None."""
    return ExpressionParser(_as_stream(tokens), config=config).parse()


def parse_expression(source: Union[str, TokenStream], config: Optional[ParserConfig] = None) -> ExpressionTree:
    """Parse a complete expression, raising ParseError if any token is left over."""
    return ExpressionParser(_as_stream(source), config=config).parse_complete()


def parse_expression_full(expr_text: str, error_handler: Optional[ErrorHandler] = None,
                          config: Optional[ParserConfig] = None) -> Dict[str, Any]:
    """
    Parse without raising. Problems are collected in the returned ``errors``
    list and ``tree`` is None unless the whole input was consumed.
    """
    if error_handler is None:
        error_handler = ErrorHandler()
    stream = Tokenizer.create_token_stream(expr_text)
    result = {
        "raw": expr_text,
        "tokens": stream,
        "tree": None,
        "remaining": 0,
        "errors": []
    }
    if len(stream) == 0:
        error_handler.add_error("Empty expression", 1, 1)
        result["errors"] = error_handler.get_formatted_errors()
        return result

    parser = ExpressionParser(stream, error_handler, config)
    outcome = parser.parse()
    if outcome is None:
        first: Token = stream[0]
        error_handler.add_error(f"Unexpected token '{first}'", first.line, first.column)
        result["remaining"] = len(stream)
    else:
        tree, rest = outcome
        if rest.at_end:
            result["tree"] = tree
        else:
            token = rest.peek()
            error_handler.add_error(f"Unexpected token '{token}' after expression", token.line, token.column)
            result["remaining"] = rest.remaining()
            release_tree(tree)
    result["errors"] = error_handler.get_formatted_errors()
    return result
