# exptree/evaluator/evaluation_engine.py
"""
Consumers of expression trees: the infix printer, the numerical check and
the evaluator. Each is a structural recursion expressed as a visitor.
"""

import math
from typing import Optional

from exptree.ast.expression_ast import ExpressionTree
from exptree.ast.visitor import ExpressionVisitor
from exptree.parser.error_handler import EvaluationError, MalformedTreeError
from exptree.utils.logging_config import get_logger

logger = get_logger(__name__)


class InfixPrinter(ExpressionVisitor):
    """Renders a tree fully parenthesized, e.g. ``(1 + (2 + 3))``."""

    def visit_number(self, tree: ExpressionTree) -> str:
        if isinstance(tree.value, float):
            return format(tree.value, 'g')
        return str(tree.value)

    def visit_identifier(self, tree: ExpressionTree) -> str:
        return tree.value

    def visit_symbol(self, tree: ExpressionTree) -> str:
        return f"({self.visit(tree.left)} {tree.value} {self.visit(tree.right)})"


class NumericalChecker(ExpressionVisitor):
    """True when no leaf of the tree is an identifier."""

    def visit_number(self, tree: ExpressionTree) -> bool:
        return True

    def visit_identifier(self, tree: ExpressionTree) -> bool:
        return False

    def visit_symbol(self, tree: ExpressionTree) -> bool:
        return self.visit(tree.left) and self.visit(tree.right)


class Evaluator(ExpressionVisitor):
    """
    Computes the value of a numerical tree.

    Precondition: the tree is numerical. An identifier leaf or an operator
    other than ``+ - * /`` raises MalformedTreeError; a zero divisor raises
    EvaluationError, as does a literal or intermediate result too large
    for a float. None of these is ever turned into inf or NaN.
    """

    def visit_number(self, tree: ExpressionTree) -> float:
        try:
            value = float(tree.value)
        except OverflowError:
            value = math.inf
        # long decimal literals are already inf after lexing
        if not math.isfinite(value):
            logger.error("Number too large: %s", _abbreviate(tree))
            raise EvaluationError(f"number too large to evaluate: {_abbreviate(tree)}")
        return value

    def visit_identifier(self, tree: ExpressionTree) -> float:
        raise MalformedTreeError(f"identifier '{tree.value}' has no value; check is_numerical first")

    def visit_symbol(self, tree: ExpressionTree) -> float:
        lval = self.visit(tree.left)
        rval = self.visit(tree.right)
        operator = tree.value
        if operator == '+':
            result = lval + rval
        elif operator == '-':
            result = lval - rval
        elif operator == '*':
            result = lval * rval
        elif operator == '/':
            if rval == 0:
                logger.error("Division by zero in %s", tree)
                raise EvaluationError(f"division by zero in {_abbreviate(tree)}")
            try:
                result = lval / rval
            except OverflowError:
                result = math.inf
        else:
            raise MalformedTreeError(f"unknown operator {operator!r}")
        if not math.isfinite(result):
            logger.error("Result out of range in %s", tree)
            raise EvaluationError(f"result too large to evaluate in {_abbreviate(tree)}")
        return result


def _abbreviate(tree: ExpressionTree, limit: int = 60) -> str:
    text = InfixPrinter().visit(tree)
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text


def render_infix(tree: ExpressionTree) -> str:
    return InfixPrinter().visit(tree)


def is_numerical(tree: ExpressionTree) -> bool:
    return NumericalChecker().visit(tree)


def evaluate(tree: ExpressionTree) -> float:
    """Value of a numerical tree; see Evaluator for the failure modes."""
    value = Evaluator().visit(tree)
    logger.debug("Evaluated %s to %s", tree, value)
    return value


def format_value(value: Optional[float]) -> str:
    """Evaluation result in the short ``%g`` form used for display."""
    if value is None:
        return ""
    return f"{value:g}"
