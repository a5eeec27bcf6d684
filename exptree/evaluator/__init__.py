# exptree/evaluator/__init__.py

from .evaluation_engine import (
    InfixPrinter,
    NumericalChecker,
    Evaluator,
    render_infix,
    is_numerical,
    evaluate,
    format_value
)

__all__ = [
    'InfixPrinter',
    'NumericalChecker',
    'Evaluator',
    'render_infix',
    'is_numerical',
    'evaluate',
    'format_value'
]
