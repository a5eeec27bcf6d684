# exptree/executor/__init__.py

from .session import ExpressionReport, ExpressionSession, process_expression, evaluate_batch, REPORT_COLUMNS

__all__ = [
    'ExpressionReport',
    'ExpressionSession',
    'process_expression',
    'evaluate_batch',
    'REPORT_COLUMNS'
]
