# exptree/executor/session.py
"""
Driver layer: tokenizes input lines, parses them, prints the infix form and
the value, and releases every tree it receives. Three surfaces share one
pipeline: process_expression (one line), ExpressionSession (interactive
dialogue) and evaluate_batch (a pandas table for many lines).
"""

import sys
from dataclasses import dataclass, asdict
from typing import Iterable, Optional, TextIO

import numpy as np
import pandas as pd

from exptree.ast.expression_ast import release_tree, visualize_expression_tree
from exptree.evaluator.evaluation_engine import evaluate, format_value, is_numerical, render_infix
from exptree.parser.config import ParserConfig
from exptree.parser.error_handler import EvaluationError, MalformedTreeError, ParseError
from exptree.parser.expression_parser import ExpressionParser
from exptree.parser.tokenizer import Tokenizer
from exptree.utils.logging_config import PerformanceTimer, get_logger

logger = get_logger(__name__)

REPORT_COLUMNS = ['expression', 'tokens', 'accepted', 'infix', 'numerical', 'value', 'error']


@dataclass
class ExpressionReport:
    """Everything the driver learned about one input line."""
    expression: str
    tokens: str
    accepted: bool = False
    infix: Optional[str] = None
    numerical: bool = False
    value: Optional[float] = None
    error: Optional[str] = None
    tree_outline: Optional[str] = None


def process_expression(text: str, config: Optional[ParserConfig] = None,
                       show_tree: bool = False) -> ExpressionReport:
    stream = Tokenizer.create_token_stream(text)
    report = ExpressionReport(expression=text, tokens=stream.render())

    try:
        tree = ExpressionParser(stream, config=config).parse_complete()
    except ParseError as e:
        logger.info("Rejected %r: %s", text, e.message)
        report.error = e.message
        return report
    except RecursionError:
        # long additive chains recurse once per operator
        logger.warning("Rejected expression of %d token(s): recursion limit reached", len(stream))
        report.error = "Expression too long to parse"
        return report

    try:
        report.accepted = True
        report.infix = render_infix(tree)
        if show_tree:
            report.tree_outline = visualize_expression_tree(tree)
        report.numerical = is_numerical(tree)
        if report.numerical:
            try:
                report.value = evaluate(tree)
            except MalformedTreeError:
                raise
            except EvaluationError as e:
                report.error = str(e)
    finally:
        release_tree(tree)
    return report


class ExpressionSession:
    """Interactive dialogue: read an expression per line until the sentinel."""

    def __init__(self, config: Optional[ParserConfig] = None, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None, show_tree: bool = False):
        self.config = config if config else ParserConfig.from_env()
        self.stdin = stdin if stdin else sys.stdin
        self.stdout = stdout if stdout else sys.stdout
        self.show_tree = show_tree
        self.processed = 0

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_input(self) -> Optional[str]:
        self._write(self.config.prompt)
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\n')

    def handle(self, line: str) -> ExpressionReport:
        report = process_expression(line, self.config, self.show_tree)
        self.processed += 1
        self._write(f"the token list is {report.tokens}\n")
        if not report.accepted:
            self._write("this is not an expression\n")
            return report
        self._write(f"in infix notation: {report.infix}\n")
        if report.tree_outline:
            self._write(f"{report.tree_outline}\n")
        if not report.numerical:
            self._write("this is not a numerical expression\n")
        elif report.error:
            self._write(f"the value is undefined: {report.error}\n")
        else:
            self._write(f"the value is {format_value(report.value)}\n")
        return report

    def run(self) -> int:
        line = self.read_input()
        while line is not None and not line.startswith(self.config.sentinel):
            self.handle(line)
            self._write("\n")
            line = self.read_input()
        if line is None:
            self._write("\n")
        self._write("good bye\n")
        logger.debug("Session finished after %d expression(s)", self.processed)
        return 0


def evaluate_batch(expressions: Iterable[str], config: Optional[ParserConfig] = None) -> pd.DataFrame:
    """Run every expression through the driver pipeline and tabulate the reports."""
    with PerformanceTimer("evaluate_batch"):
        rows = []
        for text in expressions:
            row = asdict(process_expression(text, config))
            del row['tree_outline']
            rows.append(row)

    frame = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    frame['accepted'] = frame['accepted'].astype(bool)
    frame['numerical'] = frame['numerical'].astype(bool)
    frame['value'] = frame['value'].astype(np.float64)
    logger.info("Evaluated %d expression(s), %d accepted", len(frame), int(frame['accepted'].sum()))
    return frame
