"""
Main Application (main.py):
Coordinates all the steps:

Reads arithmetic expressions (interactively, or one per line from a file),
Tokenizes and parses each one into an expression tree,
Prints the fully parenthesized infix form, and
Evaluates the tree when it contains no identifiers. Example:

    $ python main.py
    give an expression: (1+2)*3
    the token list is ( 1 + 2 ) * 3
    in infix notation: ((1 + 2) * 3)
    the value is 9

    $ python main.py --file expressions.txt --output results.csv
"""

import argparse
import sys

import pandas as pd

from exptree.executor.session import ExpressionSession, evaluate_batch
from exptree.parser.config import ParserConfig
from exptree.utils.logging_config import setup_logging


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse and evaluate infix arithmetic expressions")
    parser.add_argument("--file", help="evaluate every line of this file instead of reading interactively")
    parser.add_argument("--output", help="write the batch results to this CSV file")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", help="also write detailed logs to this file")
    parser.add_argument("--show-tree", action="store_true", help="print an outline of each parsed tree")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(log_level=args.log_level.upper(), log_file=args.log_file)
    config = ParserConfig.from_env()

    if not args.file:
        return ExpressionSession(config, show_tree=args.show_tree).run()

    with open(args.file, "r", encoding="utf-8") as f:
        lines = [line.rstrip("\n") for line in f if line.strip()]
    results = evaluate_batch(lines, config)

    if args.output:
        results.to_csv(args.output, index=False)
        print(f"Wrote {len(results)} result(s) to {args.output}")
    else:
        with pd.option_context("display.max_rows", None, "display.width", 120):
            print(results)
    return 0 if results["accepted"].all() else 1


if __name__ == "__main__":
    sys.exit(main())
