# exptree/__init__.py

__version__ = "0.1.0"

# The parser package must load before the ast package: the tree module
# imports its error types from exptree.parser.error_handler.
from .parser import *
from .ast import *
from .evaluator import *
from .executor import *
from . import parser, ast, evaluator, executor

release = release_tree

__all__ = (
    parser.__all__ +
    ast.__all__ +
    evaluator.__all__ +
    executor.__all__ +
    ['release']
)
