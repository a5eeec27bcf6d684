"""
Pytest fixtures for the expression tree tests.
"""

import pytest

from exptree.parser.config import ParserConfig
from exptree.parser.tokenizer import Tokenizer


@pytest.fixture
def config():
    """Default configuration, independent of EXPTREE_* variables."""
    return ParserConfig()


@pytest.fixture
def strict_config():
    """Shallow nesting limit and no memo table, for exercising the literal algorithm."""
    return ParserConfig(max_nesting_level=3, enable_memoization=False)


@pytest.fixture
def stream_factory():
    return Tokenizer.create_token_stream


@pytest.fixture
def expected_results():
    """Accepted inputs with their infix rendering and value (None when not numerical)."""
    return {
        "3": ("3", 3.0),
        "x": ("x", None),
        "2*3": ("(2 * 3)", 6.0),
        "1+2+3": ("(1 + (2 + 3))", 6.0),
        "1-2-3": ("(1 - (2 - 3))", 2.0),
        "(1+2)*3": ("((1 + 2) * 3)", 9.0),
        "2*3+4*5": ("((2 * 3) + (4 * 5))", 26.0),
        "(2*3)*4": ("((2 * 3) * 4)", 24.0),
        "a + 2 * b": ("(a + (2 * b))", None),
        "((7))": ("7", 7.0),
        "1.5 * 4": ("(1.5 * 4)", 6.0),
        "10 / 4": ("(10 / 4)", 2.5),
    }


@pytest.fixture
def rejected_expressions():
    """Inputs that are not complete expressions under the grammar."""
    return [
        "",
        "   ",
        "2*3*4",
        "8/2/2",
        "1+",
        "+1",
        "(1+2",
        "1+2)",
        "()",
        "-3",
        "1 # 2",
        "2 ** 3",
        "1 2",
    ]
