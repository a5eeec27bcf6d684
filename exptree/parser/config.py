# exptree/parser/config.py

import os
from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration for parser and driver behavior"""
    max_nesting_level: int = 40
    enable_memoization: bool = True
    sentinel: str = "!"
    prompt: str = "give an expression: "

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build a configuration, overriding defaults from EXPTREE_* variables."""
        config = cls()
        max_nesting = os.getenv('EXPTREE_MAX_NESTING')
        if max_nesting:
            config.max_nesting_level = int(max_nesting)
        sentinel = os.getenv('EXPTREE_SENTINEL')
        if sentinel:
            config.sentinel = sentinel
        return config
