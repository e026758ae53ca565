"""
Tugon Parser Package

This package turns raw student input (plain arithmetic or LaTeX) into the
flat token sequences compared by the feedback engine.
"""

from .tokenizer import (
    COLOR_NAMES,
    LATEX_FORMATTING_COMMANDS,
    Tokenizer,
    sanitize,
    tokenize,
)

__all__ = [
    "COLOR_NAMES",
    "LATEX_FORMATTING_COMMANDS",
    "Tokenizer",
    "sanitize",
    "tokenize",
]
