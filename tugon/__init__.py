"""Tugon - token feedback for typed math answers.

Main namespace package:
- tugon.parser: Tokenization of plain and LaTeX math input
- tugon.feedback: Positional token feedback, hints and results
"""

__version__ = "0.1.0"

__all__ = []
