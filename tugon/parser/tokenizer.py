"""
Tokenizer for student math input.

This module splits a raw expression (plain arithmetic or LaTeX as emitted by
a math input field) into the flat list of string tokens used for per-symbol
feedback. It handles numbers, variables, identifiers, LaTeX commands,
operators, brackets and a handful of special math symbols.

Structural noise never reaches the token stream:
- invisible Unicode (NBSP, zero-width characters, BOM, ...)
- double quotes and whitespace
- braces and LaTeX formatting commands (\\textcolor, \\left, \\right, ...)
- color names used as arguments of those commands
"""

from __future__ import annotations

import re


# NBSP, Unicode space separators, zero-width characters, word joiner, BOM
INVISIBLE_PATTERN = re.compile(
    "[\u00a0\u1680\u180e\u2000-\u200f\u2028-\u202f\u205f\u2060\ufeff]"
)
WHITESPACE_PATTERN = re.compile(r"\s+")

LATEX_FORMATTING_COMMANDS = frozenset(
    {
        "\\textcolor",
        "\\left",
        "\\right",
        "\\color",
        "\\colorbox",
        "\\mathcolor",
    }
)

COLOR_NAMES = frozenset(
    {"green", "red", "gray", "grey", "yellow", "blue", "black", "white"}
)

OPERATORS = frozenset("+*/=()[]^")
SPECIAL_SYMBOLS = frozenset("√∑∏∫≤≥≠±∞")
BRACES = frozenset("{}")

# A '-' directly after one of these starts a negative literal
SIGN_CONTEXT = frozenset("+-*/^=({")


def sanitize(text: str) -> str:
    """
    Strip invisible Unicode characters and double quotes.

    Args:
        text: Raw input

    Returns:
        The input without invisible characters or quotes
    """
    return INVISIBLE_PATTERN.sub("", text).replace('"', "")


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Tokenizer:
    """
    Tokenizes math expressions into comparable string tokens.

    The scan is a single index-driven pass over the cleaned string. Every
    iteration either emits one token or discards a run of structural noise.

    The tokenizer handles:
    - Numbers, with at most one decimal point ("3.14")
    - Negative literals where a sign is expected ("-5", "x+-5", "(-7)")
    - Single-letter variables and multi-letter identifiers ("x", "sin")
    - LaTeX commands ("\\frac", "\\sqrt")
    - Operators, brackets and special symbols ("+", "(", "√", "≤")
    """

    def __init__(
        self,
        formatting_commands: frozenset[str] = LATEX_FORMATTING_COMMANDS,
        color_names: frozenset[str] = COLOR_NAMES,
    ):
        """
        Initialize tokenizer with its exclusion tables.

        Args:
            formatting_commands: LaTeX commands to discard (with backslash)
            color_names: Lowercase letter runs to discard
        """
        self.formatting_commands = formatting_commands
        self.color_names = color_names

    def clean(self, expression: str) -> str:
        """Sanitize and remove all whitespace."""
        return WHITESPACE_PATTERN.sub("", sanitize(expression))

    def tokenize(self, expression: str) -> list[str]:
        """
        Tokenize a math expression.

        Args:
            expression: The expression to tokenize

        Returns:
            List of tokens (empty for blank or invisible-only input)

        Raises:
            TypeError: If expression is not a string
        """
        if not isinstance(expression, str):
            raise TypeError(
                f"expression must be a string, not {type(expression).__name__}"
            )

        text = self.clean(expression)
        tokens: list[str] = []
        pos = 0

        while pos < len(text):
            char = text[pos]

            if char == "\\":
                end = self._scan_letters(text, pos + 1)
                command = text[pos:end]
                if command not in self.formatting_commands:
                    tokens.append(command)
                pos = end
            elif char in BRACES:
                pos += 1
            elif char == "-":
                if self._starts_negative_number(text, pos):
                    end = self._scan_number(text, pos + 1)
                else:
                    end = pos + 1
                tokens.append(text[pos:end])
                pos = end
            elif _is_digit(char):
                end = self._scan_number(text, pos)
                tokens.append(text[pos:end])
                pos = end
            elif _is_ascii_letter(char):
                end = self._scan_letters(text, pos)
                word = text[pos:end]
                if word.lower() not in self.color_names:
                    tokens.append(word)
                pos = end
            elif char in OPERATORS or char in SPECIAL_SYMBOLS:
                tokens.append(char)
                pos += 1
            else:
                # Unknown characters pass through verbatim
                tokens.append(char)
                pos += 1

        return [token for token in tokens if sanitize(token).strip()]

    @staticmethod
    def _scan_letters(text: str, pos: int) -> int:
        """Return the end index of the ASCII letter run starting at pos."""
        while pos < len(text) and _is_ascii_letter(text[pos]):
            pos += 1
        return pos

    @staticmethod
    def _scan_number(text: str, pos: int) -> int:
        """
        Return the end index of the numeric literal starting at pos.

        Consumes digits and at most one decimal point; a second '.' ends the
        literal and is lexed on its own.
        """
        seen_point = False
        while pos < len(text):
            char = text[pos]
            if _is_digit(char):
                pos += 1
            elif char == "." and not seen_point:
                seen_point = True
                pos += 1
            else:
                break
        return pos

    @staticmethod
    def _starts_negative_number(text: str, pos: int) -> bool:
        """
        Check whether the '-' at pos is the sign of a numeric literal.

        True when the minus opens the expression or follows an operator or an
        opening bracket/brace, and a digit comes right after it. Anything else
        (e.g. "3-5", "x-1", ")-2") is subtraction.
        """
        if pos + 1 >= len(text) or not _is_digit(text[pos + 1]):
            return False
        return pos == 0 or text[pos - 1] in SIGN_CONTEXT


_default_tokenizer = Tokenizer()


def tokenize(expression: str) -> list[str]:
    """
    Tokenize a math expression with the default exclusion tables.

    Examples:
        >>> tokenize("35+7x")
        ['35', '+', '7', 'x']
        >>> tokenize("\\\\frac{2}{35}")
        ['\\\\frac', '2', '35']
        >>> tokenize("x+-5")
        ['x', '+', '-5']
    """
    return _default_tokenizer.tokenize(expression)


__all__ = [
    "COLOR_NAMES",
    "INVISIBLE_PATTERN",
    "LATEX_FORMATTING_COMMANDS",
    "OPERATORS",
    "SPECIAL_SYMBOLS",
    "Tokenizer",
    "sanitize",
    "tokenize",
]
