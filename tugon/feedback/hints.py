"""
Hint text for token feedback.

Turns a classified token sequence into the short sentence shown under the
answer box, and provides the helpers used to compose longer hints
("check the tokens "x", "3" and 2 more").
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from .token_feedback import ClassifiedToken, TokenStatus, count_statuses, is_incomplete

PERFECT_MATCH = "Perfect match!"
FALLBACK_HINT = "Check your answer"


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def feedback_hint(
    classified: Sequence[ClassifiedToken],
    user_tokens: Sequence[str],
    expected_tokens: Sequence[str],
) -> str:
    """
    Build the one-line hint for a comparison.

    Rules are checked in priority order and the first one that applies wins:
    missing tokens, surplus tokens, wrong tokens, misplaced tokens, perfect
    match.

    Args:
        classified: Result of compare(user_tokens, expected_tokens)
        user_tokens: Student tokens
        expected_tokens: Expected tokens

    Returns:
        Hint message
    """
    if is_incomplete(user_tokens, expected_tokens):
        missing = len(expected_tokens) - len(user_tokens)
        return (
            f"Incomplete answer: {missing} more "
            f"{_plural(missing, 'token', 'tokens')} needed"
        )

    counts = count_statuses(classified)

    surplus = counts[TokenStatus.SURPLUS]
    if surplus > 0:
        return (
            f"Too many tokens: remove {surplus} extra "
            f"{_plural(surplus, 'token', 'tokens')}"
        )

    absent = counts[TokenStatus.ABSENT]
    if absent > 0:
        return (
            f"{absent} wrong {_plural(absent, 'token', 'tokens')} "
            "— check your expression"
        )

    misplaced = counts[TokenStatus.PRESENT_MISPLACED]
    if misplaced > 0:
        return (
            f"{misplaced} {_plural(misplaced, 'token is', 'tokens are')} "
            "in the wrong position"
        )

    if counts[TokenStatus.EXACT] == len(expected_tokens):
        return PERFECT_MATCH

    return FALLBACK_HINT


class ProblemTokens(NamedTuple):
    """Token texts that need the student's attention, grouped by status."""

    wrong: tuple[str, ...]
    misplaced: tuple[str, ...]
    extra: tuple[str, ...]

    def __bool__(self) -> bool:
        return bool(self.wrong or self.misplaced or self.extra)


def extract_problem_tokens(classified: Sequence[ClassifiedToken]) -> ProblemTokens:
    """
    Partition non-exact tokens into wrong, misplaced and extra groups.

    Exact tokens are dropped; each group keeps the student's order.
    """
    groups: dict[TokenStatus, list[str]] = {
        TokenStatus.ABSENT: [],
        TokenStatus.PRESENT_MISPLACED: [],
        TokenStatus.SURPLUS: [],
    }
    for item in classified:
        if item.status in groups:
            groups[item.status].append(item.token)

    return ProblemTokens(
        wrong=tuple(groups[TokenStatus.ABSENT]),
        misplaced=tuple(groups[TokenStatus.PRESENT_MISPLACED]),
        extra=tuple(groups[TokenStatus.SURPLUS]),
    )


def format_tokens_for_hint(
    wrong: Sequence[str],
    misplaced: Sequence[str] = (),
    extra: Sequence[str] = (),
) -> str:
    """
    Summarize problem tokens for use inside a sentence.

    Examples:
        >>> format_tokens_for_hint([])
        'that part'
        >>> format_tokens_for_hint(["x"], ["3"])
        '"x" and "3"'
        >>> format_tokens_for_hint(["x", "3"], ["+"], ["y"])
        '"x", "3" and 2 more'
    """
    tokens = [*wrong, *misplaced, *extra]

    if not tokens:
        return "that part"
    if len(tokens) == 1:
        return f'"{tokens[0]}"'
    if len(tokens) == 2:
        return f'"{tokens[0]}" and "{tokens[1]}"'
    return f'"{tokens[0]}", "{tokens[1]}" and {len(tokens) - 2} more'


def describe_error_types(
    wrong: Sequence[str],
    misplaced: Sequence[str],
    extra: Sequence[str],
) -> str:
    """Describe which kinds of mistakes occurred, e.g. "1 incorrect, 2 extra"."""
    parts = []
    if wrong:
        parts.append(f"{len(wrong)} incorrect")
    if misplaced:
        parts.append(f"{len(misplaced)} misplaced")
    if extra:
        parts.append(f"{len(extra)} extra")

    if not parts:
        return "minor issues"
    return ", ".join(parts)


__all__ = [
    "FALLBACK_HINT",
    "PERFECT_MATCH",
    "ProblemTokens",
    "describe_error_types",
    "extract_problem_tokens",
    "feedback_hint",
    "format_tokens_for_hint",
]
