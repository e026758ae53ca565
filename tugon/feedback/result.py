"""
Feedback result data structure.

FeedbackResult bundles everything the presentation layer needs after one
comparison: the classified tokens, the hint, completion flags and the
problem-token groups used for longer hints.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..parser.tokenizer import tokenize
from .hints import (
    ProblemTokens,
    describe_error_types,
    extract_problem_tokens,
    feedback_hint,
    format_tokens_for_hint,
)
from .token_feedback import (
    ClassifiedToken,
    TokenStatus,
    compare,
    count_statuses,
    is_complete,
    is_incomplete,
)


class FeedbackResult(BaseModel):
    """
    Result of comparing a student answer with the expected answer.

    Attributes:
        tokens: One classified token per student token
        user_tokens: Student token sequence
        expected_tokens: Expected token sequence
        hint: One-line hint message
        complete: True for a perfect match
        incomplete: True if the student supplied fewer tokens than expected
    """

    model_config = ConfigDict(frozen=True)

    tokens: tuple[ClassifiedToken, ...] = ()
    user_tokens: tuple[str, ...] = ()
    expected_tokens: tuple[str, ...] = ()
    hint: str = ""
    complete: bool = False
    incomplete: bool = False

    @property
    def counts(self) -> dict[TokenStatus, int]:
        return count_statuses(self.tokens)

    @property
    def problem_tokens(self) -> ProblemTokens:
        return extract_problem_tokens(self.tokens)

    @property
    def wrong_tokens(self) -> tuple[str, ...]:
        return self.problem_tokens.wrong

    @property
    def misplaced_tokens(self) -> tuple[str, ...]:
        return self.problem_tokens.misplaced

    @property
    def extra_tokens(self) -> tuple[str, ...]:
        return self.problem_tokens.extra

    def summary(self) -> str:
        """Quoted summary of the tokens to check, e.g. '"x", "3" and 2 more'."""
        return format_tokens_for_hint(*self.problem_tokens)

    def error_types(self) -> str:
        return describe_error_types(*self.problem_tokens)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation suitable for JSON/API responses
        """
        problem = self.problem_tokens
        return {
            "tokens": [item.to_dict() for item in self.tokens],
            "user_tokens": list(self.user_tokens),
            "expected_tokens": list(self.expected_tokens),
            "hint": self.hint,
            "complete": self.complete,
            "incomplete": self.incomplete,
            "counts": {status.value: n for status, n in self.counts.items()},
            "wrong_tokens": list(problem.wrong),
            "misplaced_tokens": list(problem.misplaced),
            "extra_tokens": list(problem.extra),
            "summary": self.summary(),
            "error_types": self.error_types(),
        }


def build_feedback(
    user_tokens: Sequence[str], expected_tokens: Sequence[str]
) -> FeedbackResult:
    """
    Compare two token sequences and assemble the full result.

    Args:
        user_tokens: Tokens of the student's answer
        expected_tokens: Tokens of the expected answer

    Returns:
        FeedbackResult for the comparison
    """
    user = tuple(user_tokens)
    expected = tuple(expected_tokens)
    classified = compare(user, expected)

    return FeedbackResult(
        tokens=classified,
        user_tokens=user,
        expected_tokens=expected,
        hint=feedback_hint(classified, user, expected),
        complete=is_complete(classified, len(expected)),
        incomplete=is_incomplete(user, expected),
    )


def evaluate(user_input: str, expected_input: str) -> FeedbackResult:
    """
    Tokenize both expressions and compare them.

    Example:
        >>> evaluate("x+3", "x+2").hint
        '1 wrong token — check your expression'
    """
    return build_feedback(tokenize(user_input), tokenize(expected_input))


__all__ = [
    "FeedbackResult",
    "build_feedback",
    "evaluate",
]
