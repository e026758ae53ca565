"""
Positional token feedback.

Compares a student's token sequence against the expected one and classifies
every student token, word-game style:

- exact: same token at the same index
- present-misplaced: token occurs at another, still unclaimed expected index
- absent: token does not occur in what is left of the expected sequence
- surplus: index lies beyond the end of the expected sequence

Each expected slot can be claimed by at most one student token, so a repeated
student token is only credited as often as it appears in the expected answer.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TokenStatus(str, Enum):
    """Per-token feedback classification."""

    EXACT = "exact"
    PRESENT_MISPLACED = "present-misplaced"
    ABSENT = "absent"
    SURPLUS = "surplus"

    @property
    def color(self) -> str:
        """Conventional display color for this status."""
        return _STATUS_COLORS[self]


_STATUS_COLORS = {
    TokenStatus.EXACT: "green",
    TokenStatus.PRESENT_MISPLACED: "yellow",
    TokenStatus.ABSENT: "red",
    TokenStatus.SURPLUS: "grey",
}


class ClassifiedToken(BaseModel):
    """
    A student token with its feedback status.

    Attributes:
        token: Token text
        status: Feedback classification
        index: Zero-based position in the student token sequence
    """

    model_config = ConfigDict(frozen=True)

    token: str
    status: TokenStatus
    index: int = Field(ge=0)

    @property
    def color(self) -> str:
        return self.status.color

    def to_dict(self) -> dict[str, str | int]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "token": self.token,
            "status": self.status.value,
            "index": self.index,
            "color": self.color,
        }


def compare(
    user_tokens: Sequence[str], expected_tokens: Sequence[str]
) -> tuple[ClassifiedToken, ...]:
    """
    Classify each student token against the expected tokens.

    Exact matches are resolved for the whole sequence first, then the
    remaining positions are scanned left to right. An unresolved position
    claims the leftmost unclaimed expected slot holding the same text; claimed
    slots never return to the pool.

    Args:
        user_tokens: Tokens of the student's answer
        expected_tokens: Tokens of the expected answer

    Returns:
        One ClassifiedToken per student token, in student order

    Example:
        >>> [t.status.value for t in compare(["5", "+", "2", "x"], ["2", "x", "+", "5"])]
        ['present-misplaced', 'present-misplaced', 'present-misplaced', 'present-misplaced']
    """
    expected_length = len(expected_tokens)
    claimed = [False] * expected_length
    statuses: list[TokenStatus | None] = [None] * len(user_tokens)

    # Pass 1: exact matches
    for i, token in enumerate(user_tokens[:expected_length]):
        if token == expected_tokens[i]:
            statuses[i] = TokenStatus.EXACT
            claimed[i] = True

    # Pass 2: misplaced / absent / surplus
    for i, token in enumerate(user_tokens):
        if statuses[i] is not None:
            continue

        if i >= expected_length:
            statuses[i] = TokenStatus.SURPLUS
            continue

        slot = _find_unclaimed(token, expected_tokens, claimed)
        if slot is None:
            statuses[i] = TokenStatus.ABSENT
        else:
            claimed[slot] = True
            statuses[i] = TokenStatus.PRESENT_MISPLACED

    return tuple(
        ClassifiedToken(token=token, status=status, index=i)
        for i, (token, status) in enumerate(zip(user_tokens, statuses))
    )


def _find_unclaimed(
    token: str, expected_tokens: Sequence[str], claimed: list[bool]
) -> int | None:
    """Return the leftmost unclaimed slot equal to token, if any."""
    for j, candidate in enumerate(expected_tokens):
        if not claimed[j] and candidate == token:
            return j
    return None


def count_statuses(classified: Sequence[ClassifiedToken]) -> dict[TokenStatus, int]:
    """Count tokens per status; every status is present in the result."""
    counts = {status: 0 for status in TokenStatus}
    for item in classified:
        counts[item.status] += 1
    return counts


def is_complete(classified: Sequence[ClassifiedToken], expected_length: int) -> bool:
    """
    Check whether the answer is a perfect match.

    Args:
        classified: Result of compare()
        expected_length: Number of expected tokens

    Returns:
        True if lengths agree and every token is exact
    """
    return len(classified) == expected_length and all(
        item.status is TokenStatus.EXACT for item in classified
    )


def is_incomplete(user_tokens: Sequence[str], expected_tokens: Sequence[str]) -> bool:
    """True if the student supplied fewer tokens than expected."""
    return len(user_tokens) < len(expected_tokens)


__all__ = [
    "ClassifiedToken",
    "TokenStatus",
    "compare",
    "count_statuses",
    "is_complete",
    "is_incomplete",
]
