"""
Domain models for the feedback service.

Serializable views of the core feedback types.
"""

from typing import Dict, List
from pydantic import BaseModel, Field

from tugon.feedback import ClassifiedToken, FeedbackResult, TokenStatus


class TokenFeedbackItem(BaseModel):
    """Feedback for a single student token"""
    token: str
    status: TokenStatus
    index: int = Field(..., ge=0)
    color: str

    @classmethod
    def from_classified(cls, item: ClassifiedToken) -> "TokenFeedbackItem":
        return cls(
            token=item.token,
            status=item.status,
            index=item.index,
            color=item.color,
        )


class AnswerFeedback(BaseModel):
    """Feedback for a whole answer"""
    tokens: List[TokenFeedbackItem]
    user_tokens: List[str]
    expected_tokens: List[str]
    hint: str
    complete: bool
    incomplete: bool
    counts: Dict[str, int] = Field(default_factory=dict)
    wrong_tokens: List[str] = Field(default_factory=list)
    misplaced_tokens: List[str] = Field(default_factory=list)
    extra_tokens: List[str] = Field(default_factory=list)
    summary: str = ""
    error_types: str = ""

    @classmethod
    def from_result(cls, result: FeedbackResult) -> "AnswerFeedback":
        """Convert core result to domain model"""
        problem = result.problem_tokens
        return cls(
            tokens=[TokenFeedbackItem.from_classified(t) for t in result.tokens],
            user_tokens=list(result.user_tokens),
            expected_tokens=list(result.expected_tokens),
            hint=result.hint,
            complete=result.complete,
            incomplete=result.incomplete,
            counts={status.value: n for status, n in result.counts.items()},
            wrong_tokens=list(problem.wrong),
            misplaced_tokens=list(problem.misplaced),
            extra_tokens=list(problem.extra),
            summary=result.summary(),
            error_types=result.error_types(),
        )
