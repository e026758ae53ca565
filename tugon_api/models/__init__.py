"""Domain models package"""

from .domain import (
    TokenFeedbackItem,
    AnswerFeedback,
)

__all__ = [
    "TokenFeedbackItem",
    "AnswerFeedback",
]
