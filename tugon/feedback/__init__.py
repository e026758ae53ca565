"""
tugon.feedback - Word-game style feedback for math answers

Provides:
- Positional token classification (exact / misplaced / absent / surplus)
- Completion and incompleteness checks
- Hint messages and hint-composition helpers
- FeedbackResult, the bundled outcome of one comparison
"""

from .hints import (
    ProblemTokens,
    describe_error_types,
    extract_problem_tokens,
    feedback_hint,
    format_tokens_for_hint,
)
from .result import FeedbackResult, build_feedback, evaluate
from .token_feedback import (
    ClassifiedToken,
    TokenStatus,
    compare,
    count_statuses,
    is_complete,
    is_incomplete,
)

__all__ = [
    "ClassifiedToken",
    "TokenStatus",
    "compare",
    "count_statuses",
    "is_complete",
    "is_incomplete",
    "feedback_hint",
    "ProblemTokens",
    "extract_problem_tokens",
    "format_tokens_for_hint",
    "describe_error_types",
    "FeedbackResult",
    "build_feedback",
    "evaluate",
]
