"""
Feedback service.

Runs the tokenizer and the token feedback engine for API requests and
enforces the configured input limits.
"""

from typing import List, Optional, Sequence

from tugon.feedback import build_feedback
from tugon.parser import Tokenizer

from ..core.config import Settings, get_settings
from ..core.errors import FeedbackError, ValidationError
from ..core.logging import get_logger
from ..models.domain import AnswerFeedback

logger = get_logger(__name__)


class FeedbackService:
    """
    Service for tokenization and answer feedback.

    Stateless apart from its configuration; safe to share between requests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tokenizer: Optional[Tokenizer] = None
    ):
        self.settings = settings or get_settings()
        self.tokenizer = tokenizer or Tokenizer()

        logger.debug("FeedbackService initialized")

    async def tokenize(self, expression: str) -> List[str]:
        """
        Tokenize a single expression.

        Raises:
            ValidationError: If the expression exceeds MAX_EXPRESSION_LENGTH
        """
        self._check_expression("expression", expression)
        tokens = self.tokenizer.tokenize(expression)

        logger.debug(
            "Expression tokenized",
            extra_data={"length": len(expression), "num_tokens": len(tokens)}
        )
        return tokens

    async def feedback(self, answer: str, expected: str) -> AnswerFeedback:
        """
        Compare a student answer with the expected answer.

        Args:
            answer: Raw student input
            expected: Raw expected answer

        Returns:
            Feedback for every student token plus hint and summary

        Raises:
            ValidationError: If either expression is too long
            FeedbackError: If the comparison fails
        """
        self._check_expression("answer", answer)
        self._check_expression("expected", expected)

        return await self.feedback_from_tokens(
            self.tokenizer.tokenize(answer),
            self.tokenizer.tokenize(expected)
        )

    async def feedback_from_tokens(
        self,
        user_tokens: Sequence[str],
        expected_tokens: Sequence[str]
    ) -> AnswerFeedback:
        """
        Compare two already tokenized sequences.

        Raises:
            ValidationError: If either sequence exceeds MAX_TOKENS
            FeedbackError: If the comparison fails
        """
        self._check_tokens("user_tokens", user_tokens)
        self._check_tokens("expected_tokens", expected_tokens)

        try:
            result = build_feedback(user_tokens, expected_tokens)
        except Exception as e:
            logger.error(
                "Failed to compute feedback",
                extra_data={
                    "num_user_tokens": len(user_tokens),
                    "num_expected_tokens": len(expected_tokens),
                    "error": str(e)
                }
            )
            raise FeedbackError(str(e)) from e

        logger.info(
            "Feedback computed",
            extra_data={
                "num_user_tokens": len(user_tokens),
                "num_expected_tokens": len(expected_tokens),
                "complete": result.complete,
                "hint": result.hint
            }
        )

        return AnswerFeedback.from_result(result)

    def _check_expression(self, field: str, value: str) -> None:
        limit = self.settings.MAX_EXPRESSION_LENGTH
        if len(value) > limit:
            raise ValidationError(
                f"{field} too long (max {limit} characters)", field=field
            )

    def _check_tokens(self, field: str, tokens: Sequence[str]) -> None:
        limit = self.settings.MAX_TOKENS
        if len(tokens) > limit:
            raise ValidationError(
                f"{field} has too many tokens (max {limit})", field=field
            )


# Factory function for dependency injection
def get_feedback_service() -> FeedbackService:
    """Create feedback service instance"""
    return FeedbackService()
