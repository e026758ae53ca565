"""Services package"""

from .feedback_service import FeedbackService, get_feedback_service

__all__ = [
    "FeedbackService",
    "get_feedback_service",
]
