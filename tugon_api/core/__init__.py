"""Core utilities package"""

from .config import settings, get_settings, Settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    TugonError,
    ValidationError,
    FeedbackError,
    register_error_handlers,
)

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "TugonError",
    "ValidationError",
    "FeedbackError",
    "register_error_handlers",
]
