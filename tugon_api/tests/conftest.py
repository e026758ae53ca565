"""
Pytest configuration and fixtures.

Provides shared fixtures for service tests.
"""

import pytest
from fastapi.testclient import TestClient

from tugon_api.core.config import Settings
from tugon_api.main import app
from tugon_api.services import FeedbackService


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def small_settings() -> Settings:
    """Settings with tight input limits"""
    return Settings(MAX_EXPRESSION_LENGTH=10, MAX_TOKENS=3)


@pytest.fixture
def feedback_service(small_settings) -> FeedbackService:
    """Feedback service with tight input limits"""
    return FeedbackService(small_settings)
