"""
FastAPI backend for Tugon token feedback.

Stateless layered service:
- Service layer wrapping the tokenizer and feedback engine
- Structured logging
- Consistent JSON error envelope
- Dependency injection
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
)
from .models import AnswerFeedback
from .services import FeedbackService, get_feedback_service

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting Tugon API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down Tugon API")


app = FastAPI(
    title=settings.APP_NAME,
    description="Word-game style token feedback for typed math answers",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# API Request/Response Models
class TokenizeRequest(BaseModel):
    """Request to tokenize an expression"""
    expression: str = Field(..., description="Plain or LaTeX math expression")


class TokenizeResponse(BaseModel):
    """Tokenization response"""
    expression: str
    tokens: List[str]


class FeedbackRequest(BaseModel):
    """Request to compare a raw answer with the expected answer"""
    answer: str = Field(..., description="Student input")
    expected: str = Field(..., description="Expected answer")


class TokenFeedbackRequest(BaseModel):
    """Request to compare pre-tokenized sequences"""
    user_tokens: List[str] = Field(..., description="Student tokens")
    expected_tokens: List[str] = Field(..., description="Expected tokens")


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "tokenize": "/tokenize",
            "feedback": "/feedback",
            "feedback_tokens": "/feedback/tokens",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_expression(
    request: TokenizeRequest,
    service: FeedbackService = Depends(get_feedback_service)
):
    """Split an expression into feedback tokens"""
    tokens = await service.tokenize(request.expression)
    return TokenizeResponse(expression=request.expression, tokens=tokens)


@app.post("/feedback", response_model=AnswerFeedback)
async def answer_feedback(
    request: FeedbackRequest,
    service: FeedbackService = Depends(get_feedback_service)
):
    """
    Compare a student answer with the expected answer.

    Both strings are tokenized the same way before comparison.
    """
    logger.info(
        "Comparing answer",
        extra_data={
            "answer_length": len(request.answer),
            "expected_length": len(request.expected)
        }
    )

    return await service.feedback(request.answer, request.expected)


@app.post("/feedback/tokens", response_model=AnswerFeedback)
async def token_feedback(
    request: TokenFeedbackRequest,
    service: FeedbackService = Depends(get_feedback_service)
):
    """Compare two token sequences produced by the tokenizer"""
    return await service.feedback_from_tokens(
        request.user_tokens,
        request.expected_tokens
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "tugon_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
