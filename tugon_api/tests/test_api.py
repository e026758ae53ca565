"""
API integration tests.

Tests for API endpoints.
"""

from tugon_api.core.config import settings


def test_root_endpoint(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == settings.APP_NAME
    assert "feedback" in data["endpoints"]


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_tokenize(client):
    """Test tokenizing a LaTeX expression"""
    response = client.post("/tokenize", json={"expression": "\\frac{-2}{3}"})
    assert response.status_code == 200
    data = response.json()
    assert data["tokens"] == ["\\frac", "-2", "3"]
    assert data["expression"] == "\\frac{-2}{3}"


def test_tokenize_blank(client):
    """Test that blank input yields no tokens"""
    response = client.post("/tokenize", json={"expression": "\u200b "})
    assert response.status_code == 200
    assert response.json()["tokens"] == []


def test_feedback_one_wrong_token(client):
    """Test feedback for a single wrong token"""
    response = client.post("/feedback", json={"answer": "x+3", "expected": "x+2"})
    assert response.status_code == 200
    data = response.json()
    assert [t["status"] for t in data["tokens"]] == ["exact", "exact", "absent"]
    assert [t["color"] for t in data["tokens"]] == ["green", "green", "red"]
    assert data["hint"] == "1 wrong token — check your expression"
    assert data["wrong_tokens"] == ["3"]
    assert data["summary"] == '"3"'
    assert data["complete"] is False


def test_feedback_perfect_match(client):
    """Test feedback for a correct answer"""
    response = client.post("/feedback", json={"answer": "2x + 5", "expected": "2x+5"})
    assert response.status_code == 200
    data = response.json()
    assert data["complete"] is True
    assert data["hint"] == "Perfect match!"
    assert data["counts"]["exact"] == 4


def test_feedback_from_tokens(client):
    """Test feedback for pre-tokenized sequences"""
    response = client.post(
        "/feedback/tokens",
        json={"user_tokens": ["5", "+", "2", "x"], "expected_tokens": ["2", "x", "+", "5"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["counts"]["present-misplaced"] == 4
    assert data["hint"] == "4 tokens are in the wrong position"
    assert data["error_types"] == "4 misplaced"


def test_feedback_surplus(client):
    """Test feedback when the answer has extra tokens"""
    response = client.post("/feedback", json={"answer": "x+2+y", "expected": "x+2"})
    data = response.json()
    assert data["extra_tokens"] == ["+", "y"]
    assert data["tokens"][-1]["color"] == "grey"


def test_invalid_request_validation(client):
    """Test request validation uses the error envelope"""
    response = client.post("/feedback", json={"answer": "x"})
    assert response.status_code == 422
    data = response.json()
    assert data["error"]["type"] == "ValidationError"


def test_expression_too_long(client):
    """Test the configured expression length limit"""
    expression = "1" * (settings.MAX_EXPRESSION_LENGTH + 1)
    response = client.post("/tokenize", json={"expression": expression})
    assert response.status_code == 422
    data = response.json()
    assert data["error"]["type"] == "ValidationError"
    assert data["error"]["details"] == {"field": "expression"}


def test_unknown_route(client):
    """Test 404 responses use the error envelope"""
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.json()["error"]["type"] == "HTTPException"
