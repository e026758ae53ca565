"""Tests for FeedbackResult and the evaluate() entry point."""

import pytest
from pydantic import ValidationError

from tugon.feedback import FeedbackResult, TokenStatus, build_feedback, evaluate


class TestEvaluate:
    """End-to-end comparisons of raw expressions."""

    def test_one_wrong_token(self):
        result = evaluate("x+3", "x+2")
        assert [t.status for t in result.tokens] == [
            TokenStatus.EXACT,
            TokenStatus.EXACT,
            TokenStatus.ABSENT,
        ]
        assert result.hint == "1 wrong token — check your expression"
        assert result.complete is False
        assert result.incomplete is False

    def test_incomplete(self):
        result = evaluate("x", "x+2")
        assert result.incomplete is True
        assert result.hint == "Incomplete answer: 2 more tokens needed"

    def test_surplus(self):
        result = evaluate("x+2+", "x+2")
        assert result.tokens[-1].status is TokenStatus.SURPLUS
        assert result.hint == "Too many tokens: remove 1 extra token"

    def test_perfect_match_ignores_formatting(self):
        result = evaluate("\\textcolor{green}{2}x + 5", "2x+5")
        assert result.complete is True
        assert result.hint == "Perfect match!"

    def test_tokens_recorded(self):
        result = evaluate("(-7)", "-7")
        assert result.user_tokens == ("(", "-7", ")")
        assert result.expected_tokens == ("-7",)


class TestFeedbackResult:
    """Derived views and serialization."""

    @pytest.fixture
    def result(self) -> FeedbackResult:
        return build_feedback(["3", "+", "x", "+", "y"], ["x", "+", "2"])

    def test_counts(self, result):
        assert result.counts == {
            TokenStatus.EXACT: 1,
            TokenStatus.PRESENT_MISPLACED: 1,
            TokenStatus.ABSENT: 1,
            TokenStatus.SURPLUS: 2,
        }

    def test_problem_token_groups(self, result):
        assert result.wrong_tokens == ("3",)
        assert result.misplaced_tokens == ("x",)
        assert result.extra_tokens == ("+", "y")

    def test_summary(self, result):
        assert result.summary() == '"3", "x" and 2 more'

    def test_error_types(self, result):
        assert result.error_types() == "1 incorrect, 1 misplaced, 2 extra"

    def test_to_dict(self, result):
        data = result.to_dict()
        assert data["hint"] == "Too many tokens: remove 2 extra tokens"
        assert data["counts"] == {
            "exact": 1,
            "present-misplaced": 1,
            "absent": 1,
            "surplus": 2,
        }
        assert data["tokens"][0] == {
            "token": "3",
            "status": "absent",
            "index": 0,
            "color": "red",
        }
        assert data["extra_tokens"] == ["+", "y"]
        assert data["complete"] is False

    def test_is_frozen(self, result):
        with pytest.raises(ValidationError):
            result.hint = "changed"

    def test_accepts_any_sequence(self):
        result = build_feedback(("x",), ["x"])
        assert result.user_tokens == ("x",)
        assert result.complete is True

    def test_default_is_empty(self):
        result = FeedbackResult()
        assert result.tokens == ()
        assert result.summary() == "that part"
        assert result.error_types() == "minor issues"
