"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from console_exercises.models.quiz import (
    Answered,
    Question,
    QuestionResult,
    QuizState,
    TimedOut,
)


class TestQuestion:
    """Test Question model."""

    def test_create_valid_question(self, sample_question: Question):
        """Test creating a valid question."""
        assert sample_question.text == "What is the largest planet in our solar system?"
        assert sample_question.options == ("Earth", "Mars", "Jupiter", "Saturn")
        assert sample_question.correct_answer == 3
        assert sample_question.option_count == 4
        assert sample_question.correct_option == "Jupiter"

    def test_options_accept_lists(self):
        """Test that options given as a list are stored as a tuple."""
        question = Question(text="Pick one", options=["a", "b", "c"], correct_answer=2)

        assert question.options == ("a", "b", "c")

    def test_question_requires_two_options(self):
        """Test that a single option is rejected."""
        with pytest.raises(ValidationError):
            Question(text="Test?", options=("Only",), correct_answer=1)

    @pytest.mark.parametrize("correct_answer", [0, 5, -1])
    def test_correct_answer_must_be_in_range(self, correct_answer: int):
        """Test that correct_answer must point at an option."""
        with pytest.raises(ValidationError):
            Question(
                text="Test?",
                options=("1", "2", "3", "4"),
                correct_answer=correct_answer,
            )

    def test_options_cannot_be_blank(self):
        """Test that blank options are rejected."""
        with pytest.raises(ValidationError):
            Question(text="Test?", options=("Yes", "  "), correct_answer=1)

    def test_question_is_immutable(self, sample_question: Question):
        """Test that a question cannot be changed after construction."""
        with pytest.raises(ValidationError):
            sample_question.correct_answer = 1


class TestAnswerOutcome:
    """Test the outcome variants."""

    def test_answered_requires_positive_index(self):
        """Test that option numbers start at 1."""
        with pytest.raises(ValidationError):
            Answered(selected_index=0)

    def test_outcomes_compare_by_value(self):
        """Test equality of outcome values."""
        assert Answered(selected_index=2) == Answered(selected_index=2)
        assert Answered(selected_index=2) != Answered(selected_index=3)
        assert TimedOut() == TimedOut()

    def test_result_parses_outcome_by_kind(self):
        """Test that results rebuild the right variant from plain data."""
        result = QuestionResult.model_validate(
            {"question_number": 1, "outcome": {"kind": "timed_out"}, "correct": False}
        )

        assert isinstance(result.outcome, TimedOut)


class TestQuizState:
    """Test QuizState model."""

    def test_starts_empty(self):
        """Test the initial state."""
        state = QuizState()

        assert state.score == 0
        assert state.results == []
        assert state.correctness == []

    def test_record_correct_answer(self, sample_question: Question):
        """Test that a correct answer scores a point."""
        state = QuizState()

        result = state.record(Answered(selected_index=3), sample_question)

        assert result.correct is True
        assert result.question_number == 1
        assert state.score == 1

    def test_record_wrong_answer(self, sample_question: Question):
        """Test that a wrong answer scores nothing."""
        state = QuizState()

        result = state.record(Answered(selected_index=1), sample_question)

        assert result.correct is False
        assert state.score == 0

    def test_record_timeout(self, sample_question: Question):
        """Test that a timeout counts as incorrect."""
        state = QuizState()

        state.record(TimedOut(), sample_question)

        assert state.correctness == [False]
        assert state.score == 0

    def test_results_numbered_in_order(
        self, sample_question: Question, two_option_question: Question
    ):
        """Test that results keep question order."""
        state = QuizState()
        state.record(TimedOut(), sample_question)
        state.record(Answered(selected_index=1), two_option_question)

        assert [r.question_number for r in state.results] == [1, 2]
        assert state.correctness == [False, True]
        assert state.total_questions == 2
