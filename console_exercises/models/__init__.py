"""Data models for the timed quiz."""

from .quiz import (
    Answered,
    AnswerOutcome,
    Question,
    QuestionPhase,
    QuestionResult,
    QuizState,
    TimedOut,
)

__all__ = [
    "Question",
    "Answered",
    "TimedOut",
    "AnswerOutcome",
    "QuestionPhase",
    "QuestionResult",
    "QuizState",
]
