"""Timed multiple choice quiz."""

from .driver import run_quiz
from .input import InputExhausted, LineReader
from .questions import DEFAULT_QUESTIONS, QuestionBankError, load_questions
from .reporter import render_results
from .runner import TimedQuestion, TimedQuestionRunner, parse_choice

__all__ = [
    "DEFAULT_QUESTIONS",
    "InputExhausted",
    "LineReader",
    "QuestionBankError",
    "TimedQuestion",
    "TimedQuestionRunner",
    "load_questions",
    "parse_choice",
    "render_results",
    "run_quiz",
]
