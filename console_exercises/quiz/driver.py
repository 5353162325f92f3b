"""Quiz driver: runs the questions one after another and keeps score."""

import logging
from collections.abc import Sequence

from rich.console import Console

from console_exercises.models.quiz import Question, QuizState
from console_exercises.quiz.runner import TimedQuestionRunner

logger = logging.getLogger(__name__)


def run_quiz(
    questions: Sequence[Question],
    runner: TimedQuestionRunner,
    time_limit: float,
    console: Console,
) -> QuizState:
    """
    Ask every question in order and record whether it was answered correctly.

    A timed out question counts as incorrect. InputExhausted from the runner
    is not caught: the remaining questions are abandoned rather than recorded
    as missed.

    Args:
        questions: Questions in presentation order
        runner: Runner used for each question
        time_limit: Seconds allowed per question
        console: Console for the question headers

    Returns:
        The final QuizState
    """
    state = QuizState()

    for number, question in enumerate(questions, start=1):
        console.print(f"\n[bold]Question {number}:[/bold]")
        outcome = runner.run(question, time_limit)
        result = state.record(outcome, question)
        logger.info(
            "Question %d recorded as %s",
            number,
            "correct" if result.correct else "incorrect",
            extra={"event_type": "question_recorded", "outcome": outcome.kind},
        )

    return state
