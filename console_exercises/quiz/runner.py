"""Timed question runner: a countdown races the prompt for an answer.

Both activities deliver events into a queue owned by a single ``run`` call,
and only the calling thread consumes them. Events are handled in delivery
order, which makes the tie-break deterministic: a line delivered before the
expiry signal is judged first (and wins if it is valid), an expiry delivered
before a line ends the question. A late timer tick or a line read while the
question was open can only land in a queue nobody reads any more. A read still
in progress when the question ends is abandoned, and its line goes to the next
question instead.
"""

import logging
import queue
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from rich.console import Console
from rich.markup import escape

from console_exercises.models.quiz import (
    Answered,
    AnswerOutcome,
    Question,
    QuestionPhase,
    TimedOut,
)
from console_exercises.quiz.input import InputExhausted, LineReader

logger = logging.getLogger(__name__)

ANSWER_PROMPT = "Enter the number of your answer: "

_EXPIRED = object()


def parse_choice(text: str, option_count: int) -> int | None:
    """
    Parse an answer line into an option number.

    Args:
        text: Raw line typed by the user
        option_count: Number of options of the question

    Returns:
        The option number if it is an integer in [1, option_count], else None
    """
    try:
        value = int(text.strip())
    except ValueError:
        return None
    if 1 <= value <= option_count:
        return value
    return None


class TimedQuestion:
    """Phase and single-assignment outcome of one question.

    The first of ``answer`` / ``expire`` decides the outcome; every later call
    is a no-op and returns False.
    """

    def __init__(self, question: Question):
        self.question = question
        self._lock = threading.Lock()
        self._phase = QuestionPhase.AWAITING_INPUT
        self._outcome: AnswerOutcome | None = None

    @property
    def phase(self) -> QuestionPhase:
        return self._phase

    @property
    def outcome(self) -> AnswerOutcome | None:
        return self._outcome

    @property
    def done(self) -> bool:
        return self._phase is not QuestionPhase.AWAITING_INPUT

    def answer(self, selected_index: int) -> bool:
        """Record a validated selection if the question is still open."""
        return self._resolve(
            Answered(selected_index=selected_index), QuestionPhase.ANSWERED
        )

    def expire(self) -> bool:
        """Record the countdown elapsing if the question is still open."""
        return self._resolve(TimedOut(), QuestionPhase.EXPIRED)

    def _resolve(self, outcome: AnswerOutcome, phase: QuestionPhase) -> bool:
        with self._lock:
            if self.done:
                return False
            self._outcome = outcome
            self._phase = phase
            return True


class TimedQuestionRunner:
    """Present questions and collect one answer per question within a time limit."""

    def __init__(
        self,
        reader: LineReader,
        console: Console,
        countdown_factory: Callable[..., Any] = threading.Timer,
    ):
        self.reader = reader
        self.console = console
        self._countdown_factory = countdown_factory

    def run(self, question: Question, time_limit: float) -> AnswerOutcome:
        """
        Ask a question and wait for a valid answer or the end of the countdown.

        Malformed and out-of-range answers are re-prompted without pausing the
        countdown. A time limit of zero or less times out immediately without
        reading any input.

        Args:
            question: The question to present
            time_limit: Seconds allowed for answering

        Returns:
            Answered with the selected option number, or TimedOut

        Raises:
            InputExhausted: If the input ends before the question is decided
        """
        state = TimedQuestion(question)
        self._display(question)
        started = time.monotonic()
        logger.debug(
            "Question started",
            extra={
                "event_type": "question_start",
                "time_limit": time_limit,
                "option_count": question.option_count,
            },
        )

        if time_limit <= 0:
            state.expire()
            self._announce_timeout()
            return self._finish(state, started)

        events: queue.SimpleQueue = queue.SimpleQueue()
        countdown = self._countdown_factory(time_limit, events.put, args=(_EXPIRED,))
        countdown.daemon = True
        countdown.start()

        pending: Future | None = None
        try:
            while not state.done:
                if pending is None:
                    self.console.print(ANSWER_PROMPT, end="")
                    pending = self.reader.request_line()
                    pending.add_done_callback(events.put)

                event = events.get()
                if event is _EXPIRED:
                    logger.debug("Countdown of %ss elapsed", time_limit)
                    state.expire()
                    continue

                pending = None
                try:
                    line = event.result()
                except InputExhausted:
                    logger.warning("Input ended while waiting for an answer")
                    self.console.print()
                    raise

                choice = parse_choice(line, question.option_count)
                if choice is None:
                    logger.debug("Rejected answer %r", line)
                    self.console.print(
                        "Invalid choice. Please enter a number between 1 and "
                        f"{question.option_count}"
                    )
                    continue
                state.answer(choice)
        finally:
            countdown.cancel()
            if pending is not None:
                # A line still being read belongs to whoever asks next
                self.reader.abandon(pending)

        if state.phase is QuestionPhase.EXPIRED:
            self._announce_timeout()
        return self._finish(state, started)

    def _finish(self, state: TimedQuestion, started: float) -> AnswerOutcome:
        logger.info(
            "Question finished: %s",
            state.phase.value,
            extra={
                "event_type": "question_outcome",
                "phase": state.phase.value,
                "elapsed": time.monotonic() - started,
            },
        )
        return state.outcome

    def _display(self, question: Question) -> None:
        self.console.print(escape(question.text))
        for number, option in enumerate(question.options, start=1):
            self.console.print(f"{number}) {escape(option)}")

    def _announce_timeout(self) -> None:
        self.console.print("\n[bold red]Time is up![/bold red]")
