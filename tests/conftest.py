"""Shared test fixtures and configuration for pytest."""

import io
import queue
from collections.abc import Callable, Iterator

import pytest
from rich.console import Console

from console_exercises.models.quiz import Question
from console_exercises.quiz.input import LineReader
from console_exercises.quiz.questions import DEFAULT_QUESTIONS
from console_exercises.quiz.runner import TimedQuestionRunner

# Correct answers of the built-in question set, in order
DEFAULT_CORRECT_ANSWERS = ["3", "1", "2", "1", "2", "3", "4", "2", "3", "2"]


class FeedSource:
    """Line source that blocks until lines are fed; close() ends the input."""

    def __init__(self):
        self._lines: queue.Queue[str] = queue.Queue()

    def feed(self, *lines: str) -> None:
        for line in lines:
            self._lines.put(line + "\n")

    def close(self) -> None:
        self._lines.put("")

    def readline(self) -> str:
        return self._lines.get()


class ManualCountdown:
    """Stand-in for threading.Timer that only fires when told to."""

    def __init__(self, interval, function, args=(), fire_on_start=False, on_start=None):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        self._fire_on_start = fire_on_start
        self._on_start = on_start

    def start(self) -> None:
        self.started = True
        if self._on_start is not None:
            self._on_start()
        if self._fire_on_start:
            self.fire()

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if not self.cancelled:
            self.function(*self.args)


class CountdownFactory:
    """Creates ManualCountdowns; the ones numbered in ``expire_on`` fire on start.

    ``on_start`` maps countdown numbers to callbacks run when that countdown
    starts, which is when its question is on screen.
    """

    def __init__(self, expire_on=(), on_start=None):
        self.expire_on = set(expire_on)
        self.on_start = dict(on_start or {})
        self.created: list[ManualCountdown] = []

    def __call__(self, interval, function, args=()):
        number = len(self.created) + 1
        countdown = ManualCountdown(
            interval,
            function,
            args,
            fire_on_start=number in self.expire_on,
            on_start=self.on_start.get(number),
        )
        self.created.append(countdown)
        return countdown


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving everything printed to the console."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Plain console writing to the output buffer."""
    return Console(file=output, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def feed_source() -> Iterator[FeedSource]:
    """A blocking line source, closed after the test to release the reader."""
    source = FeedSource()
    yield source
    source.close()


@pytest.fixture
def make_reader() -> Iterator[Callable[..., LineReader]]:
    """Factory for line readers that are closed after the test."""
    readers: list[LineReader] = []

    def _make(source) -> LineReader:
        reader = LineReader(source)
        readers.append(reader)
        return reader

    yield _make
    for reader in readers:
        reader.close()


@pytest.fixture
def make_runner(
    console: Console, make_reader: Callable[..., LineReader]
) -> Callable[..., TimedQuestionRunner]:
    """Factory for runners reading from a source and printing to the test console."""

    def _make(source, countdown_factory=None) -> TimedQuestionRunner:
        reader = make_reader(source)
        if countdown_factory is None:
            return TimedQuestionRunner(reader, console)
        return TimedQuestionRunner(reader, console, countdown_factory=countdown_factory)

    return _make


@pytest.fixture
def sample_question() -> Question:
    """Create a sample Question for testing."""
    return Question(
        text="What is the largest planet in our solar system?",
        options=("Earth", "Mars", "Jupiter", "Saturn"),
        correct_answer=3,
    )


@pytest.fixture
def two_option_question() -> Question:
    """Create a Question with the minimum number of options."""
    return Question(
        text="Is water wet?",
        options=("Yes", "No"),
        correct_answer=1,
    )


@pytest.fixture
def default_questions() -> list[Question]:
    """The built-in ten question set."""
    return list(DEFAULT_QUESTIONS)


@pytest.fixture
def correct_answers() -> list[str]:
    """Correct answers of the built-in question set."""
    return list(DEFAULT_CORRECT_ANSWERS)


@pytest.fixture
def make_countdowns() -> Callable[..., CountdownFactory]:
    """Factory for manual countdown factories (``expire_on`` numbers fire on start)."""
    return CountdownFactory
