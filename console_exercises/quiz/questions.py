"""Built-in question set and loading questions from JSON files."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from console_exercises.models.quiz import Question

logger = logging.getLogger(__name__)

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        text="What is the largest planet in our solar system?",
        options=("Earth", "Mars", "Jupiter", "Saturn"),
        correct_answer=3,
    ),
    Question(
        text='Who wrote the play "Romeo and Juliet"?',
        options=("William Shakespeare", "Charles Dickens", "Jane Austen", "Mark Twain"),
        correct_answer=1,
    ),
    Question(
        text="What is the chemical symbol for water?",
        options=("O2", "H2O", "CO2", "NaCl"),
        correct_answer=2,
    ),
    Question(
        text='Which element is known as the "King of Metals"?',
        options=("Gold", "Silver", "Iron", "Platinum"),
        correct_answer=1,
    ),
    Question(
        text="What is the capital of India?",
        options=("Mumbai", "Delhi", "Bangalore", "Kolkata"),
        correct_answer=2,
    ),
    Question(
        text='Who painted the "Mona Lisa"?',
        options=("Vincent van Gogh", "Pablo Picasso", "Leonardo da Vinci", "Claude Monet"),
        correct_answer=3,
    ),
    Question(
        text='Which planet is known as the "Blue Planet"?',
        options=("Mars", "Venus", "Neptune", "Earth"),
        correct_answer=4,
    ),
    Question(
        text="In what year did the Titanic sink?",
        options=("1905", "1912", "1923", "1930"),
        correct_answer=2,
    ),
    Question(
        text="What is the hardest natural substance on Earth?",
        options=("Gold", "Iron", "Diamond", "Quartz"),
        correct_answer=3,
    ),
    Question(
        text='Who is known as the "Father of Computers"?',
        options=("Albert Einstein", "Charles Babbage", "Isaac Newton", "Thomas Edison"),
        correct_answer=2,
    ),
)

_question_list = TypeAdapter(list[Question])


class QuestionBankError(Exception):
    """Raised when a question file cannot be read or is invalid."""


def load_questions(path: Path | str) -> list[Question]:
    """
    Load questions from a JSON file.

    The file holds a list of objects with ``text``, ``options`` and
    ``correct_answer`` (1-based) keys.

    Args:
        path: Path to the JSON file

    Returns:
        The validated questions, in file order

    Raises:
        QuestionBankError: If the file is missing, not JSON, empty or invalid
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise QuestionBankError(f"Cannot read question file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise QuestionBankError(f"Invalid JSON in {path}: {e}") from e

    try:
        questions = _question_list.validate_python(raw)
    except ValidationError as e:
        raise QuestionBankError(f"Invalid questions in {path}: {e}") from e

    if not questions:
        raise QuestionBankError(f"No questions found in {path}")

    logger.info("Loaded %d questions from %s", len(questions), path)
    return questions
