"""Pydantic models for quiz data structures."""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator


class Question(BaseModel):
    """A multiple choice question with a 1-based correct answer index."""

    text: str = Field(..., min_length=1, description="The question text")
    options: tuple[str, ...] = Field(
        ...,
        min_length=2,
        description="Answer options, presented numbered from 1",
    )
    correct_answer: int = Field(
        ...,
        ge=1,
        description="Number of the correct option (1-based)",
    )

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure no option is blank."""
        for number, option in enumerate(v, start=1):
            if not option or not option.strip():
                raise ValueError(f"Option {number} cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_correct_answer(self) -> "Question":
        """Ensure the correct answer points at one of the options."""
        if self.correct_answer > len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range "
                f"for {len(self.options)} options"
            )
        return self

    @property
    def option_count(self) -> int:
        """Get the number of options."""
        return len(self.options)

    @property
    def correct_option(self) -> str:
        """Get the text of the correct option."""
        return self.options[self.correct_answer - 1]

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "text": "What is the largest planet in our solar system?",
                "options": ["Earth", "Mars", "Jupiter", "Saturn"],
                "correct_answer": 3,
            }
        },
    }


class Answered(BaseModel):
    """A valid option was selected before the countdown elapsed."""

    kind: Literal["answered"] = "answered"
    selected_index: int = Field(..., ge=1, description="Selected option (1-based)")

    model_config = {"frozen": True}


class TimedOut(BaseModel):
    """The countdown elapsed before a valid option was selected."""

    kind: Literal["timed_out"] = "timed_out"

    model_config = {"frozen": True}


AnswerOutcome = Union[Answered, TimedOut]


class QuestionPhase(str, Enum):
    """Phases of a single timed question."""

    AWAITING_INPUT = "awaiting_input"
    ANSWERED = "answered"
    EXPIRED = "expired"


class QuestionResult(BaseModel):
    """How one question of a quiz run ended."""

    question_number: int = Field(..., ge=1)
    outcome: AnswerOutcome = Field(..., discriminator="kind")
    correct: bool


class QuizState(BaseModel):
    """Score and per-question correctness record of a quiz run."""

    score: int = Field(default=0, ge=0)
    results: list[QuestionResult] = Field(default_factory=list)

    def record(self, outcome: AnswerOutcome, question: Question) -> QuestionResult:
        """Score an outcome against its question and append it to the record."""
        correct = (
            isinstance(outcome, Answered)
            and outcome.selected_index == question.correct_answer
        )
        result = QuestionResult(
            question_number=len(self.results) + 1,
            outcome=outcome,
            correct=correct,
        )
        self.results.append(result)
        if correct:
            self.score += 1
        return result

    @property
    def correctness(self) -> list[bool]:
        """Correctness flags in question order."""
        return [result.correct for result in self.results]

    @property
    def total_questions(self) -> int:
        """Number of questions recorded so far."""
        return len(self.results)
