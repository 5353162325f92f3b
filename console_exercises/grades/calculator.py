"""Grade calculation from subject marks."""

from pydantic import BaseModel, Field, computed_field

MAX_MARKS = 100

# (minimum average percentage, grade), checked from the top
GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)


def calculate_grade(average_percentage: float) -> str:
    """
    Calculate the letter grade for an average percentage.

    Args:
        average_percentage: Average of the marks, 0 to 100

    Returns:
        One of A, B, C, D or F
    """
    for minimum, grade in GRADE_THRESHOLDS:
        if average_percentage >= minimum:
            return grade
    return "F"


def is_valid_mark(mark: int) -> bool:
    """Check that a mark lies between 0 and MAX_MARKS."""
    return 0 <= mark <= MAX_MARKS


class GradeReport(BaseModel):
    """Total, average and grade for a set of subject marks."""

    marks: list[int] = Field(..., min_length=1, description="Marks per subject")

    @computed_field
    @property
    def total_marks(self) -> int:
        return sum(self.marks)

    @computed_field
    @property
    def average_percentage(self) -> float:
        return self.total_marks / len(self.marks)

    @computed_field
    @property
    def grade(self) -> str:
        return calculate_grade(self.average_percentage)

    @classmethod
    def from_marks(cls, marks: list[int]) -> "GradeReport":
        """Build a report, rejecting marks outside 0 to MAX_MARKS."""
        for number, mark in enumerate(marks, start=1):
            if not is_valid_mark(mark):
                raise ValueError(
                    f"Marks for subject {number} must be between 0 and {MAX_MARKS}, got {mark}"
                )
        return cls(marks=marks)
