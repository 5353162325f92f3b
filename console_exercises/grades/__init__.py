"""Grade calculator."""

from .calculator import GradeReport, calculate_grade, is_valid_mark

__all__ = ["GradeReport", "calculate_grade", "is_valid_mark"]
