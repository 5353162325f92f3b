"""Console exercises: a timed quiz, a grade calculator and an ATM simulator."""

__version__ = "0.1.0"
