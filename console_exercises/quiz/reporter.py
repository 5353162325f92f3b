"""Render the results of a finished quiz."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from console_exercises.models.quiz import Question, QuizState


def render_results(
    state: QuizState, questions: Sequence[Question], console: Console
) -> None:
    """Print the final score and a per-question summary in question order."""
    console.print("\n[bold green]Quiz Complete![/bold green]")
    console.print(f"Your final score: {state.score} out of {len(questions)}")
    console.print("\n[bold]Summary:[/bold]")

    for result, question in zip(state.results, questions):
        console.print(f"Question {result.question_number}: {escape(question.text)}")
        if result.correct:
            console.print("[green]Correct![/green]\n")
        else:
            console.print(
                "[red]Incorrect.[/red] Correct answer: "
                f"{escape(question.correct_option)}\n"
            )
