"""Typer CLI application for the console exercises."""

import io
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from console_exercises.atm.account import (
    AuthenticationError,
    Bank,
    BankAccount,
    InsufficientBalanceError,
)
from console_exercises.config.logging_config import setup_logging
from console_exercises.config.settings import get_settings
from console_exercises.grades.calculator import GradeReport, is_valid_mark
from console_exercises.quiz.driver import run_quiz
from console_exercises.quiz.input import InputExhausted, LineReader
from console_exercises.quiz.questions import (
    DEFAULT_QUESTIONS,
    QuestionBankError,
    load_questions,
)
from console_exercises.quiz.reporter import render_results
from console_exercises.quiz.runner import TimedQuestionRunner

app = typer.Typer(
    name="console-exercises",
    help="Console exercises: timed quiz, grade calculator and ATM simulator",
    add_completion=False,
)

console = Console()


@app.command()
def quiz(
    time_limit: Optional[float] = typer.Option(
        None,
        "--time-limit",
        "-t",
        help="Seconds allowed per question (default from QUIZ_TIME_LIMIT or 10)",
        min=0.0,
    ),
    questions_file: Optional[Path] = typer.Option(
        None,
        "--questions",
        "-q",
        help="JSON file with questions instead of the built-in set",
    ),
) -> None:
    """
    Take a timed multiple choice quiz.

    Example:
        console-exercises quiz -t 15
    """
    settings = get_settings()
    limit = settings.time_limit_seconds if time_limit is None else time_limit

    questions = list(DEFAULT_QUESTIONS)
    path = questions_file or settings.questions_file
    if path is not None:
        try:
            questions = load_questions(path)
        except QuestionBankError as e:
            console.print(f"[red]Error:[/red] {e}", style="bold")
            raise typer.Exit(code=1)

    console.print("\nWelcome to quiz.\n")
    console.print(f"[dim]You have {limit:g} seconds for each question.[/dim]")

    if isinstance(sys.stdin, io.TextIOWrapper):
        # Undecodable bytes arrive as U+FFFD and are rejected like any bad answer
        sys.stdin.reconfigure(errors="replace")
    reader = LineReader(sys.stdin, name="quiz-input")
    runner = TimedQuestionRunner(reader, console)
    try:
        state = run_quiz(questions, runner, limit, console)
    except InputExhausted:
        console.print(
            "\n[yellow]Input ended before the quiz was finished. Quiz aborted.[/yellow]"
        )
        return
    finally:
        reader.close()

    render_results(state, questions, console)


@app.command()
def grades(
    marks: Optional[List[int]] = typer.Option(
        None,
        "--mark",
        "-m",
        help="Marks out of 100 (can specify multiple times: -m 90 -m 75)",
    ),
) -> None:
    """
    Calculate total, average and grade from subject marks.

    Prompts for the marks when none are given on the command line.
    """
    if marks:
        try:
            report = GradeReport.from_marks(marks)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}", style="bold")
            raise typer.Exit(code=1)
    else:
        report = GradeReport.from_marks(prompt_marks())

    display_grade_report(report)


@app.command()
def atm() -> None:
    """Simulate an ATM session: sign in, check balance, deposit and withdraw."""
    settings = get_settings()
    bank = Bank.demo(settings.max_pin_attempts)

    console.print("\n[bold cyan]Welcome to the ATM![/bold cyan]")
    account = authenticate_user(bank)
    if account is None:
        return

    while True:
        console.print("\nPlease choose an option:")
        console.print("1. Check Balance")
        console.print("2. Deposit")
        console.print("3. Withdraw")
        console.print("4. Exit")
        choice = typer.prompt("Enter your choice", type=int)

        if choice == 1:
            console.print(f"Current Balance: ${account.balance:.2f}")
        elif choice == 2:
            amount = typer.prompt("Enter amount to deposit", type=float)
            try:
                account.deposit(amount)
            except ValueError as e:
                console.print(f"[yellow]{e}[/yellow]")
            else:
                console.print(f"[green]Successfully deposited ${amount:.2f}[/green]")
        elif choice == 3:
            amount = typer.prompt("Enter amount to withdraw", type=float)
            try:
                account.withdraw(amount)
            except InsufficientBalanceError as e:
                console.print(f"[red]Error:[/red] {e}")
            except ValueError as e:
                console.print(f"[yellow]{e}[/yellow]")
            else:
                console.print(f"[green]Successfully withdrew ${amount:.2f}[/green]")
        elif choice == 4:
            console.print("Thank you for using the ATM. Goodbye!")
            break
        else:
            console.print("[yellow]Invalid option. Please try again.[/yellow]")


@app.command()
def info() -> None:
    """Display information about the console exercises."""
    settings = get_settings()
    info_text = f"""
[bold cyan]Console Exercises[/bold cyan]
Version: 0.1.0

[bold]Exercises:[/bold]
  • quiz   - Timed multiple choice quiz ({settings.time_limit_seconds:g}s per question)
  • grades - Grade calculator from subject marks
  • atm    - ATM simulator with PIN lockout after {settings.max_pin_attempts} attempts

[bold]Configuration:[/bold]
  QUIZ_TIME_LIMIT, QUIZ_QUESTIONS_FILE, ATM_MAX_PIN_ATTEMPTS, LOG_LEVEL
  (environment variables or a .env file)
    """
    console.print(Panel(info_text, title="Console Exercises Info", border_style="cyan"))


def prompt_marks() -> list[int]:
    """Ask for the number of subjects and a valid mark for each."""
    subject_count = typer.prompt("Enter the number of subjects", type=int)
    while subject_count < 1:
        subject_count = typer.prompt("Enter at least one subject", type=int)

    collected = []
    for number in range(1, subject_count + 1):
        mark = typer.prompt(f"Enter marks for subject {number} (out of 100)", type=int)
        while not is_valid_mark(mark):
            mark = typer.prompt(
                f"Enter valid marks for subject {number} (out of 100)", type=int
            )
        collected.append(mark)
    return collected


def display_grade_report(report: GradeReport) -> None:
    """Display total marks, average percentage and grade."""
    table = Table(title="Results", show_header=False, border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Total Marks", str(report.total_marks))
    table.add_row("Average Percentage", f"{report.average_percentage:.2f}%")
    table.add_row("Grade", report.grade)

    console.print()
    console.print(table)


def authenticate_user(bank: Bank) -> Optional[BankAccount]:
    """
    Prompt for a user ID and PIN until authenticated or locked out.

    Returns:
        The authenticated account, or None if authentication failed for good
    """
    while True:
        console.print("\n[bold]----------Authentication----------[/bold]")
        user_id = typer.prompt("Enter user ID")

        account = bank.get_account(user_id)
        if account is None:
            console.print("\n[red]Authentication failed:[/red] User ID not found.")
            return None

        if account.is_locked:
            console.print("[red]Account is locked due to too many failed attempts.[/red]")
            return None

        pin = typer.prompt("Enter PIN", hide_input=True)
        try:
            account.authenticate(pin)
        except AuthenticationError as e:
            console.print(f"\n[red]Authentication failed:[/red] {e}")
            if account.is_locked:
                return None
            console.print("Please try again.")
        else:
            console.print("\n[green]Authentication successful.[/green]")
            return account


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging on stderr",
    ),
) -> None:
    """
    Console Exercises - a timed quiz, a grade calculator and an ATM simulator.
    """
    setup_logging("DEBUG" if verbose else get_settings().log_level)


if __name__ == "__main__":
    app()
