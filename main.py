"""Main entry point for the console-exercises CLI."""

from console_exercises.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
