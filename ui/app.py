from rich.console import Console
from rich.text import Text

from models import AggregateResult, ValidationResponse
from matching import MatchingConfig
from ui.components import BlankResultsTable, ValidationPanel
from ui.styles import DEFAULT_THEME, ERROR_RED, INFO_BLUE, MUTED_GRAY, SUCCESS_GREEN
from typing import Optional


class QuizUI:
    """Terminal output for the quiz command line."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=DEFAULT_THEME)

    def show_validation(
        self, response: ValidationResponse, question_id: str = ""
    ) -> None:
        """Display the outcome of a validation request."""
        self.console.print(ValidationPanel(response, question_id))

    def show_blank_results(
        self,
        user_answers: list[str],
        correct_answers: list[str],
        result: AggregateResult,
        config: Optional[MatchingConfig] = None,
    ) -> None:
        """Display a per-blank comparison table and the overall verdict."""
        self.console.print(
            BlankResultsTable(user_answers, correct_answers, result, config)
        )
        if not result.has_blanks:
            self.show_info("Nothing to grade.")
        elif result.is_correct:
            self.console.print(Text("All blanks correct.", style=f"bold {SUCCESS_GREEN}"))
        else:
            self.console.print(
                Text(
                    f"{result.correct_count} of {result.total_blanks} blanks correct.",
                    style=f"bold {ERROR_RED}",
                )
            )

    def show_json(self, payload: str) -> None:
        """Print a JSON document."""
        self.console.print_json(payload)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=f"{INFO_BLUE}"))

    def show_muted(self, message: str) -> None:
        self.console.print(Text(message, style=f"{MUTED_GRAY}"))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(Text(f"Error: {message}", style=f"bold {ERROR_RED}"))
