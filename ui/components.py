from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich import box

from models import AggregateResult, ValidationResponse
from matching import MatchingConfig, classify_feedback
from validation.feedback import tier_message
from ui.styles import (
    AEGEAN_BLUE,
    ERROR_RED,
    MUTED_GRAY,
    SUCCESS_GREEN,
    create_error_header,
    create_success_header,
    get_similarity_style,
    get_tier_style,
)


class ValidationPanel:
    """A styled panel showing the outcome of one answer validation."""

    def __init__(self, response: ValidationResponse, question_id: str = ""):
        self.response = response
        self.question_id = question_id

    def render(self) -> Panel:
        response = self.response
        content = Text()

        if response.is_correct:
            content.append_text(create_success_header(response.feedback))
        else:
            content.append_text(create_error_header(response.feedback))
        content.append("\n\n")

        if response.error:
            content.append(f"Error: {response.error}\n", Style(color=ERROR_RED))

        if response.correct_answer:
            content.append("Correct answer: ", Style(color=MUTED_GRAY))
            content.append(f"{response.correct_answer}\n", Style(bold=True))

        content.append("Similarity: ", Style(color=MUTED_GRAY))
        content.append(
            f"{response.similarity:.0%}", get_similarity_style(response.similarity)
        )

        if response.total_blanks:
            content.append("\nBlanks: ", Style(color=MUTED_GRAY))
            content.append(
                f"{response.correct_count}/{response.total_blanks} ", Style(bold=True)
            )
            for matched in response.per_blank_results or []:
                content.append(
                    "●" if matched else "○",
                    Style(color=SUCCESS_GREEN if matched else ERROR_RED),
                )

        title = f"Question {self.question_id}" if self.question_id else "Result"
        border = SUCCESS_GREEN if response.is_correct else ERROR_RED
        return Panel(
            content,
            title=title,
            border_style=Style(color=border),
            box=box.ROUNDED,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class BlankResultsTable:
    """Table of per-blank comparisons from an aggregate result."""

    def __init__(
        self,
        user_answers: list[str],
        correct_answers: list[str],
        result: AggregateResult,
        config: MatchingConfig | None = None,
    ):
        self.user_answers = user_answers
        self.correct_answers = correct_answers
        self.result = result
        self.config = config

    def render(self) -> Table:
        table = Table(
            box=box.SIMPLE_HEAVY,
            header_style=Style(color=AEGEAN_BLUE, bold=True),
            show_footer=True,
        )
        table.add_column("#", justify="right", style=Style(color=MUTED_GRAY))
        table.add_column("Answer")
        table.add_column("Expected")
        table.add_column("Similarity", justify="right")
        table.add_column("Result", footer=self._footer())

        for index, expected in enumerate(self.correct_answers):
            given = (
                self.user_answers[index] if index < len(self.user_answers) else ""
            )
            if index < len(self.result.details):
                detail = self.result.details[index]
                tier = classify_feedback(detail, self.config)
                similarity = Text(
                    f"{detail.similarity:.0%}", get_similarity_style(detail.similarity)
                )
                verdict = Text(tier_message(tier), get_tier_style(tier))
            else:
                similarity = Text("-", Style(color=MUTED_GRAY))
                verdict = Text("missing", Style(color=ERROR_RED))
            table.add_row(str(index + 1), given, expected, similarity, verdict)

        return table

    def _footer(self) -> str:
        return f"{self.result.correct_count}/{self.result.total_blanks}"

    def __rich__(self) -> Table:
        return self.render()
