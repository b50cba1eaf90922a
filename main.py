import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from models import QuestionType, ValidationRequest
from matching import DeploymentContext, MatchingConfig, validate_blanks
from storage import DEFAULT_DB_PATH, get_answer_key_lookup, load_questions_file
from ui import QuizUI
from ui.styles import DEFAULT_THEME
from validation import AnswerValidationService

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_DATA_FILE = DATA_DIR / "questions.json"

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Greek quiz answer validation")
    parser.add_argument(
        "--db",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every validation step",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init-db subcommand
    init_parser = subparsers.add_parser(
        "init-db", help="Create the database and load questions"
    )
    init_parser.add_argument(
        "--data",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help=f"JSON file with questions (default: {DEFAULT_DATA_FILE.name})",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Delete an existing database first",
    )

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate", help="Validate an answer against the stored answer key"
    )
    validate_parser.add_argument("question_id", nargs="?", help="Question ID")
    validate_parser.add_argument(
        "--type",
        "-t",
        dest="question_type",
        choices=[t.value for t in QuestionType],
        default=QuestionType.FILL_IN_THE_BLANK.value,
        help="Question type (default: fill-in-the-blank)",
    )
    validate_parser.add_argument(
        "--answer", "-a", help="Answer for true-false/multiple-choice/matching"
    )
    validate_parser.add_argument(
        "--answers", nargs="*", default=None, help="One answer per blank"
    )
    validate_parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="Read the request from a JSON file instead of arguments",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the response as JSON",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check", help="Compare answers with expected answers, without a database"
    )
    check_parser.add_argument(
        "--expected", "-e", nargs="+", required=True, help="Expected answers"
    )
    check_parser.add_argument(
        "--answers", "-a", nargs="*", default=[], help="Submitted answers"
    )
    check_parser.add_argument(
        "--context",
        "-c",
        choices=[c.value for c in DeploymentContext],
        default=DeploymentContext.SERVER.value,
        help="Threshold context (default: server)",
    )

    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run_init_db(args, ui: QuizUI) -> int:
    """Run the init-db subcommand."""
    if not args.data.exists():
        ui.show_error(f"Data file not found: {args.data}")
        return 1

    if args.db.exists():
        if not args.force:
            ui.show_error(f"Database already exists: {args.db} (use --force)")
            return 1
        args.db.unlink()

    counts = load_questions_file(args.data, args.db)
    for table, count in counts.items():
        ui.show_info(f"Loaded {count} {table.replace('_', ' ')}")
    ui.show_muted(f"Database: {args.db}")
    return 0


def build_request(args) -> ValidationRequest:
    """Build a validation request from a JSON file or command line arguments."""
    if args.request is not None:
        return ValidationRequest.model_validate_json(
            args.request.read_text(encoding="utf-8")
        )
    return ValidationRequest(
        question_id=args.question_id,
        question_type=QuestionType(args.question_type),
        user_answer=args.answer,
        user_answers=args.answers,
    )


def run_validate(args, ui: QuizUI) -> int:
    """Run the validate subcommand."""
    if args.request is None and not args.question_id:
        ui.show_error("A question ID or --request file is required")
        return 2

    try:
        request = build_request(args)
    except ValidationError as e:
        ui.show_error(f"Invalid request: {e}")
        return 2

    if not args.db.exists():
        logger.warning("Database %s does not exist; run init-db first", args.db)

    service = AnswerValidationService(get_answer_key_lookup(args.db))
    response = service.validate(request)

    if args.json:
        ui.show_json(response.model_dump_json(by_alias=True, exclude_none=True))
    else:
        ui.show_validation(response, request.question_id)
    return 0 if response.error is None else 1


def run_check(args, ui: QuizUI) -> int:
    """Run the check subcommand."""
    config = MatchingConfig.for_context(DeploymentContext(args.context))
    result = validate_blanks(args.answers, args.expected, config)
    ui.show_blank_results(args.answers, args.expected, result, config)
    return 0 if result.is_correct else 1


COMMANDS = {
    "init-db": run_init_db,
    "validate": run_validate,
    "check": run_check,
}


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args(argv)

    console = console or Console(theme=DEFAULT_THEME)
    configure_logging(args.verbose, console)
    ui = QuizUI(console)

    if args.command is None:
        parser.print_help()
        return 0

    return COMMANDS[args.command](args, ui)


if __name__ == "__main__":
    sys.exit(main())
