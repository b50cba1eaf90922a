"""Server-side answer validation.

The answer key never leaves this layer: the client sends its answers and
receives a verdict, the correct answer for display, and feedback text.
Lookup failures degrade to an ordinary "incorrect" response so the client
renders every outcome the same way.
"""

import logging
import sqlite3

from models import QuestionType, ValidationRequest, ValidationResponse
from matching import MatchingConfig, SERVER_CONFIG
from storage import AnswerKeyLookup
from validation import feedback
from validation.handlers import get_validator

logger = logging.getLogger(__name__)

KEY_NOT_FOUND = "answer key not found"
KEY_LOOKUP_FAILED = "answer key lookup failed"


def error_response(
    question_type: QuestionType | None = None, reason: str = KEY_NOT_FOUND
) -> ValidationResponse:
    """Build the response returned when a question cannot be validated."""
    response = ValidationResponse(
        is_correct=False,
        similarity=0.0,
        correct_answer="",
        feedback=feedback.VALIDATION_ERROR,
        error=reason,
    )
    if question_type in (None, QuestionType.FILL_IN_THE_BLANK):
        response.per_blank_results = []
        response.correct_count = 0
        response.total_blanks = 0
        response.correct_answers = []
    return response


class AnswerValidationService:
    """Validates submitted answers against stored answer keys."""

    def __init__(
        self,
        lookup: AnswerKeyLookup,
        config: MatchingConfig | None = None,
    ):
        self.lookup = lookup
        self.config = config or SERVER_CONFIG

    def validate(self, request: ValidationRequest) -> ValidationResponse:
        """Validate one answer submission.

        Never raises for a missing or unreadable answer key; those produce
        an error response with ``is_correct=False``.
        """
        logger.debug(
            "Validating question %s (%s)",
            request.question_id,
            request.question_type.value,
        )
        validator = get_validator(request.question_type, self.config)

        try:
            key = validator.load_key(self.lookup, request.question_id)
        except (sqlite3.Error, ValueError):
            logger.exception(
                "Answer key lookup failed for question %s", request.question_id
            )
            return error_response(request.question_type, KEY_LOOKUP_FAILED)

        if key is None:
            logger.warning("No answer key found for question %s", request.question_id)
            return error_response(request.question_type, KEY_NOT_FOUND)

        response = validator.check(request, key)
        logger.debug(
            "Question %s: correct=%s similarity=%.3f",
            request.question_id,
            response.is_correct,
            response.similarity,
        )
        return response
