"""Answer validators, one per question type."""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any

from models import QuestionType, ValidationRequest, ValidationResponse
from matching import MatchingConfig, SERVER_CONFIG, classify_feedback, validate_blanks
from storage import AnswerKeyLookup
from validation import feedback

logger = logging.getLogger(__name__)


class AnswerValidator(ABC):
    """Abstract base class for answer validators.

    Each question type implements this interface to provide:
    - Answer key loading from the lookup
    - Answer checking against the loaded key

    To support a new question type:
    1. Add the value to QuestionType in models.py
    2. Create a class extending AnswerValidator
    3. Register it in the VALIDATORS dict below
    """

    def __init__(self, config: MatchingConfig | None = None):
        self.config = config or SERVER_CONFIG

    @abstractmethod
    def load_key(self, lookup: AnswerKeyLookup, question_id: str) -> Any:
        """Load the answer key for a question.

        Returns:
            The key, or None if the question has no usable key.
        """
        ...

    @abstractmethod
    def check(self, request: ValidationRequest, key: Any) -> ValidationResponse:
        """Check the submitted answer against a loaded key."""
        ...


class FillBlankValidator(AnswerValidator):
    """Fuzzy per-blank validation with partial credit."""

    def load_key(self, lookup: AnswerKeyLookup, question_id: str) -> list[str] | None:
        return lookup.get_blank_answers(question_id)

    def check(
        self, request: ValidationRequest, key: list[str]
    ) -> ValidationResponse:
        result = validate_blanks(request.user_answers or [], key, self.config)

        for index, detail in enumerate(result.details):
            logger.debug(
                "Blank %d: %r vs %r -> %s (similarity %.3f)",
                index,
                detail.normalized_user,
                detail.normalized_correct,
                feedback.tier_message(classify_feedback(detail, self.config)),
                detail.similarity,
            )

        similarity = result.overall_similarity
        if math.isnan(similarity):
            similarity = 0.0

        return ValidationResponse(
            is_correct=result.has_blanks and result.is_correct,
            similarity=similarity,
            correct_answer=", ".join(key),
            feedback=feedback.blanks_feedback(result),
            per_blank_results=result.per_blank_results,
            correct_count=result.correct_count,
            total_blanks=result.total_blanks,
            correct_answers=list(key),
        )


class TrueFalseValidator(AnswerValidator):
    """Case-insensitive comparison of true/false answers."""

    def load_key(self, lookup: AnswerKeyLookup, question_id: str) -> str | None:
        return lookup.get_correct_answer(question_id)

    def check(self, request: ValidationRequest, key: str) -> ValidationResponse:
        is_correct = _answer_text(request).strip().lower() == key.strip().lower()
        return _single_answer_response(is_correct, key)


class ExactChoiceValidator(AnswerValidator):
    """Exact comparison for multiple-choice and matching answers."""

    def load_key(self, lookup: AnswerKeyLookup, question_id: str) -> str | None:
        return lookup.get_correct_answer(question_id)

    def check(self, request: ValidationRequest, key: str) -> ValidationResponse:
        is_correct = _answer_text(request) == key
        return _single_answer_response(is_correct, key)


def _answer_text(request: ValidationRequest) -> str:
    """Render the single answer as text; booleans become 'true'/'false'."""
    answer = request.user_answer
    if answer is None:
        return ""
    if isinstance(answer, bool):
        return "true" if answer else "false"
    return answer


def _single_answer_response(is_correct: bool, key: str) -> ValidationResponse:
    return ValidationResponse(
        is_correct=is_correct,
        similarity=1.0 if is_correct else 0.0,
        correct_answer=key,
        feedback=feedback.choice_feedback(is_correct),
    )


# Registry of validator classes
VALIDATORS: dict[QuestionType, type[AnswerValidator]] = {
    QuestionType.FILL_IN_THE_BLANK: FillBlankValidator,
    QuestionType.TRUE_FALSE: TrueFalseValidator,
    QuestionType.MULTIPLE_CHOICE: ExactChoiceValidator,
    QuestionType.MATCHING: ExactChoiceValidator,
}


def get_validator(
    question_type: QuestionType, config: MatchingConfig | None = None
) -> AnswerValidator:
    """Get a validator instance for the given question type."""
    return VALIDATORS[question_type](config)
