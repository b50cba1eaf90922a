"""Answer validation for quiz questions.

- AnswerValidationService: looks up the answer key and dispatches by type
- AnswerValidator subclasses: per question type checking
- feedback: Greek feedback messages
"""

from validation.handlers import (
    VALIDATORS,
    AnswerValidator,
    ExactChoiceValidator,
    FillBlankValidator,
    TrueFalseValidator,
    get_validator,
)
from validation.service import AnswerValidationService, error_response

__all__ = [
    "AnswerValidationService",
    "error_response",
    "AnswerValidator",
    "FillBlankValidator",
    "TrueFalseValidator",
    "ExactChoiceValidator",
    "VALIDATORS",
    "get_validator",
]
