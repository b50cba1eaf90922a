from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuestionType(str, Enum):
    TRUE_FALSE = "true-false"
    MULTIPLE_CHOICE = "multiple-choice"
    MATCHING = "matching"
    FILL_IN_THE_BLANK = "fill-in-the-blank"


class FeedbackTier(str, Enum):
    """User-facing feedback tier. Not a match state: matching stays binary."""

    CORRECT = "correct"
    NEAR_CORRECT = "near_correct"
    INCORRECT = "incorrect"


# ============================================================================
# Matching Results
# ============================================================================


class MatchResult(BaseModel):
    """Outcome of comparing one blank against its expected answer."""

    is_match: bool
    similarity: float = Field(ge=0.0, le=1.0)
    normalized_user: str = ""  # best-scoring variant of the user's answer
    normalized_correct: str = ""


class AggregateResult(BaseModel):
    """Outcome of grading every blank of one exercise.

    ``overall_similarity`` is NaN when there are no blanks to grade. Callers
    must check ``total_blanks`` before reading it as a score.
    """

    per_blank_results: list[bool] = Field(default_factory=list)
    correct_count: int = 0
    total_blanks: int = 0
    is_correct: bool = False
    overall_similarity: float = float("nan")
    details: list[MatchResult] = Field(default_factory=list)

    @property
    def has_blanks(self) -> bool:
        return self.total_blanks > 0

    @property
    def partial_credit(self) -> float:
        """Fraction of blanks answered correctly (0.0 when nothing to grade)."""
        if not self.has_blanks:
            return 0.0
        return self.correct_count / self.total_blanks


# ============================================================================
# Stored Questions
# ============================================================================


class Category(BaseModel):
    id: str
    name: str
    description: str = ""


class Question(BaseModel):
    id: str
    category_id: str | None = None
    question_type: QuestionType
    question_text: str
    options: list[str] = Field(default_factory=list)
    correct_answer: str = ""  # raw column value, may encode several blanks


class FillBlankExercise(BaseModel):
    """A sentence with blanks and the answer key, one entry per blank."""

    BLANK_PLACEHOLDER: ClassVar[str] = "_____"

    id: str
    category_id: str | None = None
    question_text: str
    answers: list[str] = Field(default_factory=list)

    @property
    def blank_count(self) -> int:
        """Number of placeholders in the question text."""
        return self.question_text.count(self.BLANK_PLACEHOLDER)


# ============================================================================
# Validation Request / Response
# ============================================================================


class ValidationRequest(BaseModel):
    """Answer submitted by a player for one question.

    Accepts both snake_case and the camelCase keys sent by the game client.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question_id: str
    question_type: QuestionType
    user_answer: str | bool | None = None
    user_answers: list[str] | None = None


class ValidationResponse(BaseModel):
    """Result returned to the client. Errors share this shape."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_correct: bool
    similarity: float = 0.0
    correct_answer: str = ""
    feedback: str = ""
    per_blank_results: list[bool] | None = None
    correct_count: int | None = None
    total_blanks: int | None = None
    correct_answers: list[str] | None = None
    error: str | None = None

    def to_client_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting fields that were not set."""
        return self.model_dump(by_alias=True, exclude_none=True)
