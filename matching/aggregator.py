"""Grading of exercises with several blanks."""

from collections.abc import Sequence

from models import AggregateResult
from matching.blank_matcher import match_blank
from matching.config import MatchingConfig


def validate_blanks(
    user_answers: Sequence[str | None] | None,
    correct_answers: Sequence[str] | None,
    config: MatchingConfig | None = None,
) -> AggregateResult:
    """Grade every blank of one exercise.

    Answers are paired by position. Blanks the user left out count as wrong
    and extra answers are ignored, so ragged input never raises.

    ``is_correct`` requires every blank to match. ``correct_count`` and
    ``total_blanks`` are exposed for partial credit. ``overall_similarity``
    is diagnostic only: the mean similarity over all blanks (missing ones
    count as 0.0), or NaN when there is nothing to grade.
    """
    user_answers = list(user_answers or [])
    correct_answers = list(correct_answers or [])

    details = [
        match_blank(
            "" if user_answer is None else str(user_answer),
            "" if correct_answer is None else str(correct_answer),
            config,
        )
        for user_answer, correct_answer in zip(user_answers, correct_answers)
    ]

    total_blanks = len(correct_answers)
    per_blank_results = [detail.is_match for detail in details]
    per_blank_results.extend([False] * (total_blanks - len(details)))
    correct_count = sum(per_blank_results)

    if total_blanks:
        overall_similarity = sum(d.similarity for d in details) / total_blanks
    else:
        overall_similarity = float("nan")

    return AggregateResult(
        per_blank_results=per_blank_results,
        correct_count=correct_count,
        total_blanks=total_blanks,
        is_correct=correct_count == total_blanks,
        overall_similarity=overall_similarity,
        details=details,
    )
