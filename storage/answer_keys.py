"""Answer key lookup used by answer validation.

Fill-in-the-blank keys live in ``fill_blank_exercises``. Older questions keep
them in ``questions.correct_answer`` instead, encoded as a JSON array or as
values separated by ``|`` or ``,``.
"""

import json
import logging

from .base import FillBlankRepository, QuestionRepository

logger = logging.getLogger(__name__)


def parse_answer_key(raw: str | None) -> list[str]:
    """Split a stored ``correct_answer`` value into one answer per blank.

    Tries a JSON array first, then ``|`` as separator if present, else ``,``.
    Entries keep their position even when empty, so answers stay aligned
    with their blanks. A key with no non-empty entry yields an empty list.
    """
    if raw is None:
        return []

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = None

    if isinstance(parsed, list):
        parts = [str(item) for item in parsed]
    else:
        separator = "|" if "|" in raw else ","
        parts = raw.split(separator)

    answers = [part.strip() for part in parts]
    return answers if any(answers) else []


class AnswerKeyLookup:
    """Reads answer keys from the question and exercise repositories."""

    def __init__(
        self,
        question_repo: QuestionRepository,
        fill_blank_repo: FillBlankRepository,
    ):
        self.question_repo = question_repo
        self.fill_blank_repo = fill_blank_repo

    def get_blank_answers(self, question_id: str) -> list[str] | None:
        """Return the answers of a fill-in-the-blank question, in blank order.

        An exercise row with a readable answer list is authoritative, even
        when the list is empty. Only a missing or unreadable row falls back
        to ``questions.correct_answer``.

        Returns:
            The answer list, or None if no non-empty key exists.
        """
        answers = self.fill_blank_repo.get_answers(question_id)
        if answers is not None:
            return answers if any(answers) else None

        raw = self.question_repo.get_correct_answer(question_id)
        if not raw:
            return None

        logger.debug("Using questions.correct_answer as key for %s", question_id)
        return parse_answer_key(raw) or None

    def get_correct_answer(self, question_id: str) -> str | None:
        """Return the stored correct answer of a non-blank question."""
        return self.question_repo.get_correct_answer(question_id)
