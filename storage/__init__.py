"""Storage layer for the Greek quiz.

Provides repository interfaces and SQLite implementations for categories,
questions and fill-in-the-blank exercises, plus the answer key lookup used
by answer validation.
"""

from pathlib import Path

from .base import CategoryRepository, FillBlankRepository, QuestionRepository
from .sqlite import (
    SQLiteCategoryRepository,
    SQLiteFillBlankRepository,
    SQLiteQuestionRepository,
)
from .answer_keys import AnswerKeyLookup, parse_answer_key
from .connection import get_connection, init_schema, DEFAULT_DB_PATH
from .loader import load_questions_file

__all__ = [
    # Abstract interfaces
    "CategoryRepository",
    "QuestionRepository",
    "FillBlankRepository",
    # SQLite implementations
    "SQLiteCategoryRepository",
    "SQLiteQuestionRepository",
    "SQLiteFillBlankRepository",
    # Answer keys
    "AnswerKeyLookup",
    "parse_answer_key",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    "load_questions_file",
    # Factory functions
    "get_question_repo",
    "get_fill_blank_repo",
    "get_answer_key_lookup",
]


def get_question_repo(db_path: Path = DEFAULT_DB_PATH) -> QuestionRepository:
    """Get a QuestionRepository instance."""
    return SQLiteQuestionRepository(db_path)


def get_fill_blank_repo(db_path: Path = DEFAULT_DB_PATH) -> FillBlankRepository:
    """Get a FillBlankRepository instance."""
    return SQLiteFillBlankRepository(db_path)


def get_answer_key_lookup(db_path: Path = DEFAULT_DB_PATH) -> AnswerKeyLookup:
    """Get an AnswerKeyLookup reading from the SQLite repositories."""
    return AnswerKeyLookup(get_question_repo(db_path), get_fill_blank_repo(db_path))
