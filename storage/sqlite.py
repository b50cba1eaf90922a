"""SQLite implementations of repository interfaces."""

import json
import logging
from pathlib import Path

from .base import CategoryRepository, FillBlankRepository, QuestionRepository
from .connection import get_connection, DEFAULT_DB_PATH
from models import Category, FillBlankExercise, Question, QuestionType

logger = logging.getLogger(__name__)


class SQLiteCategoryRepository(CategoryRepository):
    """SQLite implementation of CategoryRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_all(self) -> list[Category]:
        """Load all categories."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT * FROM categories ORDER BY name")
            return [
                Category(
                    id=row["id"], name=row["name"], description=row["description"]
                )
                for row in cursor.fetchall()
            ]
        finally:
            conn.close()

    def save(self, category: Category) -> None:
        """Insert or replace a category."""
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT INTO categories (id, name, description)
                VALUES (?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    name = excluded.name,
                    description = excluded.description""",
                (category.id, category.name, category.description),
            )
            conn.commit()
        finally:
            conn.close()


class SQLiteQuestionRepository(QuestionRepository):
    """SQLite implementation of QuestionRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_all(self) -> list[Question]:
        """Load all questions."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT * FROM questions ORDER BY id")
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def get_correct_answer(self, question_id: str) -> str | None:
        """Load only the stored correct answer of a question."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT correct_answer FROM questions WHERE id = ?", (question_id,)
            )
            row = cursor.fetchone()
            return row["correct_answer"] if row else None
        finally:
            conn.close()

    def get_by_category(self, category_id: str) -> list[Question]:
        """Load the questions of one category."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT * FROM questions WHERE category_id = ? ORDER BY id",
                (category_id,),
            )
            return [self._row_to_model(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def save(self, question: Question) -> None:
        """Insert or replace a question."""
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT OR REPLACE INTO questions
                (id, category_id, question_type, question_text, options, correct_answer)
                VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    question.id,
                    question.category_id,
                    question.question_type.value,
                    question.question_text,
                    json.dumps(question.options, ensure_ascii=False),
                    question.correct_answer,
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def _row_to_model(self, row) -> Question:
        """Convert a database row to a Question model."""
        return Question(
            id=row["id"],
            category_id=row["category_id"],
            question_type=QuestionType(row["question_type"]),
            question_text=row["question_text"],
            options=json.loads(row["options"]),
            correct_answer=row["correct_answer"],
        )


class SQLiteFillBlankRepository(FillBlankRepository):
    """SQLite implementation of FillBlankRepository."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH):
        self.db_path = db_path

    def get_answers(self, exercise_id: str) -> list[str] | None:
        """Load only the answer key of an exercise."""
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute(
                "SELECT answers FROM fill_blank_exercises WHERE id = ?",
                (exercise_id,),
            )
            row = cursor.fetchone()
            return self._decode_answers(row["answers"]) if row else None
        finally:
            conn.close()

    def save(self, exercise: FillBlankExercise) -> None:
        """Insert or replace an exercise."""
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                """INSERT OR REPLACE INTO fill_blank_exercises
                (id, category_id, question_text, answers)
                VALUES (?, ?, ?, ?)""",
                (
                    exercise.id,
                    exercise.category_id,
                    exercise.question_text,
                    json.dumps(exercise.answers, ensure_ascii=False),
                ),
            )
            conn.commit()
        finally:
            conn.close()

    def _decode_answers(self, raw: str) -> list[str] | None:
        """Decode the JSON answers column. Non-list values yield None."""
        try:
            answers = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Malformed answers column: %r", raw)
            return None
        if not isinstance(answers, list):
            return None
        return [str(answer) for answer in answers]
