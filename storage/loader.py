"""Load question data from JSON into the database."""

import json
import logging
from pathlib import Path

from .connection import DEFAULT_DB_PATH, init_schema
from .sqlite import (
    SQLiteCategoryRepository,
    SQLiteFillBlankRepository,
    SQLiteQuestionRepository,
)
from models import Category, FillBlankExercise, Question

logger = logging.getLogger(__name__)


def load_questions_file(json_path: Path, db_path: Path = DEFAULT_DB_PATH) -> dict[str, int]:
    """Load categories, questions and fill-blank exercises from a JSON file.

    The file holds an object with optional ``categories``, ``questions`` and
    ``fill_blank_exercises`` arrays. Existing rows with the same ID are
    replaced.

    Args:
        json_path: Path to the JSON data file.
        db_path: Path to the SQLite database file.

    Returns:
        Number of records loaded per table.
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    init_schema(db_path)

    category_repo = SQLiteCategoryRepository(db_path)
    question_repo = SQLiteQuestionRepository(db_path)
    fill_blank_repo = SQLiteFillBlankRepository(db_path)

    categories = [Category.model_validate(item) for item in data.get("categories", [])]
    questions = [Question.model_validate(item) for item in data.get("questions", [])]
    exercises = [
        FillBlankExercise.model_validate(item)
        for item in data.get("fill_blank_exercises", [])
    ]

    for category in categories:
        category_repo.save(category)
    for question in questions:
        question_repo.save(question)
    for exercise in exercises:
        if exercise.blank_count != len(exercise.answers):
            logger.warning(
                "Exercise %s has %d blanks but %d answers",
                exercise.id,
                exercise.blank_count,
                len(exercise.answers),
            )
        fill_blank_repo.save(exercise)

    counts = {
        "categories": len(categories),
        "questions": len(questions),
        "fill_blank_exercises": len(exercises),
    }
    logger.info("Loaded %s from %s", counts, json_path.name)
    return counts
