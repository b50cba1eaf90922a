"""Shared pytest fixtures for the Greek quiz test suite."""

import json
import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import FillBlankExercise, Question, QuestionType
from storage import get_connection, init_schema


@pytest.fixture
def sample_questions() -> list[Question]:
    """Create one question of every type."""
    return [
        Question(
            id="q-tf-1",
            category_id="science",
            question_type=QuestionType.TRUE_FALSE,
            question_text="Ο ήλιος είναι αστέρι.",
            correct_answer="true",
        ),
        Question(
            id="q-mc-1",
            category_id="grammar",
            question_type=QuestionType.MULTIPLE_CHOICE,
            question_text="Ποιο είναι το σωστό άρθρο για τη λέξη «θάλασσα»;",
            options=["ο", "η", "το"],
            correct_answer="η",
        ),
        Question(
            id="q-match-1",
            category_id="science",
            question_type=QuestionType.MATCHING,
            question_text="Αντιστοίχισε το ζώο με την ομάδα του.",
            options=["σκύλος-θηλαστικό", "αετός-πτηνό"],
            correct_answer="σκύλος-θηλαστικό",
        ),
        Question(
            id="q-fb-legacy",
            category_id="grammar",
            question_type=QuestionType.FILL_IN_THE_BLANK,
            question_text="Η _____ των αριθμών είναι 1, 2, 3 και η _____ τους είναι 6.",
            correct_answer="ακολουθία|άθροισμα",
        ),
        Question(
            id="fb-empty",
            category_id="grammar",
            question_type=QuestionType.FILL_IN_THE_BLANK,
            question_text="Μια ερώτηση χωρίς _____.",
            correct_answer="",
        ),
    ]


@pytest.fixture
def sample_fill_blank_exercises() -> list[FillBlankExercise]:
    """Create fill-in-the-blank exercises with one and two blanks."""
    return [
        FillBlankExercise(
            id="fb-1",
            category_id="science",
            question_text="Το νερό βράζει στους _____ βαθμούς Κελσίου.",
            answers=["εκατό"],
        ),
        FillBlankExercise(
            id="fb-2",
            category_id="grammar",
            question_text="Η απάντηση είναι _____ και όχι _____.",
            answers=["σωστό", "διαφορετικό"],
        ),
        FillBlankExercise(
            id="fb-3",
            category_id="grammar",
            question_text="_____ σας, τι κάνετε;",
            answers=["καλημέρα"],
        ),
        FillBlankExercise(
            id="fb-empty",
            category_id="grammar",
            question_text="Μια ερώτηση χωρίς _____.",
            answers=[],
        ),
    ]


@pytest.fixture
def test_db_path(tmp_path) -> Path:
    """Create a temporary database path for testing."""
    db_path = tmp_path / "test_quiz.db"
    init_schema(db_path)
    return db_path


@pytest.fixture
def populated_test_db(
    test_db_path, sample_questions, sample_fill_blank_exercises
) -> Path:
    """Create a test database populated with sample categories and questions."""
    conn = get_connection(test_db_path)
    try:
        for category_id, name in [("grammar", "Γραμματική"), ("science", "Επιστήμη")]:
            conn.execute(
                "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)",
                (category_id, name, ""),
            )

        for question in sample_questions:
            conn.execute(
                """INSERT INTO questions
                (id, category_id, question_type, question_text, options, correct_answer)
                VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    question.id,
                    question.category_id,
                    question.question_type.value,
                    question.question_text,
                    json.dumps(question.options),
                    question.correct_answer,
                ),
            )

        for exercise in sample_fill_blank_exercises:
            conn.execute(
                """INSERT INTO fill_blank_exercises
                (id, category_id, question_text, answers)
                VALUES (?, ?, ?, ?)""",
                (
                    exercise.id,
                    exercise.category_id,
                    exercise.question_text,
                    json.dumps(exercise.answers),
                ),
            )

        conn.commit()
    finally:
        conn.close()

    return test_db_path
