"""Tests for the storage layer repository implementations."""

import json
from pathlib import Path

import pytest

from models import Category, FillBlankExercise, Question, QuestionType
from storage import (
    AnswerKeyLookup,
    SQLiteCategoryRepository,
    SQLiteFillBlankRepository,
    SQLiteQuestionRepository,
    get_answer_key_lookup,
    get_connection,
    load_questions_file,
    parse_answer_key,
)

DATA_FILE = Path(__file__).parent.parent / "data" / "questions.json"


class TestQuestionRepository:
    """Tests for SQLiteQuestionRepository."""

    def test_get_all_returns_empty_for_empty_db(self, test_db_path):
        """Should return empty list when database has no questions."""
        repo = SQLiteQuestionRepository(test_db_path)
        assert repo.get_all() == []

    def test_get_all_returns_all_questions(self, populated_test_db):
        repo = SQLiteQuestionRepository(populated_test_db)
        result = repo.get_all()
        assert len(result) == 5
        assert all(isinstance(q, Question) for q in result)

    def test_get_all_decodes_options(self, populated_test_db):
        repo = SQLiteQuestionRepository(populated_test_db)
        result = {q.id: q for q in repo.get_all()}["q-mc-1"]
        assert result.question_type == QuestionType.MULTIPLE_CHOICE
        assert result.options == ["ο", "η", "το"]
        assert result.correct_answer == "η"

    def test_get_correct_answer(self, populated_test_db):
        repo = SQLiteQuestionRepository(populated_test_db)
        assert repo.get_correct_answer("q-mc-1") == "η"

    def test_get_correct_answer_returns_none_for_unknown_id(self, populated_test_db):
        repo = SQLiteQuestionRepository(populated_test_db)
        assert repo.get_correct_answer("nonexistent") is None

    def test_get_correct_answer_ignores_malformed_options(self, test_db_path):
        """Only the answer column is read, so broken options do not matter."""
        conn = get_connection(test_db_path)
        try:
            conn.execute(
                """INSERT INTO questions
                (id, question_type, question_text, options, correct_answer)
                VALUES (?, ?, ?, ?, ?)""",
                ("broken", "true-false", "Σωστό ή λάθος;", "not json", "true"),
            )
            conn.commit()
        finally:
            conn.close()

        repo = SQLiteQuestionRepository(test_db_path)
        assert repo.get_correct_answer("broken") == "true"

    def test_get_by_category(self, populated_test_db):
        repo = SQLiteQuestionRepository(populated_test_db)
        ids = [q.id for q in repo.get_by_category("science")]
        assert ids == ["q-match-1", "q-tf-1"]

    def test_save_round_trips_greek_text(self, test_db_path):
        repo = SQLiteQuestionRepository(test_db_path)
        question = Question(
            id="new",
            question_type=QuestionType.TRUE_FALSE,
            question_text="Η Αθήνα είναι πρωτεύουσα.",
            correct_answer="true",
        )
        repo.save(question)
        assert repo.get_all() == [question]


class TestFillBlankRepository:
    """Tests for SQLiteFillBlankRepository."""

    def test_get_answers(self, populated_test_db):
        repo = SQLiteFillBlankRepository(populated_test_db)
        assert repo.get_answers("fb-2") == ["σωστό", "διαφορετικό"]

    def test_get_answers_unknown_id(self, populated_test_db):
        repo = SQLiteFillBlankRepository(populated_test_db)
        assert repo.get_answers("nonexistent") is None

    def test_get_answers_non_list_column(self, test_db_path):
        """Answers that are not a JSON list are treated as missing."""
        conn = get_connection(test_db_path)
        try:
            conn.execute(
                "INSERT INTO fill_blank_exercises (id, question_text, answers) VALUES (?, ?, ?)",
                ("bad", "_____", json.dumps({"a": 1})),
            )
            conn.execute(
                "INSERT INTO fill_blank_exercises (id, question_text, answers) VALUES (?, ?, ?)",
                ("broken", "_____", "not json"),
            )
            conn.commit()
        finally:
            conn.close()

        repo = SQLiteFillBlankRepository(test_db_path)
        assert repo.get_answers("bad") is None
        assert repo.get_answers("broken") is None

    def test_save(self, test_db_path):
        repo = SQLiteFillBlankRepository(test_db_path)
        repo.save(FillBlankExercise(id="x", question_text="_____", answers=["ένα"]))
        assert repo.get_answers("x") == ["ένα"]


class TestCategoryRepository:
    """Tests for SQLiteCategoryRepository."""

    def test_get_all_sorted_by_name(self, populated_test_db):
        repo = SQLiteCategoryRepository(populated_test_db)
        names = [c.name for c in repo.get_all()]
        assert names == sorted(names)
        assert len(names) == 2

    def test_save_replaces(self, test_db_path):
        repo = SQLiteCategoryRepository(test_db_path)
        repo.save(Category(id="c", name="Πρώτη"))
        repo.save(Category(id="c", name="Δεύτερη"))
        assert [c.name for c in repo.get_all()] == ["Δεύτερη"]


class TestParseAnswerKey:
    """Tests for parse_answer_key()."""

    def test_json_array(self):
        assert parse_answer_key('["ακολουθία", "άθροισμα"]') == ["ακολουθία", "άθροισμα"]

    def test_pipe_separated(self):
        assert parse_answer_key("ακολουθία|άθροισμα") == ["ακολουθία", "άθροισμα"]

    def test_pipe_wins_over_comma(self):
        assert parse_answer_key("α, β|γ") == ["α, β", "γ"]

    def test_comma_separated(self):
        assert parse_answer_key("ένα, δύο") == ["ένα", "δύο"]

    def test_single_value(self):
        assert parse_answer_key("σωστό") == ["σωστό"]

    def test_json_scalar_is_split_as_text(self):
        assert parse_answer_key("42") == ["42"]

    def test_keeps_empty_entry_in_position(self):
        assert parse_answer_key('["σωστό", "", "λέξη"]') == ["σωστό", "", "λέξη"]

    def test_keeps_empty_separated_entry(self):
        assert parse_answer_key("ένα| |τρία") == ["ένα", "", "τρία"]

    @pytest.mark.parametrize("raw", [None, "", " , "])
    def test_empty(self, raw):
        assert parse_answer_key(raw) == []


class TestAnswerKeyLookup:
    """Tests for AnswerKeyLookup."""

    def test_prefers_fill_blank_table(self, populated_test_db):
        lookup = get_answer_key_lookup(populated_test_db)
        assert lookup.get_blank_answers("fb-2") == ["σωστό", "διαφορετικό"]

    def test_falls_back_to_questions_table(self, populated_test_db):
        lookup = get_answer_key_lookup(populated_test_db)
        assert lookup.get_blank_answers("q-fb-legacy") == ["ακολουθία", "άθροισμα"]

    def test_empty_keys_are_missing(self, populated_test_db):
        lookup = get_answer_key_lookup(populated_test_db)
        assert lookup.get_blank_answers("fb-empty") is None

    def test_existing_empty_exercise_does_not_fall_back(self, test_db_path):
        """An exercise row with an empty list hides questions.correct_answer."""
        SQLiteQuestionRepository(test_db_path).save(
            Question(
                id="shadowed",
                question_type=QuestionType.FILL_IN_THE_BLANK,
                question_text="_____",
                correct_answer="λέξη",
            )
        )
        SQLiteFillBlankRepository(test_db_path).save(
            FillBlankExercise(id="shadowed", question_text="_____", answers=[])
        )

        lookup = get_answer_key_lookup(test_db_path)
        assert lookup.get_blank_answers("shadowed") is None

    def test_fallback_keeps_blank_positions(self, test_db_path):
        SQLiteQuestionRepository(test_db_path).save(
            Question(
                id="gappy",
                question_type=QuestionType.FILL_IN_THE_BLANK,
                question_text="_____ _____ _____",
                correct_answer='["σωστό", "", "λέξη"]',
            )
        )

        lookup = get_answer_key_lookup(test_db_path)
        assert lookup.get_blank_answers("gappy") == ["σωστό", "", "λέξη"]

    def test_unknown_question(self, populated_test_db):
        lookup = get_answer_key_lookup(populated_test_db)
        assert lookup.get_blank_answers("nonexistent") is None
        assert lookup.get_correct_answer("nonexistent") is None

    def test_get_correct_answer(self, populated_test_db):
        lookup = AnswerKeyLookup(
            SQLiteQuestionRepository(populated_test_db),
            SQLiteFillBlankRepository(populated_test_db),
        )
        assert lookup.get_correct_answer("q-tf-1") == "true"


class TestLoadQuestionsFile:
    """Tests for load_questions_file()."""

    def test_loads_bundled_data(self, tmp_path):
        db_path = tmp_path / "quiz.db"
        counts = load_questions_file(DATA_FILE, db_path)

        assert counts["categories"] == 2
        assert counts["questions"] == 4
        assert counts["fill_blank_exercises"] == 3
        assert SQLiteFillBlankRepository(db_path).get_answers("fb-1") == ["εκατό"]

    def test_reload_replaces_rows(self, tmp_path):
        db_path = tmp_path / "quiz.db"
        load_questions_file(DATA_FILE, db_path)
        load_questions_file(DATA_FILE, db_path)
        assert len(SQLiteQuestionRepository(db_path).get_all()) == 4
