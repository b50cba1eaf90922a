"""Database connection management and schema initialization."""

import sqlite3
from pathlib import Path

DEFAULT_DB_PATH = Path(__file__).parent.parent / "data" / "quiz.db"

SCHEMA_SQL = """
-- Question categories shown on the category screen
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT ''
);

-- Questions of every type. For fill-in-the-blank questions without a row in
-- fill_blank_exercises, correct_answer encodes the blanks (JSON array, or
-- values separated by '|' or ',').
CREATE TABLE IF NOT EXISTS questions (
    id TEXT PRIMARY KEY,
    category_id TEXT,
    question_type TEXT NOT NULL CHECK (
        question_type IN ('true-false', 'multiple-choice', 'matching', 'fill-in-the-blank')
    ),
    question_text TEXT NOT NULL,
    options TEXT NOT NULL DEFAULT '[]',
    correct_answer TEXT NOT NULL DEFAULT '',
    FOREIGN KEY (category_id) REFERENCES categories(id)
);

CREATE INDEX IF NOT EXISTS idx_questions_category ON questions(category_id);

-- Fill-in-the-blank exercises with one answer per blank
CREATE TABLE IF NOT EXISTS fill_blank_exercises (
    id TEXT PRIMARY KEY,
    category_id TEXT,
    question_text TEXT NOT NULL,
    answers TEXT NOT NULL DEFAULT '[]',  -- JSON array, in blank order
    FOREIGN KEY (category_id) REFERENCES categories(id)
);

CREATE INDEX IF NOT EXISTS idx_fill_blank_category ON fill_blank_exercises(category_id);
"""


def get_connection(db_path: Path = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Get a database connection with appropriate settings.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A configured sqlite3 Connection object.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_schema(db_path: Path = DEFAULT_DB_PATH) -> None:
    """Initialize the database schema if it doesn't exist.

    Args:
        db_path: Path to the SQLite database file.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection(db_path)
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
