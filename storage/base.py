"""Abstract repository interfaces for the storage layer."""

from abc import ABC, abstractmethod

from models import Category, FillBlankExercise, Question


class CategoryRepository(ABC):
    """Abstract interface for category storage."""

    @abstractmethod
    def get_all(self) -> list[Category]:
        """Load all categories."""
        pass

    @abstractmethod
    def save(self, category: Category) -> None:
        """Insert or replace a category."""
        pass


class QuestionRepository(ABC):
    """Abstract interface for question storage."""

    @abstractmethod
    def get_all(self) -> list[Question]:
        """Load all questions.

        Returns:
            List of all questions in the repository.
        """
        pass

    @abstractmethod
    def get_correct_answer(self, question_id: str) -> str | None:
        """Load only the stored correct answer of a question.

        Returns:
            The raw ``correct_answer`` value, or None if not found.
        """
        pass

    @abstractmethod
    def get_by_category(self, category_id: str) -> list[Question]:
        """Load the questions of one category."""
        pass

    @abstractmethod
    def save(self, question: Question) -> None:
        """Insert or replace a question."""
        pass


class FillBlankRepository(ABC):
    """Abstract interface for fill-in-the-blank exercise storage."""

    @abstractmethod
    def get_answers(self, exercise_id: str) -> list[str] | None:
        """Load only the answer key of an exercise.

        Returns:
            The answers in blank order, or None if the exercise does not
            exist or its answers are not a list.
        """
        pass

    @abstractmethod
    def save(self, exercise: FillBlankExercise) -> None:
        """Insert or replace an exercise."""
        pass
