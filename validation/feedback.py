"""Greek feedback messages shown to the player."""

from models import AggregateResult, FeedbackTier

CORRECT = "Σωστό!"
INCORRECT = "Λάθος."
BLANKS_INCORRECT = "Λάθος απάντηση"
BLANKS_PARTIAL = "Μερική απάντηση"
VALIDATION_ERROR = "Σφάλμα επικύρωσης απάντησης"

TIER_MESSAGES: dict[FeedbackTier, str] = {
    FeedbackTier.CORRECT: "Σωστό",
    FeedbackTier.NEAR_CORRECT: "Σχεδόν σωστό",
    FeedbackTier.INCORRECT: "Λάθος",
}


def tier_message(tier: FeedbackTier) -> str:
    """Return the message for a single blank's feedback tier."""
    return TIER_MESSAGES[tier]


def blanks_feedback(result: AggregateResult) -> str:
    """Return the message for a graded fill-in-the-blank exercise."""
    if result.has_blanks and result.is_correct:
        return CORRECT
    if result.correct_count == 0:
        return BLANKS_INCORRECT
    return BLANKS_PARTIAL


def choice_feedback(is_correct: bool) -> str:
    """Return the message for single-answer question types."""
    return CORRECT if is_correct else INCORRECT
