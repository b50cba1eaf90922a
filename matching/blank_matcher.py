"""Per-blank answer matching."""

from models import FeedbackTier, MatchResult
from matching.config import SERVER_CONFIG, MatchingConfig
from matching.normalizer import normalize
from matching.similarity import similarity
from matching.variants import iter_variants


def match_blank(
    user_answer: str,
    correct_answer: str,
    config: MatchingConfig | None = None,
) -> MatchResult:
    """Decide whether one blank was answered correctly.

    Short expected answers (``short_answer_max_length`` characters or fewer
    after normalization) must match exactly: one wrong letter in a
    three-letter word still scores 0.67, yet is clearly wrong. Longer answers
    are scored by edit distance, taking the best score over the user's
    answer and its sound-alike spellings.

    Args:
        user_answer: Raw text typed by the user.
        correct_answer: Raw expected answer for the blank.
        config: Matching parameters. Defaults to the server configuration.

    Returns:
        MatchResult with the decision and best similarity.
    """
    config = config or SERVER_CONFIG
    normalized_user = normalize(user_answer)
    normalized_correct = normalize(correct_answer)

    if len(normalized_correct) <= config.short_answer_max_length:
        is_exact = normalized_user == normalized_correct
        return MatchResult(
            is_match=is_exact,
            similarity=1.0 if is_exact else 0.0,
            normalized_user=normalized_user,
            normalized_correct=normalized_correct,
        )

    if normalized_user == normalized_correct:
        return MatchResult(
            is_match=True,
            similarity=1.0,
            normalized_user=normalized_user,
            normalized_correct=normalized_correct,
        )

    best_variant = normalized_user
    best_similarity = similarity(normalized_user, normalized_correct)
    for variant in iter_variants(normalized_user, config.max_variants):
        score = similarity(variant, normalized_correct)
        if score > best_similarity:
            best_variant, best_similarity = variant, score

    return MatchResult(
        is_match=best_similarity >= config.match_threshold,
        similarity=best_similarity,
        normalized_user=best_variant,
        normalized_correct=normalized_correct,
    )


def classify_feedback(
    result: MatchResult, config: MatchingConfig | None = None
) -> FeedbackTier:
    """Map a match result to its feedback tier."""
    config = config or SERVER_CONFIG
    if not result.is_match:
        return FeedbackTier.INCORRECT
    if result.similarity >= config.full_credit_threshold:
        return FeedbackTier.CORRECT
    return FeedbackTier.NEAR_CORRECT
