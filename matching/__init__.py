"""Fuzzy answer matching for Greek fill-in-the-blank exercises.

Pipeline:
- normalize: fold accents, final sigma, punctuation and whitespace
- similarity: edit-distance similarity of normalized strings
- expand_variants: sound-alike spellings from a fixed substitution table
- match_blank: length-tiered decision for a single blank
- validate_blanks: per-blank results and partial credit for one exercise

All functions are pure and never raise on malformed input.
"""

from matching.aggregator import validate_blanks
from matching.blank_matcher import classify_feedback, match_blank
from matching.config import (
    CLIENT_CONFIG,
    SERVER_CONFIG,
    DeploymentContext,
    MatchingConfig,
)
from matching.normalizer import normalize, strip_accents
from matching.similarity import edit_distance, similarity
from matching.variants import SOUND_ALIKE_RULES, expand_variants, iter_variants

__all__ = [
    # Normalizer
    "normalize",
    "strip_accents",
    # Scorer
    "edit_distance",
    "similarity",
    # Variant expander
    "SOUND_ALIKE_RULES",
    "expand_variants",
    "iter_variants",
    # Matching
    "match_blank",
    "classify_feedback",
    "validate_blanks",
    # Configuration
    "MatchingConfig",
    "DeploymentContext",
    "SERVER_CONFIG",
    "CLIENT_CONFIG",
]
