"""Greek text normalization for answer comparison."""

import re
import unicodedata

# Sentence punctuation, including the Greek question mark (U+037E) and ano teleia
PUNCTUATION_RE = re.compile(r"[.,;:!?\u037e\u0387\u00b7]")
WHITESPACE_RE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Fold accented letters (tonos, dialytika or both) to their base letter."""
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", base)


def normalize(text: str) -> str:
    """Normalize a Greek answer for comparison.

    Lower-cases, removes accents and sentence punctuation, folds final sigma
    to the medial form and collapses whitespace. Accents are never
    distinctive for answer checking. Idempotent, and total on any string.
    """
    text = strip_accents(text.lower())
    text = text.replace("ς", "σ")
    text = PUNCTUATION_RE.sub("", text)
    return WHITESPACE_RE.sub(" ", text).strip()
