"""Alternate spellings from Greek sound-alike substitutions.

Learners often confuse letters and digraphs that are pronounced the same.
Plain edit distance under-scores such answers, so the matcher also compares
every spelling reachable through this table. Each rule is applied in both
directions.
"""

DEFAULT_MAX_VARIANTS = 4096

# (pattern, replacements), applied pattern -> replacement and back
SOUND_ALIKE_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    # the "i" sounds
    ("ει", ("η", "ι")),
    ("η", ("ι",)),
    ("οι", ("ι",)),
    # o / omega
    ("ο", ("ω",)),
    ("ου", ("υ",)),
    ("αι", ("ε",)),
    # diphthongs before voiceless / voiced consonants
    ("αυ", ("αφ", "αβ")),
    ("ευ", ("εφ", "εβ")),
    ("ηυ", ("ηφ", "ηβ")),
    # consonants commonly mixed up by learners
    ("κ", ("χ",)),
    ("γ", ("ζ",)),
    # digraphs for a single sound
    ("ντ", ("δ",)),
    ("μπ", ("β",)),
    ("γκ", ("γ",)),
    ("γγ", ("γ",)),
    ("τζ", ("ζ",)),
)


def iter_variants(text: str, max_variants: int = DEFAULT_MAX_VARIANTS) -> list[str]:
    """Return ``text`` and its sound-alike spellings in generation order.

    Makes one pass over the rule table. Each rule runs over a snapshot of the
    spellings collected so far, so combinations of rules are reachable.
    Generation stops once ``max_variants`` spellings exist. Rules later in the
    table then reach only the spellings collected so far, so a cap that is
    too low for a long multi-word answer can change the match verdict.
    """
    variants: dict[str, None] = {text: None}

    for pattern, replacements in SOUND_ALIKE_RULES:
        for variant in list(variants):
            for replacement in replacements:
                for source, target in ((pattern, replacement), (replacement, pattern)):
                    if source not in variant:
                        continue
                    if len(variants) >= max_variants:
                        return list(variants)
                    variants.setdefault(variant.replace(source, target))

    return list(variants)


def expand_variants(text: str, max_variants: int = DEFAULT_MAX_VARIANTS) -> set[str]:
    """Return the set of sound-alike spellings of ``text``, including itself."""
    return set(iter_variants(text, max_variants))
