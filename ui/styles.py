from rich.theme import Theme
from rich.style import Style
from rich.text import Text

from models import FeedbackTier

AEGEAN_BLUE = "#1F6FB2"
OLIVE_GOLD = "#D4AC0D"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=AEGEAN_BLUE, bold=True),
        "secondary": Style(color=OLIVE_GOLD, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "title": Style(color=AEGEAN_BLUE, bold=True),
    }
)


def get_tier_style(tier: FeedbackTier) -> Style:
    """Get color style for a blank's feedback tier."""
    styles = {
        FeedbackTier.CORRECT: Style(color=SUCCESS_GREEN, bold=True),
        FeedbackTier.NEAR_CORRECT: Style(color=OLIVE_GOLD, bold=True),
        FeedbackTier.INCORRECT: Style(color=ERROR_RED, bold=True),
    }
    return styles[tier]


def get_similarity_style(similarity: float) -> Style:
    """Get color style based on similarity."""
    if similarity >= 0.95:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif similarity >= 0.75:
        return Style(color=OLIVE_GOLD)
    else:
        return Style(color=ERROR_RED)


def create_success_header(message: str) -> Text:
    """Create a success/correct answer header."""
    header = Text()
    header.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
    header.append(message, Style(color=SUCCESS_GREEN, bold=True))
    return header


def create_error_header(message: str) -> Text:
    """Create an error/incorrect answer header."""
    header = Text()
    header.append("✗ ", Style(color=ERROR_RED, bold=True))
    header.append(message, Style(color=ERROR_RED, bold=True))
    return header
