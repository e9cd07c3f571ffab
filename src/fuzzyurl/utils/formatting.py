"""Text formatting utility functions."""

from typing import Optional

ABSENT_LABEL = "(absent)"


def truncate_text(text: str, max_length: int = 60, suffix: str = "...") -> str:
    """Truncate text to specified length with suffix.

    Args:
        text: Text to truncate
        max_length: Maximum length including suffix
        suffix: Suffix to append if truncated

    Returns:
        Truncated text with suffix, or original if short enough
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix


def format_field(value: Optional[str], max_length: int = 60) -> str:
    """Format a URL field value for display, marking absent and empty values."""
    if value is None:
        return ABSENT_LABEL
    if value == "":
        return '""'
    return truncate_text(value, max_length)


def format_score(score: Optional[int]) -> str:
    """Format a field score for display."""
    if score is None:
        return "no match"
    if score == 1:
        return "exact"
    return "wildcard"
