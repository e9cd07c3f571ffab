"""Utility functions for fuzzyurl."""

from .formatting import format_field, format_score, truncate_text
from .log import setup_logging

__all__ = [
    "format_field",
    "format_score",
    "truncate_text",
    "setup_logging",
]
