"""URL typo correction for user input."""

from .corrector import correct_url
from .tlds import COMMON_SITES, VALID_TLDS

__all__ = [
    "correct_url",
    "COMMON_SITES",
    "VALID_TLDS",
]
