"""fuzzyurl - non-strict URL parsing and wildcard mask matching."""

__version__ = "0.1.0"

from .codec import parse, serialize
from .errors import (
    ConfigError,
    CorrectionError,
    FuzzyurlError,
    InvalidFieldError,
    InvalidMaskError,
)
from .matching import (
    MatchScores,
    Outcome,
    best_match,
    best_match_index,
    fuzzy_match,
    match,
    match_scores,
    matches,
    rank_matches,
)
from .protocols import DEFAULT_PORTS, NO_PORTS, PortTable
from .record import FIELDS, WILDCARD, UrlRecord, build_mask

__all__ = [
    "__version__",
    "parse",
    "serialize",
    "ConfigError",
    "CorrectionError",
    "FuzzyurlError",
    "InvalidFieldError",
    "InvalidMaskError",
    "MatchScores",
    "Outcome",
    "best_match",
    "best_match_index",
    "fuzzy_match",
    "match",
    "match_scores",
    "matches",
    "rank_matches",
    "DEFAULT_PORTS",
    "NO_PORTS",
    "PortTable",
    "FIELDS",
    "WILDCARD",
    "UrlRecord",
    "build_mask",
]
