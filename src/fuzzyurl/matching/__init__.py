"""Mask matching and ranking."""

from .field import (
    Outcome,
    GlobMatcher,
    HostnameMatcher,
    PathMatcher,
    fuzzy_match,
    matcher_for,
)
from .record import MatchScores, as_mask, as_url, match, match_scores, matches
from .selector import best_match, best_match_index, rank_matches

__all__ = [
    "Outcome",
    "GlobMatcher",
    "HostnameMatcher",
    "PathMatcher",
    "fuzzy_match",
    "matcher_for",
    "MatchScores",
    "as_mask",
    "as_url",
    "match",
    "match_scores",
    "matches",
    "best_match",
    "best_match_index",
    "rank_matches",
]
