"""CLI commands for fuzzyurl."""

from .parse_cmd import parse_cmd
from .match_cmd import match_cmd
from .best_cmd import best
from .correct_cmd import correct
from .config_cmd import config
from .version import version

__all__ = [
    "parse_cmd",
    "match_cmd",
    "best",
    "correct",
    "config",
    "version",
]
