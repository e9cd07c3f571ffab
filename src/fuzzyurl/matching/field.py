"""Wildcard matching of a single URL field.

Wildcard language:

    *              matches anything, including an absent value
    foo*           matches values starting with "foo"
    *foo           matches values ending with "foo"
    *.example.com  (hostname) matches "api.example.com" but not "example.com"
    **.example.com (hostname) matches "api.example.com" and "example.com"
    foo/*          (path) matches "foo/" and "foo/bar/baz" but not "foo"
    foo/**         (path) matches "foo/", "foo/bar/baz" and "foo"

Any other form is matched literally.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..errors import InvalidFieldError
from ..record import FIELDS, WILDCARD


class Outcome(Enum):
    """Result of matching one mask field against one URL field."""

    PERFECT = 1
    WILDCARD = 0
    NONE = None

    @property
    def score(self) -> Optional[int]:
        """1 for a literal match, 0 for a wildcard match, None otherwise."""
        return self.value

    @property
    def matched(self) -> bool:
        return self is not Outcome.NONE


class GlobMatcher:
    """Matcher for fields with plain leading/trailing ``*`` globs."""

    def evaluate(self, mask: Optional[str], value: Optional[str]) -> Outcome:
        if mask == WILDCARD:
            return Outcome.WILDCARD
        if mask == value:
            return Outcome.PERFECT
        if mask is None or value is None:
            return Outcome.NONE
        return self.evaluate_pattern(mask, value)

    def evaluate_pattern(self, mask: str, value: str) -> Outcome:
        """Match a non-trivial mask against a present value."""
        if mask.startswith(WILDCARD):
            return _outcome(value.endswith(mask[1:]))
        if mask.endswith(WILDCARD):
            return _outcome(value.startswith(mask[:-1]))
        return Outcome.NONE


class HostnameMatcher(GlobMatcher):
    """Hostname matcher; wildcards are anchored on the right-hand labels."""

    def evaluate_pattern(self, mask: str, value: str) -> Outcome:
        if mask.startswith("**."):
            suffix = mask[3:]
            return _outcome(value == suffix or value.endswith("." + suffix))
        if mask.startswith("*."):
            # at least one non-empty label before the suffix
            suffix = mask[1:]
            return _outcome(len(value) > len(suffix) and value.endswith(suffix))
        return super().evaluate_pattern(mask, value)


class PathMatcher(GlobMatcher):
    """Path matcher; wildcards are anchored on the left-hand segments."""

    def evaluate_pattern(self, mask: str, value: str) -> Outcome:
        if mask.endswith("/**"):
            prefix = mask[:-3]
            return _outcome(value == prefix or value.startswith(prefix + "/"))
        return super().evaluate_pattern(mask, value)


def _outcome(wildcard_matched: bool) -> Outcome:
    return Outcome.WILDCARD if wildcard_matched else Outcome.NONE


GLOB_MATCHER = GlobMatcher()

FIELD_MATCHERS: dict[str, GlobMatcher] = {
    name: GLOB_MATCHER for name in FIELDS
}
FIELD_MATCHERS["hostname"] = HostnameMatcher()
FIELD_MATCHERS["path"] = PathMatcher()


def matcher_for(kind: Optional[str]) -> GlobMatcher:
    """Return the matcher for a field name (None for the plain glob)."""
    if kind is None:
        return GLOB_MATCHER
    try:
        return FIELD_MATCHERS[kind]
    except KeyError:
        raise InvalidFieldError(f"Unknown URL field: {kind}") from None


def fuzzy_match(mask: Optional[str], value: Optional[str], kind: Optional[str] = None) -> Outcome:
    """Match one mask field value against one URL field value.

    Args:
        mask: Mask value, may contain wildcards
        value: URL value, matched literally
        kind: Field name selecting the wildcard grammar (None for plain glob)

    Returns:
        Outcome.PERFECT, Outcome.WILDCARD or Outcome.NONE
    """
    return matcher_for(kind).evaluate(mask, value)
