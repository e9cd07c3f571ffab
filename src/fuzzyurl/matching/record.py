"""Whole-record matching of a URL mask against a URL."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from ..codec import parse
from ..errors import InvalidMaskError
from ..protocols import NO_PORTS, PortTable
from ..record import FIELDS, WILDCARD, UrlRecord, build_mask
from .field import matcher_for

MaskLike = Union[str, UrlRecord, Mapping[str, Any], None]
UrlLike = Union[str, UrlRecord, Mapping[str, Any]]


@dataclass(frozen=True)
class MatchScores:
    """Per-field match scores: 1 literal, 0 wildcard, None no match."""

    protocol: Optional[int] = None
    username: Optional[int] = None
    password: Optional[int] = None
    hostname: Optional[int] = None
    port: Optional[int] = None
    path: Optional[int] = None
    query: Optional[int] = None
    fragment: Optional[int] = None

    def to_dict(self) -> dict[str, Optional[int]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def matched(self) -> bool:
        """True if no field vetoed the match."""
        return all(score is not None for score in self.to_dict().values())

    @property
    def total(self) -> Optional[int]:
        """Sum of field scores, or None if any field did not match."""
        if not self.matched:
            return None
        return sum(self.to_dict().values())


def as_mask(mask: MaskLike) -> UrlRecord:
    """Coerce a mask argument into a UrlRecord."""
    if mask is None:
        return build_mask()
    if isinstance(mask, UrlRecord):
        return mask
    if isinstance(mask, str):
        return parse(mask, default=WILDCARD)
    if isinstance(mask, Mapping):
        return UrlRecord.from_mapping(mask)
    raise InvalidMaskError(
        f"Mask must be a string, UrlRecord, mapping or None, got {type(mask).__name__}"
    )


def as_url(url: UrlLike) -> UrlRecord:
    """Coerce a URL argument into a UrlRecord."""
    if isinstance(url, UrlRecord):
        return url
    if isinstance(url, str):
        return parse(url)
    if isinstance(url, Mapping):
        return UrlRecord.from_mapping(url)
    raise InvalidMaskError(
        f"URL must be a string, UrlRecord or mapping, got {type(url).__name__}"
    )


def infer_defaults(url: UrlRecord, ports: PortTable) -> UrlRecord:
    """Fill an absent protocol from the port, and an absent port from the protocol."""
    protocol = url.protocol if url.protocol is not None else ports.protocol_for(url.port)
    port = url.port if url.port is not None else ports.port_for(url.protocol)
    if protocol == url.protocol and port == url.port:
        return url
    return url.replace(protocol=protocol, port=port)


def match_scores(mask: MaskLike, url: UrlLike, *, ports: PortTable = NO_PORTS) -> MatchScores:
    """Score how well each field of mask matches the same field of url.

    Args:
        mask: URL mask (string, record, mapping, or None for all wildcards)
        url: URL to match (string, record or mapping)
        ports: Default port table used to infer a missing protocol or port
               (no inference unless one is given)

    Returns:
        MatchScores with 1, 0 or None for each field
    """
    mask_record = as_mask(mask)
    url_record = infer_defaults(as_url(url), ports)
    return MatchScores(**{
        name: matcher_for(name).evaluate(
            getattr(mask_record, name), getattr(url_record, name)
        ).score
        for name in FIELDS
    })


def match(mask: MaskLike, url: UrlLike, *, ports: PortTable = NO_PORTS) -> Optional[int]:
    """Return the total match score of mask against url, or None if they don't match.

    Scores range from 0 (every field matched by a wildcard) to 8 (every
    field matched literally).
    """
    return match_scores(mask, url, ports=ports).total


def matches(mask: MaskLike, url: UrlLike, *, ports: PortTable = NO_PORTS) -> bool:
    """True if mask matches url."""
    return match(mask, url, ports=ports) is not None
