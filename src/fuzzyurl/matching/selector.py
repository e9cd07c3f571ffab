"""Selecting the best of several URL masks for a URL."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from ..protocols import NO_PORTS, PortTable
from .record import MaskLike, UrlLike, as_mask, as_url, match

logger = logging.getLogger(__name__)


def rank_matches(
    masks: Sequence[MaskLike],
    url: UrlLike,
    *,
    ports: PortTable = NO_PORTS,
) -> list[tuple[int, int]]:
    """Score every mask against url.

    Returns:
        (index, score) pairs for the matching masks, best score first and
        earlier index first among equal scores
    """
    url_record = as_url(url)
    scored = []
    for index, mask in enumerate(masks):
        score = match(as_mask(mask), url_record, ports=ports)
        logger.debug("mask %d %r -> %s", index, mask, score)
        if score is not None:
            scored.append((index, score))

    scored.sort(key=lambda item: (-item[1], item[0]))
    return scored


def best_match_index(
    masks: Sequence[MaskLike],
    url: UrlLike,
    *,
    ports: PortTable = NO_PORTS,
) -> Optional[int]:
    """Return the index of the mask that best matches url.

    Ties go to the mask declared first. Returns None if no mask matches;
    an index of 0 is a real result, so compare against None.
    """
    ranked = rank_matches(masks, url, ports=ports)
    if not ranked:
        logger.debug("best match for %r: none", url)
        return None

    index, score = ranked[0]
    logger.debug("best match for %r: index=%s score=%s", url, index, score)
    return index


def best_match(
    masks: Sequence[MaskLike],
    url: UrlLike,
    *,
    ports: PortTable = NO_PORTS,
) -> MaskLike:
    """Return the element of masks that best matches url, or None."""
    index = best_match_index(masks, url, ports=ports)
    if index is None:
        return None
    return masks[index]
