"""Heuristic correction of mistyped URLs.

This runs before URLs reach the matcher and is independent of it: the
lookup tables are passed in, and nothing here is needed for matching.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection

from ..codec import parse, serialize
from ..errors import CorrectionError
from .tlds import COMMON_SITES, VALID_TLDS

logger = logging.getLogger(__name__)

PROTOCOL_TYPOS = [
    (re.compile(r"^htp://"), "http://"),
    (re.compile(r"^htps://"), "https://"),
]
TLD_TYPO_RE = re.compile(r"\.(cmo|con|cm)$")
TRAILING_PUNCTUATION_RE = re.compile(r"[.,;!?]+$")
UNDERSCORES_RE = re.compile(r"_+")
SINGLE_LABEL_RE = re.compile(r"^[a-z0-9-]+$")


def correct_url(
    text: str,
    *,
    valid_tlds: Collection[str] = VALID_TLDS,
    common_sites: Collection[str] = COMMON_SITES,
    default_protocol: str = "https",
) -> str:
    """Fix common typos in a user-entered URL and validate the result.

    Examples:
        "htp://Example.cmo" -> "http://example.com/"
        "my_site" -> "https://my-site.com/"
        "google.com/search" -> "https://www.google.com/search"

    Args:
        text: URL as typed by a user
        valid_tlds: Accepted top-level domains, upper case
        common_sites: Domains that get a "www." prefix when it is missing
        default_protocol: Protocol added when the input has none

    Returns:
        The corrected URL

    Raises:
        CorrectionError: If the input is empty or its TLD is not valid
    """
    if not text or not text.strip():
        raise CorrectionError("Input URL cannot be empty.")

    url = text.strip().lower()

    for pattern, replacement in PROTOCOL_TYPOS:
        url = pattern.sub(replacement, url)
    url = TLD_TYPO_RE.sub(".com", url)
    url = TRAILING_PUNCTUATION_RE.sub("", url)
    url = UNDERSCORES_RE.sub("-", url)

    if "://" not in url:
        url = f"{default_protocol}://{url}"

    record = parse(url)
    hostname = record.hostname
    if not hostname:
        raise CorrectionError(f"Invalid URL after corrections \"{url}\": missing hostname")

    if SINGLE_LABEL_RE.match(hostname):
        hostname += ".com"
    if hostname in common_sites and not hostname.startswith("www."):
        hostname = "www." + hostname

    tld = hostname.rsplit(".", 1)[-1]
    if tld.upper() not in valid_tlds:
        raise CorrectionError(f"Invalid TLD \"{tld}\" in URL: {text}")

    record = record.replace(hostname=hostname, path=record.path or "/")
    corrected = serialize(record)
    if corrected != text:
        logger.debug("corrected %r -> %r", text, corrected)
    return corrected
