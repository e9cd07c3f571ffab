"""Conversion between URL strings and UrlRecord values.

The grammar is deliberately lenient:

    [protocol "://"] [username [":" password] "@"] [hostname] [":" port]
    ["/" path] ["?" query] ["#" fragment]

Parsing never rejects input. Components that are not delimited in the
string are left absent (or set to ``default`` when one is given).
"""

from __future__ import annotations

from typing import Optional

from .record import FIELDS, UrlRecord

PROTOCOL_SEPARATOR = "://"
AUTHORITY_TERMINATORS = "/?#"


def _first_index(text: str, chars: str) -> int:
    """Index of the first character of text found in chars, or len(text)."""
    for i, ch in enumerate(text):
        if ch in chars:
            return i
    return len(text)


def parse(text: str, default: Optional[str] = None) -> UrlRecord:
    """Split a URL or URL mask string into a UrlRecord.

    Args:
        text: URL or mask string
        default: Value for fields missing from text (use "*" for masks)

    Returns:
        UrlRecord with the parsed components
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")

    values: dict[str, Optional[str]] = dict.fromkeys(FIELDS)
    rest = text

    # protocol://, only when nothing before it ends the authority
    sep = rest.find(PROTOCOL_SEPARATOR)
    if sep != -1 and _first_index(rest[:sep], AUTHORITY_TERMINATORS) == sep:
        values["protocol"] = rest[:sep]
        rest = rest[sep + len(PROTOCOL_SEPARATOR):]

    end = _first_index(rest, AUTHORITY_TERMINATORS)
    authority, rest = rest[:end], rest[end:]

    credentials, at, hostport = authority.rpartition("@")
    if at:
        username, colon, password = credentials.partition(":")
        values["username"] = username
        if colon:
            values["password"] = password

    # Split on the last colon outside any [...] literal
    colon = hostport.rfind(":")
    if colon > hostport.rfind("]"):
        values["port"] = hostport[colon + 1:]
        hostport = hostport[:colon]
    if hostport:
        values["hostname"] = hostport

    rest, hash_mark, fragment = rest.partition("#")
    if hash_mark:
        values["fragment"] = fragment

    rest, question_mark, query = rest.partition("?")
    if question_mark:
        values["query"] = query

    if rest:
        values["path"] = rest

    if default is not None:
        values = {name: default if value is None else value for name, value in values.items()}

    return UrlRecord(**values)


def serialize(record: UrlRecord, default: Optional[str] = None) -> str:
    """Assemble a UrlRecord back into a string.

    Absent fields, and fields equal to ``default`` when it is given, are
    left out together with their delimiters.

    Credentials are written when either part is present. A password with no
    username is written as ``:password@``, which parses back with an empty
    (not absent) username.
    """

    def present(value: Optional[str]) -> bool:
        return value is not None and (default is None or value != default)

    parts: list[str] = []

    if present(record.protocol):
        parts += [record.protocol, PROTOCOL_SEPARATOR]

    if present(record.username) or present(record.password):
        if present(record.username):
            parts.append(record.username)
        if present(record.password):
            parts += [":", record.password]
        parts.append("@")

    if present(record.hostname):
        parts.append(record.hostname)
    if present(record.port):
        parts += [":", record.port]
    if present(record.path):
        parts.append(record.path)
    if present(record.query):
        parts += ["?", record.query]
    if present(record.fragment):
        parts += ["#", record.fragment]

    return "".join(parts)
