"""URL record data model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace as dc_replace
from typing import Any, Optional

from .errors import InvalidFieldError, InvalidMaskError

FIELDS: tuple[str, ...] = (
    "protocol",
    "username",
    "password",
    "hostname",
    "port",
    "path",
    "query",
    "fragment",
)

WILDCARD = "*"


def _check_field_names(names) -> None:
    unknown = [name for name in names if name not in FIELDS]
    if unknown:
        raise InvalidFieldError(f"Unknown URL field(s): {', '.join(sorted(unknown))}")


@dataclass(frozen=True)
class UrlRecord:
    """A URL (or URL mask) split into its eight components.

    Every field is either a string or ``None`` when the component was
    absent. Masks may also hold ``"*"`` wildcard patterns.
    """

    protocol: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    hostname: Optional[str] = None
    port: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not isinstance(value, str):
                raise InvalidMaskError(
                    f"URL field {f.name} must be a string or None, got {type(value).__name__}"
                )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> UrlRecord:
        """Build a record from a mapping of field names to values.

        Raises:
            InvalidFieldError: If the mapping has keys that are not URL fields
        """
        _check_field_names(mapping.keys())
        return cls(**{name: _as_field_value(mapping[name]) for name in mapping})

    def replace(self, **changes: Optional[str]) -> UrlRecord:
        """Return a copy with the given fields replaced."""
        _check_field_names(changes.keys())
        return dc_replace(self, **changes)

    def to_dict(self) -> dict[str, Optional[str]]:
        """Return the fields as an ordered dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def is_empty(self) -> bool:
        """True if every field is absent."""
        return all(value is None for value in self.to_dict().values())

    def __str__(self) -> str:
        from .codec import serialize
        return serialize(self)


def _as_field_value(value: Any) -> Optional[str]:
    # Ports are commonly given as integers
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise InvalidMaskError(f"URL field values must be strings, got {type(value).__name__}")


MASK_TEMPLATE = UrlRecord(**{name: WILDCARD for name in FIELDS})


def build_mask(params: str | UrlRecord | Mapping[str, Any] | None = None) -> UrlRecord:
    """Build a URL mask, defaulting every unspecified field to ``"*"``.

    Examples:
        build_mask() -> all fields "*"
        build_mask("*.example.com/api/**") -> hostname and path set, rest "*"
        build_mask({"hostname": "example.com"}) -> only hostname set

    Args:
        params: Mask string, record, mapping of fields, or None

    Returns:
        A new UrlRecord with every absent field set to the wildcard

    Raises:
        InvalidMaskError: If params is of any other type
    """
    if params is None:
        return MASK_TEMPLATE
    if isinstance(params, str):
        from .codec import parse
        overlay = parse(params, default=WILDCARD)
    elif isinstance(params, UrlRecord):
        overlay = params
    elif isinstance(params, Mapping):
        overlay = UrlRecord.from_mapping(params)
    else:
        raise InvalidMaskError(
            f"Mask must be a string, UrlRecord, mapping or None, got {type(params).__name__}"
        )

    values = {name: value for name, value in overlay.to_dict().items() if value is not None}
    return MASK_TEMPLATE.replace(**values)
