"""Default port lookup per protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional


class PortTable:
    """Two-way lookup between protocol names and their default ports.

    When several protocols share a port, the reverse lookup returns the
    first one declared.
    """

    def __init__(self, ports: Mapping[str, str | int] | None = None):
        self._ports: dict[str, str] = {
            protocol: str(port) for protocol, port in (ports or {}).items()
        }
        self._protocols: dict[str, str] = {}
        for protocol, port in self._ports.items():
            self._protocols.setdefault(port, protocol)

    def port_for(self, protocol: Optional[str]) -> Optional[str]:
        """Return the default port for a protocol, or None if unknown."""
        if not protocol:
            return None
        return self._ports.get(protocol)

    def protocol_for(self, port: Optional[str]) -> Optional[str]:
        """Return the protocol whose default port is port, or None."""
        if not port:
            return None
        return self._protocols.get(port)

    def merged(self, overrides: Mapping[str, str | int]) -> PortTable:
        """Return a new table with overrides applied on top of this one."""
        return PortTable({**self._ports, **{k: str(v) for k, v in overrides.items()}})

    def to_dict(self) -> dict[str, str]:
        return dict(self._ports)

    def __len__(self) -> int:
        return len(self._ports)

    def __repr__(self) -> str:
        return f"PortTable({self._ports!r})"


DEFAULT_PORTS = PortTable({
    "ftp": 21,
    "ssh": 22,
    "http": 80,
    "https": 443,
})

NO_PORTS = PortTable()
