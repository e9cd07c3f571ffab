"""Configuration loader for fuzzyurl."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML, YAMLError

from .errors import ConfigError
from .normalize.tlds import COMMON_SITES, VALID_TLDS
from .protocols import DEFAULT_PORTS, PortTable


@dataclass
class FuzzyurlConfig:
    """fuzzyurl configuration."""

    # Protocol added by the corrector when input has none
    default_protocol: str = "https"

    # Extra or overridden default ports (protocol -> port)
    default_ports: dict[str, str] = field(default_factory=dict)

    # TLDs accepted by the corrector in addition to the built-in table
    extra_tlds: list[str] = field(default_factory=list)

    # Domains that get a "www." prefix from the corrector
    common_sites: list[str] = field(default_factory=lambda: sorted(COMMON_SITES))

    # Ordered mask list for `fuzzyurl best` (earlier wins ties)
    masks: list[str] = field(default_factory=list)

    def get_port_table(self) -> PortTable:
        """Return the built-in port table with overrides applied."""
        if not self.default_ports:
            return DEFAULT_PORTS
        return DEFAULT_PORTS.merged(self.default_ports)

    def get_valid_tlds(self) -> frozenset[str]:
        """Return all accepted TLDs, upper case."""
        return VALID_TLDS | {t.lstrip(".").upper() for t in self.extra_tlds}


CONFIG_SEARCH_PATHS = [
    "fuzzyurl.yaml",
    "fuzzyurl.yml",
    ".fuzzyurl.yaml",
    ".fuzzyurl.yml",
]

LIST_FIELDS = {"extra_tlds", "common_sites", "masks"}

KNOWN_KEYS = {"default_protocol", "default_ports"} | LIST_FIELDS


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _read_yaml(config_path: Path) -> Any:
    yaml = YAML()
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)
    # If there's a fuzzyurl section, use its contents
    if isinstance(data, dict) and "fuzzyurl" in data:
        data = data["fuzzyurl"]
    return data


def _check_data(data: Any) -> list[str]:
    """Return error messages for parsed config data (empty = valid)."""
    if data is None:
        return []

    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors: list[str] = []

    for key in data:
        if key not in KNOWN_KEYS:
            errors.append(f"Unknown key: '{key}'")

    if "default_protocol" in data and not isinstance(data["default_protocol"], str):
        errors.append("'default_protocol' must be a string")

    if "default_ports" in data:
        ports = data["default_ports"]
        if not isinstance(ports, dict):
            errors.append("'default_ports' must be a mapping (protocol: port)")
        else:
            for protocol, port in ports.items():
                if not str(port).isdigit():
                    errors.append(f"Invalid port for default_ports.{protocol}: {port}")

    for list_key in sorted(LIST_FIELDS):
        if list_key in data and not isinstance(data[list_key], list):
            errors.append(f"'{list_key}' must be a list")

    return errors


def validate_config(config_path: Path) -> list[str]:
    """Validate a config file and return a list of error messages (empty = valid)."""
    try:
        data = _read_yaml(config_path)
    except YAMLError as e:
        return [f"Invalid YAML syntax: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    return _check_data(data)


def load_config(
    config_path: str | Path | None = None,
    *,
    exit_on_error: bool = True,
) -> FuzzyurlConfig:
    """Load configuration file.

    Args:
        config_path: Explicit config file, or None to search the working directory
        exit_on_error: If True (default), print error and exit on failure.
                       If False, raise ConfigError instead.

    Raises:
        ConfigError: If exit_on_error is False and loading fails
    """
    config = FuzzyurlConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            _fail(f"Config file not found: {config_path}", exit_on_error)
        return config

    try:
        data = _read_yaml(config_path)
    except YAMLError as e:
        _fail(f"Invalid YAML in {config_path}: {e}", exit_on_error, e)
    except OSError as e:
        _fail(f"Cannot read config file {config_path}: {e}", exit_on_error, e)

    errors = _check_data(data)
    if errors:
        _fail(f"Invalid config {config_path}: {'; '.join(errors)}", exit_on_error)

    if data is None:
        return config

    # Apply settings
    if "default_protocol" in data:
        config.default_protocol = data["default_protocol"]
    if "default_ports" in data:
        config.default_ports = {str(k): str(v) for k, v in data["default_ports"].items()}
    if "extra_tlds" in data:
        config.extra_tlds = [str(t) for t in data["extra_tlds"]]
    if "common_sites" in data:
        config.common_sites = [str(s).lower() for s in data["common_sites"]]
    if "masks" in data:
        config.masks = [str(m) for m in data["masks"]]

    return config


def _fail(msg: str, exit_on_error: bool, cause: Exception | None = None) -> None:
    if exit_on_error:
        print(f"Error: {msg}", file=sys.stderr)
        sys.exit(1)
    raise ConfigError(msg) from cause


def get_default_config_yaml() -> str:
    """Return default YAML config template."""
    return r'''# fuzzyurl configuration
# Place this file as fuzzyurl.yaml in your working directory

fuzzyurl:
  # Protocol added to corrected URLs that have none
  default_protocol: https

  # Default ports used to infer a missing port (or protocol) when matching.
  # Built in: ftp 21, ssh 22, http 80, https 443
  default_ports: {}
    # ws: 80
    # postgres: 5432

  # TLDs accepted by `fuzzyurl correct` on top of the built-in list
  extra_tlds: []
    # - local
    # - internal

  # Masks tried by `fuzzyurl best` when none are given on the command line.
  # On equal scores the first mask listed wins.
  masks: []
    # - "https://**.example.com/api/**"
    # - "*.example.com/static/*"
'''
