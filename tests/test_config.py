"""Tests for configuration module."""

import pytest

from fuzzyurl.config import (
    FuzzyurlConfig,
    get_default_config_yaml,
    load_config,
    validate_config,
)
from fuzzyurl.errors import ConfigError
from fuzzyurl.protocols import DEFAULT_PORTS


class TestFuzzyurlConfigDefaults:
    """Tests for FuzzyurlConfig default values."""

    def test_default_protocol(self):
        assert FuzzyurlConfig().default_protocol == "https"

    def test_default_masks(self):
        assert FuzzyurlConfig().masks == []

    def test_default_common_sites(self):
        assert "google.com" in FuzzyurlConfig().common_sites

    def test_default_port_table(self):
        assert FuzzyurlConfig().get_port_table() is DEFAULT_PORTS


class TestFuzzyurlConfigMethods:
    """Tests for FuzzyurlConfig methods."""

    def test_port_overrides(self):
        config = FuzzyurlConfig(default_ports={"postgres": "5432"})
        table = config.get_port_table()
        assert table.port_for("postgres") == "5432"
        assert table.port_for("https") == "443"

    def test_extra_tlds(self):
        config = FuzzyurlConfig(extra_tlds=[".local", "Internal"])
        tlds = config.get_valid_tlds()
        assert "LOCAL" in tlds
        assert "INTERNAL" in tlds
        assert "COM" in tlds


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == FuzzyurlConfig()

    def test_found_in_cwd(self, tmp_path, monkeypatch, write_config):
        monkeypatch.chdir(tmp_path)
        write_config("fuzzyurl:\n  default_protocol: http\n")
        assert load_config().default_protocol == "http"

    def test_explicit_path(self, write_config):
        path = write_config(
            "fuzzyurl:\n"
            "  default_ports:\n"
            "    postgres: 5432\n"
            "  extra_tlds: [local]\n"
            "  masks:\n"
            "    - '**.example.com/api/**'\n"
            "    - '*'\n",
            name="custom.yaml",
        )
        config = load_config(path)
        assert config.default_ports == {"postgres": "5432"}
        assert config.extra_tlds == ["local"]
        assert config.masks == ["**.example.com/api/**", "*"]

    def test_without_section(self, write_config):
        path = write_config("default_protocol: ftp\n")
        assert load_config(path).default_protocol == "ftp"

    def test_empty_file(self, write_config):
        assert load_config(write_config("")) == FuzzyurlConfig()

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml", exit_on_error=False)

    def test_missing_explicit_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_config):
        path = write_config("fuzzyurl: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path, exit_on_error=False)

    def test_invalid_values(self, write_config):
        path = write_config("fuzzyurl:\n  masks: '*'\n")
        with pytest.raises(ConfigError, match="masks"):
            load_config(path, exit_on_error=False)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid(self, write_config):
        assert validate_config(write_config("fuzzyurl:\n  masks: ['*']\n")) == []

    def test_unknown_key(self, write_config):
        errors = validate_config(write_config("fuzzyurl:\n  hosts: []\n"))
        assert errors == ["Unknown key: 'hosts'"]

    def test_bad_port(self, write_config):
        errors = validate_config(write_config("fuzzyurl:\n  default_ports:\n    http: eighty\n"))
        assert len(errors) == 1
        assert "default_ports.http" in errors[0]

    def test_not_a_mapping(self, write_config):
        errors = validate_config(write_config("- a\n- b\n"))
        assert "must be a YAML mapping" in errors[0]

    def test_default_template_is_valid(self, write_config):
        path = write_config(get_default_config_yaml())
        assert validate_config(path) == []
        assert load_config(path) == FuzzyurlConfig()
