"""Tests for URL typo correction."""

import pytest

from fuzzyurl.errors import CorrectionError
from fuzzyurl.normalize import correct_url


class TestCorrectUrl:
    """Tests for correct_url."""

    def test_protocol_typo(self):
        assert correct_url("htp://example.com") == "http://example.com/"
        assert correct_url("htps://example.com") == "https://example.com/"

    def test_tld_typo(self):
        assert correct_url("example.cmo") == "https://example.com/"
        assert correct_url("example.con") == "https://example.com/"

    def test_lowercase_and_strip(self):
        assert correct_url("  HTTPS://Example.COM/Path  ") == "https://example.com/path"

    def test_trailing_punctuation(self):
        assert correct_url("example.org!!") == "https://example.org/"

    def test_underscores(self):
        assert correct_url("my_cool__site.net") == "https://my-cool-site.net/"

    def test_missing_tld(self):
        assert correct_url("example") == "https://example.com/"

    def test_common_site_gets_www(self):
        assert correct_url("google.com/search?q=x") == "https://www.google.com/search?q=x"
        assert correct_url("www.google.com") == "https://www.google.com/"

    def test_other_protocol_kept(self):
        assert correct_url("ftp://files.example.org/pub") == "ftp://files.example.org/pub"

    def test_default_protocol(self):
        assert correct_url("example.com", default_protocol="http") == "http://example.com/"

    def test_custom_tables(self):
        assert correct_url("intranet.local", valid_tlds={"LOCAL"}) == "https://intranet.local/"
        assert correct_url("example.com", common_sites={"example.com"}) == "https://www.example.com/"

    def test_invalid_tld(self):
        with pytest.raises(CorrectionError, match="Invalid TLD"):
            correct_url("example.zzz")

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text):
        with pytest.raises(CorrectionError, match="empty"):
            correct_url(text)

    def test_missing_hostname(self):
        with pytest.raises(CorrectionError):
            correct_url("https:///path")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            correct_url("example.zzz")
