"""Exceptions raised by fuzzyurl."""


class FuzzyurlError(Exception):
    """Base class for fuzzyurl errors."""

    pass


class InvalidMaskError(FuzzyurlError, TypeError):
    """Raised when a mask or URL argument has an unsupported type."""

    pass


class InvalidFieldError(FuzzyurlError, ValueError):
    """Raised when an unknown URL field name is used."""

    pass


class CorrectionError(FuzzyurlError, ValueError):
    """Raised when a URL cannot be corrected into a valid one."""

    pass


class ConfigError(FuzzyurlError):
    """Raised when a configuration file cannot be loaded."""

    pass
