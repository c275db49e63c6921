"""Exception types for termblock."""

from __future__ import annotations


class TermblockError(Exception):
    """Base exception for termblock."""


class ConfigurationError(TermblockError):
    """Raised when a rule set or settings value is invalid."""


__all__ = ["TermblockError", "ConfigurationError"]
