"""termblock package: line and token classification for terminal transcripts."""

from loguru import logger

from .exceptions import ConfigurationError, TermblockError
from .lines import classify, classify_line, classify_lines
from .render import render_html
from .ruleset import DEFAULT_RULES, RuleSet
from .tokens import categorize, tokenize, tokenize_command_line
from .types import Line, LineKind, Token, TokenCategory

logger.disable("termblock")

__all__ = [
    "classify",
    "classify_line",
    "classify_lines",
    "categorize",
    "tokenize",
    "tokenize_command_line",
    "render_html",
    "RuleSet",
    "DEFAULT_RULES",
    "Line",
    "LineKind",
    "Token",
    "TokenCategory",
    "TermblockError",
    "ConfigurationError",
]
