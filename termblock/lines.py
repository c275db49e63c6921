"""Line-level classification of command transcripts."""

from __future__ import annotations

import re
from functools import lru_cache

from loguru import logger

from .ruleset import DEFAULT_RULES, RuleSet
from .tokens import split_assignment, tokenize
from .types import Line, LineKind

_ASSIGNMENT_RE = re.compile(r"^[A-Z_]+=")


def split_lines(text: str) -> list[str]:
    """Split on ``\\n``; a single trailing newline ends the last line.

    Empty input has no lines. A stray ``\\r`` from CRLF input is dropped.
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def line_kind(line: str, rules: RuleSet = DEFAULT_RULES) -> LineKind:
    stripped = line.strip()
    if stripped.startswith("#"):
        return LineKind.COMMENT
    if _ASSIGNMENT_RE.match(stripped):
        return LineKind.ENV_ASSIGNMENT
    if _is_command_line(stripped, rules):
        return LineKind.COMMAND
    return LineKind.OUTPUT


def _is_command_line(stripped: str, rules: RuleSet) -> bool:
    if stripped.startswith("$") or stripped.startswith(rules.program_name):
        return True
    words = stripped.split(None, 1)
    return bool(words) and words[0] in rules.commands


def classify_line(line: str, rules: RuleSet = DEFAULT_RULES) -> Line:
    kind = line_kind(line, rules)
    if kind is LineKind.COMMAND:
        return Line(line, kind, tokenize(line.strip(), rules))
    if kind is LineKind.ENV_ASSIGNMENT:
        return Line(line, kind, split_assignment(line.strip()))
    return Line(line, kind)


def classify_lines(
    text: str,
    language_hint: str | None = None,
    *,
    rules: RuleSet = DEFAULT_RULES,
) -> list[Line]:
    """Classify every line of *text*.

    A *language_hint* outside ``rules.transcript_hints`` marks the whole block
    as opaque output (JSON samples and the like).
    """
    lines = split_lines(text)
    if not rules.is_transcript(language_hint):
        logger.debug("Treating {} lines as opaque ({})", len(lines), language_hint)
        return [Line(line, LineKind.OUTPUT) for line in lines]
    return [classify_line(line, rules) for line in lines]


@lru_cache(maxsize=512)
def _classify_cached(text: str, language_hint: str | None, rules: RuleSet) -> tuple[Line, ...]:
    return tuple(classify_lines(text, language_hint, rules=rules))


def classify(
    text: str,
    language_hint: str | None = None,
    *,
    rules: RuleSet = DEFAULT_RULES,
) -> list[Line]:
    """Memoized entry point for renderers; returns a new list on every call."""
    return list(_classify_cached(text, language_hint, rules))


def clear_cache() -> None:
    _classify_cached.cache_clear()


__all__ = ["classify", "classify_line", "classify_lines", "clear_cache", "line_kind", "split_lines"]
