"""Value types produced by the transcript classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineKind(str, Enum):
    COMMENT = "comment"
    ENV_ASSIGNMENT = "env_assignment"
    COMMAND = "command"
    OUTPUT = "output"


class TokenCategory(str, Enum):
    DOLLAR_PROMPT = "dollar_prompt"
    COMMAND = "command"
    FLAG = "flag"
    QUOTED_STRING = "quoted_string"
    URL = "url"
    PIPE_OR_REDIRECT = "pipe_or_redirect"
    PATH = "path"
    ENV_VAR_NAME = "env_var_name"
    ENV_VAR_VALUE = "env_var_value"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class Token:
    text: str
    category: TokenCategory

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "category": self.category.value}


@dataclass(frozen=True, slots=True)
class Line:
    """One classified line of a transcript.

    ``tokens`` is empty for comments and output lines.
    """

    raw: str
    kind: LineKind
    tokens: tuple[Token, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "raw": self.raw,
            "kind": self.kind.value,
            "tokens": [token.to_dict() for token in self.tokens],
        }


__all__ = ["LineKind", "TokenCategory", "Token", "Line"]
