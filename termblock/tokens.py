"""Quote-aware tokenizer and token categories for command lines."""

from __future__ import annotations

from loguru import logger

from .registry import TOKEN_RULES
from .ruleset import DEFAULT_RULES, PIPE_TOKENS, RuleSet
from .types import Token, TokenCategory

_QUOTES = "\"'"


def tokenize_command_line(line: str) -> list[str]:
    """Split *line* on whitespace, keeping quoted runs inside a single token.

    A quote with no closing partner swallows the rest of the line.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for ch in line:
        if quote is not None:
            current.append(ch)
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
            current.append(ch)
        elif ch.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


@TOKEN_RULES.rule(TokenCategory.DOLLAR_PROMPT, description="Shell prompt marker")
def _is_prompt(token: str, rules: RuleSet) -> bool:
    return token == "$"


@TOKEN_RULES.rule(TokenCategory.COMMAND, description="Known program, or a name it prefixes")
def _is_command(token: str, rules: RuleSet) -> bool:
    return any(token.startswith(name) for name in rules.all_commands)


@TOKEN_RULES.rule(TokenCategory.FLAG, description="Short or long option")
def _is_flag(token: str, rules: RuleSet) -> bool:
    if token.startswith("--"):
        return True
    return token.startswith("-") and len(token) > 1 and not token[1].isspace()


@TOKEN_RULES.rule(TokenCategory.QUOTED_STRING, description="Single- or double-quoted run")
def _is_quoted(token: str, rules: RuleSet) -> bool:
    return token[:1] in _QUOTES and token.endswith(token[0])


@TOKEN_RULES.rule(TokenCategory.URL, description="http or https address")
def _is_url(token: str, rules: RuleSet) -> bool:
    return "http://" in token or "https://" in token


@TOKEN_RULES.rule(TokenCategory.PIPE_OR_REDIRECT, description="Pipe, redirect or continuation")
def _is_pipe(token: str, rules: RuleSet) -> bool:
    return token in PIPE_TOKENS


@TOKEN_RULES.rule(TokenCategory.PATH, description="Filesystem path or file name")
def _is_path(token: str, rules: RuleSet) -> bool:
    return "/" in token or token.startswith("~") or "." in token


def categorize(token: str, rules: RuleSet = DEFAULT_RULES) -> TokenCategory:
    return TOKEN_RULES.match(token, rules, default=TokenCategory.PLAIN)


def tokenize(line: str, rules: RuleSet = DEFAULT_RULES) -> tuple[Token, ...]:
    """Tokenize a command line and categorize every token."""
    tokens = tuple(Token(text, categorize(text, rules)) for text in tokenize_command_line(line))
    logger.debug("Tokenized {!r} into {} tokens", line, len(tokens))
    return tokens


def split_assignment(line: str) -> tuple[Token, Token]:
    """Split ``NAME=value`` on the first ``=`` into name and value tokens."""
    name, _, value = line.partition("=")
    return (
        Token(name, TokenCategory.ENV_VAR_NAME),
        Token(value, TokenCategory.ENV_VAR_VALUE),
    )


__all__ = ["categorize", "split_assignment", "tokenize", "tokenize_command_line"]
