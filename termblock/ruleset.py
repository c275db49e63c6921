"""Command names and language hints that drive classification."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import ConfigurationError

PROGRAM_NAME = "mako"

RECOGNIZED_COMMANDS = frozenset(
    {
        "curl",
        "git",
        "make",
        "cd",
        "cp",
        "nano",
        "ollama",
        "sudo",
        "brew",
        "apt",
        "export",
        "source",
        "bash",
        "sh",
    }
)

TRANSCRIPT_HINTS = frozenset({"bash"})

PIPE_TOKENS = frozenset({"|", ">", ">>", "<", "\\"})


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable, hashable bundle of the names the classifier recognizes."""

    program_name: str = PROGRAM_NAME
    commands: frozenset[str] = RECOGNIZED_COMMANDS
    transcript_hints: frozenset[str] = TRANSCRIPT_HINTS

    @classmethod
    def create(
        cls,
        *,
        program_name: str = PROGRAM_NAME,
        commands: Iterable[str] = RECOGNIZED_COMMANDS,
        extra_commands: Iterable[str] = (),
        transcript_hints: Iterable[str] = TRANSCRIPT_HINTS,
    ) -> RuleSet:
        names = {*commands, *extra_commands}
        for name in (program_name, *names):
            _validate_name(name)
        hints = {hint.strip().lower() for hint in transcript_hints}
        if not hints or "" in hints:
            raise ConfigurationError("At least one non-empty transcript hint is required")
        return cls(
            program_name=program_name,
            commands=frozenset(names),
            transcript_hints=frozenset(hints),
        )

    @property
    def all_commands(self) -> frozenset[str]:
        return self.commands | {self.program_name}

    def is_transcript(self, language_hint: str | None) -> bool:
        if language_hint is None:
            return True
        return language_hint.strip().lower() in self.transcript_hints


def _validate_name(name: str) -> None:
    if not name:
        raise ConfigurationError("Command names must not be empty")
    if any(ch.isspace() for ch in name):
        raise ConfigurationError(f"Command name {name!r} contains whitespace")


DEFAULT_RULES = RuleSet()


__all__ = [
    "DEFAULT_RULES",
    "PIPE_TOKENS",
    "PROGRAM_NAME",
    "RECOGNIZED_COMMANDS",
    "RuleSet",
    "TRANSCRIPT_HINTS",
]
