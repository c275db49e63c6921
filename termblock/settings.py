"""Environment-driven settings for termblock."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ruleset import PROGRAM_NAME, RECOGNIZED_COMMANDS, TRANSCRIPT_HINTS, RuleSet

_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


def _split_names(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    """Settings read from ``TERMBLOCK_*`` variables or a ``.env`` file."""

    program_name: str = Field(default=PROGRAM_NAME, description="Program name treated as a command")
    extra_commands: str = Field(default="", description="Comma-separated command names to add")
    transcript_hints: str = Field(
        default=",".join(sorted(TRANSCRIPT_HINTS)),
        description="Comma-separated language hints classified as transcripts",
    )
    log_level: str = Field(default="WARNING", description="Log level")

    model_config = SettingsConfigDict(
        env_prefix="TERMBLOCK_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}")
        return level

    def to_ruleset(self, extra_commands: Iterable[str] = ()) -> RuleSet:
        """Build a validated rule set; raises ``ConfigurationError`` on bad names."""
        return RuleSet.create(
            program_name=self.program_name.strip(),
            commands=RECOGNIZED_COMMANDS,
            extra_commands=[*_split_names(self.extra_commands), *extra_commands],
            transcript_hints=_split_names(self.transcript_hints),
        )


def get_settings(**overrides: object) -> Settings:
    """Load settings, letting explicit keyword overrides win over the environment."""
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)


__all__ = ["Settings", "get_settings"]
