import pytest
from pydantic import ValidationError

from termblock import ConfigurationError, RuleSet
from termblock.ruleset import DEFAULT_RULES, RECOGNIZED_COMMANDS
from termblock.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("PROGRAM_NAME", "EXTRA_COMMANDS", "TRANSCRIPT_HINTS", "LOG_LEVEL"):
        monkeypatch.delenv(f"TERMBLOCK_{name}", raising=False)


def test_defaults_match_default_rules():
    assert Settings().to_ruleset() == DEFAULT_RULES


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TERMBLOCK_PROGRAM_NAME", "tb")
    monkeypatch.setenv("TERMBLOCK_EXTRA_COMMANDS", "npm, docker")
    monkeypatch.setenv("TERMBLOCK_TRANSCRIPT_HINTS", "bash,Shell")
    rules = Settings().to_ruleset()
    assert rules.program_name == "tb"
    assert {"npm", "docker"} <= rules.commands
    assert RECOGNIZED_COMMANDS <= rules.commands
    assert rules.transcript_hints == frozenset({"bash", "shell"})


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("TERMBLOCK_EXTRA_COMMANDS=kubectl\n", encoding="utf-8")
    assert "kubectl" in Settings().to_ruleset().commands


def test_explicit_overrides_win(monkeypatch):
    monkeypatch.setenv("TERMBLOCK_PROGRAM_NAME", "tb")
    settings = get_settings(program_name="other", log_level=None)
    assert settings.program_name == "other"
    assert settings.log_level == "WARNING"


def test_extra_commands_argument():
    rules = Settings().to_ruleset(extra_commands=["npm"])
    assert "npm" in rules.commands


def test_log_level_is_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_empty_transcript_hints_rejected():
    with pytest.raises(ConfigurationError):
        Settings(transcript_hints=" , ").to_ruleset()


@pytest.mark.parametrize("name", ["", "my tool"])
def test_invalid_program_name_rejected(name):
    with pytest.raises(ConfigurationError):
        RuleSet.create(program_name=name)


def test_is_transcript():
    assert DEFAULT_RULES.is_transcript(None)
    assert DEFAULT_RULES.is_transcript("Bash")
    assert not DEFAULT_RULES.is_transcript("json")
    assert "mako" in DEFAULT_RULES.all_commands
    assert "mako" not in DEFAULT_RULES.commands
