import pytest

from minishell.config import ConfigurationError, runtime
from minishell.config.runtime_helpers import DotenvLoader


def test_env_str_prefers_environment(monkeypatch):
    monkeypatch.setenv("MINISHELL_PROMPT", "$ ")
    assert runtime.env_str("MINISHELL_PROMPT", strip=False) == "$ "


def test_env_str_returns_fallback_when_unset():
    assert runtime.env_str("MINISHELL_UNSET_VALUE", or_value="fallback") == "fallback"


def test_env_str_required_raises_when_unset():
    with pytest.raises(ConfigurationError):
        runtime.env_str("MINISHELL_UNSET_VALUE", required=True)


def test_env_str_allow_blank_keeps_empty_value(monkeypatch):
    monkeypatch.setenv("MINISHELL_PROMPT", "")
    assert runtime.env_str("MINISHELL_PROMPT", or_value="% ", allow_blank=True) == ""
    assert runtime.env_str("MINISHELL_PROMPT", or_value="% ") == "% "


def test_env_int_parses_and_rejects(monkeypatch):
    monkeypatch.setenv("MINISHELL_MAX_LINE", "64")
    assert runtime.env_int("MINISHELL_MAX_LINE") == 64

    monkeypatch.setenv("MINISHELL_MAX_LINE", "lots")
    with pytest.raises(ConfigurationError):
        runtime.env_int("MINISHELL_MAX_LINE")


@pytest.mark.parametrize("raw,expected", [("yes", True), ("0", False), ("On", True), ("f", False)])
def test_env_bool_accepts_common_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv("MINISHELL_LOG_APPEND", raw)
    assert runtime.env_bool("MINISHELL_LOG_APPEND") is expected


def test_env_bool_rejects_garbage(monkeypatch):
    monkeypatch.setenv("MINISHELL_LOG_APPEND", "maybe")
    with pytest.raises(ConfigurationError):
        runtime.env_bool("MINISHELL_LOG_APPEND")


def test_dotenv_values_fill_unset_variables(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# comment\nMINISHELL_MAX_LINE=42\nexport MINISHELL_PROMPT='> '\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (dotenv,))
    runtime.reset_default_values()

    assert runtime.env_int("MINISHELL_MAX_LINE") == 42
    assert runtime.env_str("MINISHELL_PROMPT", strip=False) == "> "

    monkeypatch.setenv("MINISHELL_MAX_LINE", "7")
    assert runtime.env_int("MINISHELL_MAX_LINE") == 7


def test_dotenv_loader_missing_file_is_empty(tmp_path):
    assert DotenvLoader.load_from_file(tmp_path / "absent.env") == {}


def test_dotenv_loader_skips_malformed_lines(tmp_path):
    path = tmp_path / "values.env"
    path.write_text("\nnot a pair\nKEY = \"value\"\n")
    assert DotenvLoader.load_from_file(path) == {"KEY": "value"}


def test_dotenv_loader_unreadable_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        DotenvLoader.load_from_file(tmp_path)
