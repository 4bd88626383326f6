import logging

import pytest

from minishell.config import ConfigurationError, ShellSettings, load_settings


def test_defaults_match_reference_behavior():
    settings = load_settings()
    assert settings == ShellSettings()
    assert settings.prompt == "% "
    assert settings.max_line == 100
    assert settings.exec_failure_status == 127
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING
    assert settings.log_file is None
    assert settings.log_append is False


def test_environment_values_are_used(monkeypatch):
    monkeypatch.setenv("MINISHELL_PROMPT", "$ ")
    monkeypatch.setenv("MINISHELL_MAX_LINE", "256")
    monkeypatch.setenv("MINISHELL_EXEC_FAILURE_STATUS", "1")
    monkeypatch.setenv("MINISHELL_LOG_LEVEL", "debug")
    monkeypatch.setenv("MINISHELL_LOG_FILE", "/tmp/minishell.log")
    monkeypatch.setenv("MINISHELL_LOG_APPEND", "true")

    settings = load_settings()

    assert settings.prompt == "$ "
    assert settings.max_line == 256
    assert settings.exec_failure_status == 1
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/tmp/minishell.log"
    assert settings.log_append is True


def test_blank_prompt_is_allowed(monkeypatch):
    monkeypatch.setenv("MINISHELL_PROMPT", "")
    assert load_settings().prompt == ""


def test_overrides_win_over_environment_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("MINISHELL_MAX_LINE", "256")
    settings = load_settings(max_line=50, prompt=None)
    assert settings.max_line == 50
    assert settings.prompt == "% "


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_line": 0},
        {"exec_failure_status": 0},
        {"exec_failure_status": 256},
        {"log_level": "chatty"},
        {"no_such_setting": 1},
    ],
)
def test_invalid_values_raise_configuration_error(overrides):
    with pytest.raises(ConfigurationError):
        load_settings(**overrides)


def test_malformed_environment_value_raises(monkeypatch):
    monkeypatch.setenv("MINISHELL_EXEC_FAILURE_STATUS", "one")
    with pytest.raises(ConfigurationError):
        load_settings()
