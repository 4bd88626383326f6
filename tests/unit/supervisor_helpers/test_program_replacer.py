import signal

import pytest

from minishell.command import Command
from minishell.supervisor_helpers.program_replacer import (
    build_exec_argv,
    describe_error,
    replace_program,
    run_child_path,
)
from tests.helpers.process_fakes import ChildExited


def test_exec_argv_is_plain_list_of_command_tokens():
    assert build_exec_argv(Command(("echo", "hi"))) == ["echo", "hi"]


def test_replace_program_returns_error_instead_of_raising(fake_process_api):
    fake = fake_process_api(exec_error=PermissionError(13, "Permission denied"))
    error = replace_program(Command(("./script", "a")), fake.as_api())

    assert isinstance(error, PermissionError)
    assert fake.events == [("exec", "./script", ["./script", "a"])]


def test_replace_program_returns_value_error_for_unrepresentable_args(fake_process_api):
    fake = fake_process_api(exec_error=ValueError("embedded null byte"))
    assert isinstance(replace_program(Command(("echo",)), fake.as_api()), ValueError)


def test_failed_exec_reports_and_exits_with_distinguished_status(fake_process_api):
    fake = fake_process_api()

    with pytest.raises(ChildExited) as excinfo:
        run_child_path(Command(("nope", "x")), api=fake.as_api(), exec_failure_status=127)

    assert excinfo.value.status == 127
    assert fake.stderr_text() == "exec error: nope: No such file or directory\n"
    assert fake.event_names() == ["exec", "exit"]


def test_stdout_is_redirected_before_exec(fake_process_api, tmp_path):
    fake = fake_process_api()
    target = str(tmp_path / "out.txt")

    with pytest.raises(ChildExited):
        run_child_path(Command(("wc",)), api=fake.as_api(), exec_failure_status=1, stdout_path=target)

    assert fake.event_names() == ["redirect", "exec", "exit"]
    assert fake.events[0] == ("redirect", target)


def test_redirect_failure_skips_exec(fake_process_api):
    fake = fake_process_api(redirect_error=IsADirectoryError(21, "Is a directory"))

    with pytest.raises(ChildExited) as excinfo:
        run_child_path(Command(("wc",)), api=fake.as_api(), exec_failure_status=9, stdout_path="/tmp")

    assert excinfo.value.status == 9
    assert fake.event_names() == ["redirect", "exit"]
    assert fake.stderr_text() == "redirect error: /tmp: Is a directory\n"


def test_unexpected_error_still_ends_in_exit(fake_process_api):
    fake = fake_process_api(exec_error=RuntimeError("boom"))

    with pytest.raises(ChildExited) as excinfo:
        run_child_path(Command(("prog",)), api=fake.as_api(), exec_failure_status=127)

    assert excinfo.value.status == 127
    assert "exec error: prog: boom" in fake.stderr_text()


def test_child_restores_default_keyboard_signals(fake_process_api, monkeypatch):
    calls = []
    monkeypatch.setattr(signal, "signal", lambda sig, handler: calls.append((sig, handler)))
    fake = fake_process_api()

    with pytest.raises(ChildExited):
        run_child_path(
            Command(("prog",)),
            api=fake.as_api(),
            exec_failure_status=127,
            saved_signals={signal.SIGINT: signal.default_int_handler, signal.SIGQUIT: signal.SIG_IGN},
        )

    assert (signal.SIGINT, signal.SIG_DFL) in calls
    assert (signal.SIGQUIT, signal.SIG_IGN) in calls


def test_describe_error_prefers_strerror():
    assert describe_error(FileNotFoundError(2, "No such file or directory")) == "No such file or directory"
    assert describe_error(ValueError("embedded null byte")) == "embedded null byte"
