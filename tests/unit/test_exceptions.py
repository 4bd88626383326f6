from minishell.exceptions import (
    AlreadyReapedError,
    ApplicationError,
    CommandLineTooLongError,
    ProcessStateError,
)


def test_application_error_defaults_message_to_docstring():
    assert str(ApplicationError()) == "Base exception for all shell errors."


def test_keyword_context_is_stored_as_attributes():
    error = ProcessStateError("odd state", pid=4, state="waiting")
    assert str(error) == "odd state"
    assert error.pid == 4
    assert error.state == "waiting"


def test_line_too_long_message_and_fields():
    error = CommandLineTooLongError(length=120, limit=100)
    assert str(error) == "line too long (120 > 100 characters)"
    assert (error.length, error.limit) == (120, 100)
    assert isinstance(error, ApplicationError)


def test_already_reaped_is_a_process_state_error():
    error = AlreadyReapedError(pid=17)
    assert isinstance(error, ProcessStateError)
    assert str(error) == "Process 17 has already been reaped"
    assert error.pid == 17
