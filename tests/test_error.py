import inspect
import logging
from pathlib import Path

import pytest

from ltbkit.error import (
    ContextError,
    Error,
    Severity,
    SourceLocation,
    check_valid,
    invoke_if_non_null,
    log_error,
    make_context_error,
    make_error,
    make_warning,
    raise_error,
)


def _current_line() -> int:
    return inspect.currentframe().f_back.f_lineno


def test_debug_message_includes_file_and_line():
    error = Error(SourceLocation("file.cpp", 12), Severity.ERROR, "Bad thing")
    assert error.debug_error_message == "[file.cpp:12] Bad thing"
    assert error.error_message == "Bad thing"
    assert error.severity is Severity.ERROR
    assert error.source_location.filename == Path("file.cpp")
    assert error.source_location.line_number == 12


def test_debug_message_omits_negative_line():
    error = Error(SourceLocation("file.cpp", -1), Severity.WARNING, "msg")
    assert error.debug_error_message == "[file.cpp] msg"


def test_str_is_debug_message():
    error = Error(SourceLocation("a.py", 3), Severity.ERROR, "oops")
    assert str(error) == error.debug_error_message


def test_append_message_keeps_location_and_severity():
    original = Error(SourceLocation("x.py", 5), Severity.WARNING, "first")
    appended = Error.append_message(original, "second")
    assert appended.error_message == "first second"
    assert appended.severity is Severity.WARNING
    assert appended.source_location == original.source_location
    assert original.error_message == "first"


def test_equality_uses_debug_message():
    a = Error(SourceLocation("x.py", 5), Severity.ERROR, "m")
    b = Error(SourceLocation("x.py", 5), Severity.WARNING, "m")
    c = Error(SourceLocation("x.py", 6), Severity.ERROR, "m")
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)
    assert a != c


def test_make_error_captures_caller_location():
    line = _current_line() + 1
    error = make_error("Bad thing happened!")
    assert error.severity is Severity.ERROR
    assert error.source_location.filename.name == Path(__file__).name
    assert error.source_location.line_number == line
    assert error.error_message == "Bad thing happened!"


def test_make_warning_captures_caller_location():
    line = _current_line() + 1
    warning = make_warning("Not so bad thing happened!")
    assert warning.severity is Severity.WARNING
    assert warning.source_location.line_number == line
    assert warning.debug_error_message.endswith("] Not so bad thing happened!")


def test_make_error_accepts_severity():
    error = make_error("w", Severity.WARNING)
    assert error.severity is Severity.WARNING


def test_context_error_delegates():
    error = Error(SourceLocation("c.py", 1), Severity.ERROR, "ctx")
    ctx_error = make_context_error(error, {"code": 7})
    assert isinstance(ctx_error, ContextError)
    assert ctx_error.context == {"code": 7}
    assert ctx_error.error is error
    assert ctx_error.error_message == "ctx"
    assert ctx_error.debug_error_message == "[c.py:1] ctx"
    assert ctx_error.severity is Severity.ERROR
    assert ctx_error.source_location == error.source_location


def test_check_valid_raises_without_message():
    with pytest.raises(Error) as info:
        check_valid(None, "window")
    assert info.value.error_message == "window invalid"
    assert info.value.source_location.filename.name == Path(__file__).name


def test_check_valid_raises_with_message():
    with pytest.raises(Error) as info:
        check_valid(0, "count", "must be positive")
    assert info.value.error_message == "count invalid: must be positive"


def test_check_valid_passes_truthy_values():
    results = [check_valid(value, "v") for value in (1, "x", [0], True)]
    assert results == [None, None, None, None]


def test_log_error_uses_severity(caplog):
    error = Error(SourceLocation("l.py", 2), Severity.ERROR, "boom")
    warning = Error(SourceLocation("l.py", 3), Severity.WARNING, "hmm")
    with caplog.at_level(logging.DEBUG, logger="ltbkit.error"):
        log_error(error)
        log_error(warning)
    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert levels == [
        (logging.ERROR, "[l.py:2] boom"),
        (logging.WARNING, "[l.py:3] hmm"),
    ]


def test_invoke_if_non_null_calls_callback():
    received = []
    error = Error(SourceLocation("i.py", 4), Severity.ERROR, "e")
    invoke_if_non_null(received.append, error)
    invoke_if_non_null(None, error)
    assert received == [error]


def test_raise_error_default_runtime_error():
    error = Error(SourceLocation("r.py", 9), Severity.ERROR, "fail")
    with pytest.raises(RuntimeError, match=r"\[r\.py:9\] fail"):
        raise_error(error)


def test_raise_error_custom_type():
    error = Error(SourceLocation("r.py", 9), Severity.ERROR, "fail")
    with pytest.raises(ValueError) as info:
        raise_error(error, ValueError)
    assert str(info.value) == error.debug_error_message


def test_error_can_be_raised_and_caught():
    error = make_error("raised")
    assert error.error_message == "raised"
    with pytest.raises(Error) as info:
        raise error
    assert info.value is error
    assert info.value.severity is Severity.ERROR