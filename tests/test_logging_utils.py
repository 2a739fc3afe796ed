import logging

import pytest

from ltbkit.error import Error
from ltbkit.logging_utils import TRACE, try_setting_log_level


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    saved = root.level
    yield
    root.setLevel(saved)


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("err", logging.ERROR),
        ("critical", logging.CRITICAL),
    ],
)
def test_sets_root_level(name, level):
    result = try_setting_log_level(name)
    assert result is None
    assert logging.getLogger().level == level


def test_trace_is_below_debug():
    result = try_setting_log_level("trace")
    assert result is None
    root = logging.getLogger()
    assert root.level == TRACE
    assert root.level < logging.DEBUG
    assert root.isEnabledFor(logging.DEBUG)


def test_off_disables_everything():
    result = try_setting_log_level("off")
    assert result is None
    assert not logging.getLogger().isEnabledFor(logging.CRITICAL)


def test_logs_chosen_level(caplog):
    try_setting_log_level("debug")
    assert "Log level: debug" in caplog.text


def test_unknown_level_raises_with_options():
    with pytest.raises(Error) as info:
        try_setting_log_level("verbose")
    message = info.value.error_message
    assert message.startswith("Unrecognized log level: 'verbose'\nAvailable options are:\n")
    assert message.endswith("trace\ndebug\ninfo\nwarn\nerr\ncritical\noff")


def test_names_are_case_sensitive():
    root = logging.getLogger()
    before = root.level
    with pytest.raises(Error):
        try_setting_log_level("DEBUG")
    assert root.level == before