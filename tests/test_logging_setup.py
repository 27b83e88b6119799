import io
import logging

from ach_entry.logging_setup import configure_logging, get_logger


def test_get_logger_is_silent_before_configuration():
    logger = get_logger("ach_entry.test")
    root = logging.getLogger("ach_entry")
    assert [type(h) for h in root.handlers] == [logging.NullHandler]
    assert logger.name == "ach_entry.test"


def test_configure_logging_replaces_null_handler_once():
    get_logger("ach_entry.test")
    configure_logging(logging.DEBUG)
    configure_logging(logging.ERROR)  # already configured

    root = logging.getLogger("ach_entry")
    assert [type(h) for h in root.handlers] == [logging.StreamHandler]
    assert root.level == logging.DEBUG
    assert root.propagate is False

    stream = io.StringIO()
    root.handlers[0].setStream(stream)
    get_logger("ach_entry.test").debug("hello %s", "world")
    assert stream.getvalue().endswith("ach_entry.test DEBUG hello world\n")


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("ACH_ENTRY_LOG_LEVEL", "warning")
    configure_logging()
    assert logging.getLogger("ach_entry").level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("ACH_ENTRY_LOG_LEVEL", "chatty")
    configure_logging()
    assert logging.getLogger("ach_entry").level == logging.INFO
