import io
import logging

import pytest

from bid_sort.logging_setup import configure_logging, get_logger


def test_library_logger_is_silent_before_configuration():
    get_logger("bid_sort.sorting")
    handlers = logging.getLogger("bid_sort").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_configure_once_with_env_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("BID_SORT_LOG_LEVEL", "info")
    stream = io.StringIO()

    configure_logging(stream=stream, fmt="%(name)s:%(levelname)s:%(message)s")
    configure_logging(level="DEBUG", stream=io.StringIO())  # ignored: already configured
    get_logger("bid_sort.ingest").info("hello")
    get_logger("bid_sort.ingest").debug("hidden")

    pkg = logging.getLogger("bid_sort")
    assert pkg.level == logging.INFO
    assert len(pkg.handlers) == 1
    assert not pkg.propagate
    assert stream.getvalue() == "bid_sort.ingest:INFO:hello\n"


@pytest.mark.parametrize(
    ("level", "expected"),
    [(logging.ERROR, logging.ERROR), ("10", 10), ("warning", logging.WARNING), ("bogus", logging.WARNING)],
)
def test_explicit_levels(level, expected):
    configure_logging(level=level, stream=io.StringIO())
    assert logging.getLogger("bid_sort").level == expected


def test_default_level_is_warning():
    configure_logging(stream=io.StringIO())
    assert logging.getLogger("bid_sort").level == logging.WARNING
