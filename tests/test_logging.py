import io
import logging
import sys

import pytest
from hyperclient.logging import LogfmtFormatter, log_event, setup_logging


def test_log_event_attaches_fields(caplog):
    caplog.set_level(logging.INFO, logger="hyperclient.events")
    log_event("navigate", rel="orders", status=200)

    record = next(r for r in caplog.records if r.getMessage() == "navigate")
    assert record.rel == "orders"
    assert record.status == 200


def test_log_event_drops_reserved_keys(caplog):
    caplog.set_level(logging.INFO, logger="hyperclient.events")
    log_event("navigate", name="clash", lineno="clash", message="clash", rel="orders")

    record = next(r for r in caplog.records if r.getMessage() == "navigate")
    assert record.name == "hyperclient.events"
    assert record.rel == "orders"


def test_log_event_honours_level_and_logger(caplog):
    logger = logging.getLogger("hyperclient.test")
    caplog.set_level(logging.DEBUG, logger="hyperclient.test")
    log_event("quiet", logger=logger, level=logging.DEBUG)

    record = next(r for r in caplog.records if r.getMessage() == "quiet")
    assert record.levelno == logging.DEBUG
    assert record.name == "hyperclient.test"


def _record(msg, **extra):
    record = logging.LogRecord(
        "hyperclient.connection", logging.DEBUG, __file__, 1, msg, None, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_formatter_renders_extras_in_order():
    line = LogfmtFormatter().format(
        _record(
            "http_call",
            method="GET",
            url="https://api.example.org/orders?a=1",
            status=200,
            duration_ms=12,
        )
    )
    assert line == (
        "level=debug logger=hyperclient.connection event=http_call method=GET "
        'url="https://api.example.org/orders?a=1" status=200 duration_ms=12'
    )


def test_logfmt_formatter_skips_none_extras():
    line = LogfmtFormatter().format(_record("hello world", rel=None))
    assert line == 'level=debug logger=hyperclient.connection event="hello world"'


def test_logfmt_formatter_reports_exception_type():
    try:
        raise KeyError("x")
    except KeyError:
        record = logging.LogRecord(
            "hyperclient", logging.ERROR, __file__, 1, "boom", None, sys.exc_info()
        )
    assert LogfmtFormatter().format(record).endswith("exc_type=KeyError")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_setup_logging_installs_single_logfmt_handler(restore_root_logger):
    setup_logging("debug")
    setup_logging("warning")

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, LogfmtFormatter)
    assert root.level == logging.WARNING


def test_setup_logging_writes_logfmt(restore_root_logger):
    stream = io.StringIO()
    setup_logging("info", stream=stream)

    log_event("navigate", rel="orders")

    assert stream.getvalue().strip() == (
        "level=info logger=hyperclient.events event=navigate rel=orders"
    )
