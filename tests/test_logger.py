import logging

import pytest

from configlayers.logger import TRACE, StdLogger, format_log_message


def test_format_without_pairs_returns_message():
    assert format_log_message("hello") == "hello"


def test_format_with_pair():
    assert format_log_message("trying to resolve absolute path", "path", "/tmp") == (
        "trying to resolve absolute path path=/tmp"
    )


def test_format_odd_pairs_padded_with_none():
    assert format_log_message("msg", "key") == f"msg key={None}"


def test_format_multiple_pairs_keep_order():
    out = format_log_message("m", "a", 1, "b", 2)
    assert out.startswith("m ")
    assert out.index("a=1") < out.index("b=2")


@pytest.mark.parametrize(
    "method,level",
    [
        ("trace", TRACE),
        ("debug", logging.DEBUG),
        ("info", logging.INFO),
        ("warn", logging.WARNING),
        ("error", logging.ERROR),
    ],
)
def test_std_logger_levels(caplog, method, level):
    caplog.set_level(1, logger="configlayers")
    logger = StdLogger()
    getattr(logger, method)("event", "key", "value")
    records = [r for r in caplog.records if r.name == "configlayers"]
    assert len(records) == 1
    assert records[0].levelno == level
    assert records[0].getMessage() == format_log_message("event", "key", "value")


def test_std_logger_custom_backend(caplog):
    backend = logging.getLogger("custom.backend")
    caplog.set_level(logging.INFO, logger="custom.backend")
    StdLogger(backend).info("hi")
    assert [r.getMessage() for r in caplog.records if r.name == "custom.backend"] == ["hi"]


def test_std_logger_pads_odd_pairs(caplog):
    caplog.set_level(logging.WARNING, logger="configlayers")
    StdLogger().warn("careful", "path")
    messages = [r.getMessage() for r in caplog.records if r.name == "configlayers"]
    assert messages == [f"careful path={None}"]