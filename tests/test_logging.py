import json
import logging

from fars.utils.logging import JsonFormatter, configure_logging


def _record(**extra):
    record = logging.LogRecord(
        name="fars.data.reader", level=logging.WARNING, pathname=__file__,
        lineno=1, msg="invalid year: %s", args=(1999,), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_payload():
    payload = json.loads(JsonFormatter().format(_record(year="1999")))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "fars.data.reader"
    assert payload["msg"] == "invalid year: 1999"
    assert payload["year"] == "1999"
    assert "args" not in payload


def test_json_formatter_non_serializable_extra():
    payload = json.loads(JsonFormatter().format(_record(path=object())))
    assert payload["path"].startswith("<object")


def test_configure_logging_replaces_handler():
    logger = logging.getLogger("fars")
    try:
        first = configure_logging("DEBUG")
        second = configure_logging(logging.WARNING, json_format=True)
        assert first not in logger.handlers
        assert second in logger.handlers
        assert isinstance(second.formatter, JsonFormatter)
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
