import logging

from text_processor.logger import ContextFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.makeLogRecord({"msg": "Response sent", "levelname": "INFO"})
    record.__dict__.update(extra)
    return record


def test_formatter_appends_context_fields() -> None:
    formatter = ContextFormatter("[%(levelname)s] %(message)s")
    line = formatter.format(_record(request_id="r-1", status_code=200))
    assert line == "[INFO] Response sent request_id='r-1' status_code=200"


def test_formatter_without_context() -> None:
    formatter = ContextFormatter("[%(levelname)s] %(message)s")
    assert formatter.format(_record()) == "[INFO] Response sent"
