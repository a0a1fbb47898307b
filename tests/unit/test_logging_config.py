import io
import json
import logging

from logregistry.logging.config import (
    DIAGNOSTIC_FORMAT,
    DIAGNOSTIC_HANDLER_NAME,
    JsonFormatter,
    configure_logging,
)
from logregistry.services import log_registry
from logregistry.services.entry_factory import EntryFactory
from logregistry.services.vocabulary import POLISH


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def _diagnostic_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h.get_name() == DIAGNOSTIC_HANDLER_NAME]


def test_json_formatter_payload_without_context():
    record = logging.LogRecord("logregistry.test", logging.WARNING, __file__, 10, "Low memory", (), None)
    payload = json.loads(JsonFormatter(DIAGNOSTIC_FORMAT).format(record))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "logregistry.test"
    assert payload["message"] == "Low memory"
    assert "context" not in payload


def test_registry_lifecycle_records_carry_context():
    stream = io.StringIO()
    configure_logging(level=logging.INFO, stream=stream)

    registry = log_registry.instance(POLISH)
    registry.append("info", "x")
    registry.append("blad", "y")
    log_registry.destroy()

    created, destroyed = [
        line for line in _lines(stream) if line["logger"] == "logregistry.services.log_registry"
    ]
    assert created["message"] == "Log registry created (vocabulary=polish)"
    assert created["context"] == {"vocabulary": "polish", "entries": 0}
    assert destroyed["context"] == {"vocabulary": "polish", "entries": 2}


def test_rejected_category_record_names_tag():
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    EntryFactory().build("bogus", "x")

    (rejected,) = [
        line for line in _lines(stream) if line["logger"] == "logregistry.services.entry_factory"
    ]
    assert rejected["level"] == "DEBUG"
    assert rejected["context"] == {"category": "bogus", "vocabulary": "abbreviated"}


def test_configure_logging_replaces_its_own_handler():
    first = io.StringIO()
    second = io.StringIO()
    configure_logging(level=logging.INFO, stream=first)
    root = configure_logging(level=logging.WARNING, stream=second)

    assert root.level == logging.WARNING
    assert len(_diagnostic_handlers()) == 1

    logging.getLogger("logregistry.test").warning("only once")
    assert first.getvalue() == ""
    assert _lines(second)[0]["message"] == "only once"
