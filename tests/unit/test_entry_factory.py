import logging

import pytest

from logregistry.core.errors import InvalidCategoryError, UserFacingError
from logregistry.services.entry_factory import EntryFactory
from logregistry.services.logging_model import Category, LogEntry
from logregistry.services.vocabulary import POLISH


@pytest.mark.parametrize(
    "tag, expected",
    [("info", "INFO: x"), ("warn", "WARNING: x"), ("err", "ERROR: x")],
)
def test_create_labels_message(tag, expected):
    assert EntryFactory().create(tag, "x").message == expected


def test_build_success_result():
    result = EntryFactory().build("warn", "Low memory")
    assert result.ok
    assert result.error is None
    assert result.unwrap() == LogEntry(Category.WARNING, "WARNING: Low memory")


def test_build_unknown_tag_returns_error_without_raising():
    result = EntryFactory().build("bogus", "x")
    assert not result.ok
    assert result.entry is None
    assert isinstance(result.error, InvalidCategoryError)
    assert result.error.category == "bogus"


def test_create_unknown_tag_raises():
    with pytest.raises(InvalidCategoryError) as excinfo:
        EntryFactory().create("bogus", "x")
    err = excinfo.value
    assert isinstance(err, ValueError)
    assert isinstance(err, UserFacingError)
    assert "'bogus'" in str(err)
    assert err.tags == ("info", "warn", "err")
    assert err.remediation == "Use one of: info, warn, err"


def test_polish_vocabulary():
    factory = EntryFactory(POLISH)
    assert factory.create("blad", "Nie znaleziono pliku.").message == "ERROR: Nie znaleziono pliku."
    with pytest.raises(InvalidCategoryError):
        factory.create("err", "x")


def test_rejection_is_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="logregistry.services.entry_factory")
    EntryFactory().build("bogus", "x")
    assert any("bogus" in record.getMessage() for record in caplog.records)
