"""Tests for helperkit.logging module."""

from collections.abc import Iterator
from io import StringIO
from unittest import mock

import pytest
from loguru import logger

from helperkit.arrays import make_comparator
from helperkit.exceptions import ConfigurationError, EncodingError
from helperkit.logging import configure_logging
from helperkit.text import slugify


@pytest.fixture
def handlers() -> Iterator[list[int]]:
    """Collect handler ids and remove them after the test."""
    ids: list[int] = []
    yield ids
    for handler_id in ids:
        logger.remove(handler_id)
    logger.disable("helperkit")


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_silent_until_configured(self, handlers: list[int]) -> None:
        sink = StringIO()
        handlers.append(logger.add(sink, level="DEBUG"))

        with pytest.raises(ConfigurationError):
            make_comparator("")

        assert sink.getvalue() == ""

    def test_records_include_extra_fields(self, handlers: list[int]) -> None:
        sink = StringIO()
        handlers.append(configure_logging("DEBUG", sink=sink))

        with pytest.raises(EncodingError):
            slugify("abc", "no-such-encoding")

        output = sink.getvalue()
        assert "Unknown input encoding" in output
        assert "helperkit.text:_decode" in output
        assert "'encoding': 'no-such-encoding'" in output

    def test_level_filters_records(self, handlers: list[int]) -> None:
        sink = StringIO()
        handlers.append(configure_logging("WARNING", sink=sink))

        with pytest.raises(ConfigurationError):
            make_comparator(None)

        assert sink.getvalue() == ""

    def test_only_helperkit_records(self, handlers: list[int]) -> None:
        sink = StringIO()
        handlers.append(configure_logging("DEBUG", sink=sink))

        logger.debug("from the application")

        assert sink.getvalue() == ""

    def test_level_defaults_to_settings(self, handlers: list[int]) -> None:
        sink = StringIO()
        with mock.patch.dict("os.environ", {"HELPERKIT_LOG_LEVEL": "DEBUG"}):
            handlers.append(configure_logging(sink=sink))

        with pytest.raises(ConfigurationError):
            make_comparator("")

        assert "Comparison key is empty" in sink.getvalue()

    def test_defaults_to_stderr(self, handlers: list[int]) -> None:
        with mock.patch("sys.stderr", new_callable=StringIO) as stderr:
            handlers.append(configure_logging("DEBUG"))
            with pytest.raises(ConfigurationError):
                make_comparator("")

        assert "Comparison key is empty" in stderr.getvalue()
