"""Tests for structlog rendering of the fuzzydate logger."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from fuzzydate.config.logging import HANDLER_NAME, LOGGER_NAME, configure_logging
from fuzzydate.domain.parsing import parse_fuzzy_date
from fuzzydate.errors import InvalidFormatError


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and fuzzydate logger state after each test."""
    root = logging.getLogger()
    root_handlers = root.handlers[:]
    root_level = root.level
    fz = logging.getLogger(LOGGER_NAME)
    fz_handlers = fz.handlers[:]
    fz_level = fz.level
    fz_propagate = fz.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    fz.handlers = fz_handlers
    fz.setLevel(fz_level)
    fz.propagate = fz_propagate


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("fuzzydate.test").warning("hello world")
        assert "hello world" in capfd.readouterr().err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("fuzzydate.test").warning("json test", extra={"answer": 42})
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "fuzzydate.test"
        assert "timestamp" in parsed

    def test_rejected_parse_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        with pytest.raises(InvalidFormatError):
            parse_fuzzy_date("199A")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"].startswith("Rejected date '199A'")
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "fuzzydate.domain.parsing"

    def test_rejections_silent_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        with pytest.raises(InvalidFormatError):
            parse_fuzzy_date("199A")

        assert capfd.readouterr().err == ""

    def test_other_loggers_are_not_routed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("urllib3").debug("connection noise")

        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Repeated calls replace the fuzzydate handler instead of stacking."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert [h.get_name() for h in handlers] == [HANDLER_NAME]


class TestHostLogging:
    def test_root_handlers_survive(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        before = root.handlers[:]
        root_level = root.level

        configure_logging(verbose=True, log_json=True)

        assert root.handlers == before
        assert host_handler in root.handlers
        assert root.level == root_level

    def test_host_handlers_on_fuzzydate_logger_survive(self) -> None:
        fz = logging.getLogger(LOGGER_NAME)
        host_handler = logging.NullHandler()
        fz.addHandler(host_handler)

        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=False, log_json=True)

        assert host_handler in fz.handlers
        assert sum(h.get_name() == HANDLER_NAME for h in fz.handlers) == 1

    def test_records_do_not_reach_root(self) -> None:
        records: list[logging.LogRecord] = []

        class Collect(logging.Handler):
            def emit(self, record: logging.LogRecord) -> None:
                records.append(record)

        root = logging.getLogger()
        root.addHandler(Collect())
        root.setLevel(logging.DEBUG)

        configure_logging(verbose=True, log_json=True)
        logging.getLogger("fuzzydate.test").warning("kept local")

        assert records == []
