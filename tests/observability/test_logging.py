"""
Test suite for logging helpers and correlation ID propagation.

System role: Verification of observability utilities
"""

import logging
import uuid
from decimal import Decimal

import pytest

from quote_pdf.core.rendering.models import DegradedInput
from quote_pdf.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from quote_pdf.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


@pytest.fixture(autouse=True)
def reset_correlation_id():
    clear_correlation_id()
    yield
    clear_correlation_id()


class TestSafeLogValue:
    def test_bytes_are_summarised(self) -> None:
        assert safe_log_value(b"%PDF-1.7 ...") == "bytes(12)"

    def test_decimal_and_uuid_are_stringified(self) -> None:
        value = uuid.UUID("5f0c6c9e-0000-4000-8000-000000000001")

        assert safe_log_value(Decimal("37.50")) == "37.50"
        assert safe_log_value(value) == "5f0c6c9e-0000-4000-8000-000000000001"

    def test_models_and_collections_are_summarised(self) -> None:
        degraded = DegradedInput(resource="sections", reason="boom")

        assert safe_log_value(degraded) == "DegradedInput(resource, reason)"
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"quote_id": 1}) == "dict(quote_id)"

    def test_long_strings_are_truncated(self) -> None:
        result = safe_log_value("x" * 20, max_length=5)

        assert result == "xxxxx... (truncated, 20 total)"


class TestLogHelpers:
    def test_log_with_context_attaches_safe_extra(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.INFO, logger="tests.log_utils"):
            log_with_context(logger, logging.INFO, "Rendered %s", "Q-1", size=b"abc")

        record = caplog.records[-1]
        assert record.getMessage() == "Rendered Q-1"
        assert record.size == "bytes(3)"

    def test_log_exception_with_context_records_error_type(self, caplog) -> None:
        logger = logging.getLogger("tests.log_utils")

        with caplog.at_level(logging.ERROR, logger="tests.log_utils"):
            log_exception_with_context(logger, "Boom", RuntimeError("bad"), quote_id="q-1")

        record = caplog.records[-1]
        assert record.error_type == "RuntimeError"
        assert record.error_msg == "bad"
        assert record.exc_info is not None


class TestCorrelation:
    def test_set_generates_id_when_missing(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value

    def test_set_keeps_caller_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_filter_stamps_records(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-2")

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "req-2"

    def test_filter_uses_placeholder_outside_requests(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"
