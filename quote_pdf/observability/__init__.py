"""
Observability module.

Provides structured logging, correlation ID tracking and request logging
middleware.
"""

from quote_pdf.observability.correlation import (
    get_correlation_id,
    set_correlation_id,
)
from quote_pdf.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)
from quote_pdf.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "log_exception_with_context",
    "log_with_context",
    "set_correlation_id",
]
