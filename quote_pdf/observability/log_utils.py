"""
Logging utilities for safe structured logging.

Converts pipeline values (bytes payloads, decimals, UUIDs, pydantic models,
collections) into short strings before they are attached to log records,
so rendered PDFs and quote rows never end up verbatim in the logs.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions
"""

import logging
import uuid
from decimal import Decimal
from typing import Any

from pydantic import BaseModel


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a bounded string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, (Decimal, uuid.UUID)):
        return str(value)
    if isinstance(value, BaseModel):
        val_str = f"{type(value).__name__}({', '.join(type(value).model_fields)})"
    elif isinstance(value, str):
        val_str = value
    elif isinstance(value, (list, tuple)):
        val_str = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        val_str = f"dict({', '.join(str(k) for k in value)})"
    else:
        try:
            val_str = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(val_str) > max_length:
        return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
    return val_str


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *args: Any,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: %-style log message
        *args: Message arguments
        **context: Key-value pairs attached to the record as extra
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, *args, extra=safe_context)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.error(message, exc_info=exc, extra=safe_context)
