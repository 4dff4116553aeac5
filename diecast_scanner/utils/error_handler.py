"""
Error types and handling helpers for the diecast scanner.

Text parsing itself never fails: undetected fields come back as sentinel
values. Errors only arise at the edges, when reading configuration or an
exported collection file.
"""

import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass


class DiecastScannerError(Exception):
    """Base exception class for all diecast scanner errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(DiecastScannerError):
    """Raised for invalid settings, paths or thresholds."""
    pass


class CollectionError(DiecastScannerError):
    """Raised when an exported collection cannot be read or is malformed."""
    pass


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    operation: str
    module: str
    function: str
    input_data: Optional[Dict[str, Any]] = None


def handle_error(
    error: Exception,
    context: ErrorContext,
    logger: Any,
    reraise: bool = True,
    default_return: Any = None
) -> Any:
    """
    Log an error with its context and optionally re-raise it.

    Args:
        error: The exception that occurred
        context: Where the error occurred
        logger: Logger (stdlib or structlog) used for reporting
        reraise: Whether to re-raise the exception after logging
        default_return: Value to return if not re-raising

    Returns:
        The default_return value if not re-raising
    """
    error_msg = f"Error in {context.module}.{context.function} during {context.operation}"

    if isinstance(error, DiecastScannerError):
        error_msg += f": {error.message}"
        if error.details:
            error_msg += f" | Details: {error.details}"
    else:
        error_msg += f": {str(error)}"

    extra = {
        "error_type": type(error).__name__,
        "operation": context.operation,
        "error_module": context.module,
        "error_function": context.function,
        "input_data": context.input_data,
    }
    if isinstance(logger, logging.Logger):
        logger.error(error_msg, extra=extra, exc_info=True)
    else:
        logger.error(error_msg, **extra)

    if reraise:
        raise error

    return default_return

