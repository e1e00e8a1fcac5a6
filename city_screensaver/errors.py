"""
Error Handling - Exception taxonomy and reporting helpers.

USAGE:
    from city_screensaver.errors import handle_error, report_errors, ErrorCategory

    # Log and re-raise
    try:
        curses.cbreak()
    except curses.error as e:
        handle_error(e, "enable raw mode", ErrorCategory.TERMINAL, reraise=True)

    # Log and carry on (teardown paths only)
    with report_errors("restore terminal", ErrorCategory.TERMINAL):
        curses.endwin()
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for proper handling and reporting."""
    # Entering/leaving curses mode
    TERMINAL = "terminal"

    # Invalid run configuration
    CONFIG = "configuration"

    # Drawing a frame
    RENDER = "render"


class ScreensaverError(Exception):
    """Base class for screensaver errors"""
    pass


class ConfigError(ScreensaverError):
    """Raised when a configuration value is out of range"""
    pass


class TerminalSetupError(ScreensaverError):
    """Raised when the terminal cannot be put into screensaver mode"""

    def __init__(self, step: str, cause: Optional[BaseException] = None):
        self.step = step
        self.cause = cause
        message = f"Failed to {step}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class TerminalRestoreError(ScreensaverError):
    """Raised when the terminal cannot be returned to its normal state"""

    def __init__(self, step: str, cause: Optional[BaseException] = None):
        self.step = step
        self.cause = cause
        message = f"Failed to {step}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


def handle_error(
    error: BaseException,
    operation: str,
    category: ErrorCategory,
    additional_context: Optional[Dict[str, Any]] = None,
    reraise: bool = False,
) -> None:
    """
    Log an error with its operation and category.

    Args:
        error: The exception that occurred
        operation: Name of the operation that failed
        category: Category of the error
        additional_context: Extra key/value pairs for the log record
        reraise: Whether to re-raise the exception after logging
    """
    lines = [
        f"ERROR in {operation}",
        f"  Category: {category.value}",
        f"  Type: {type(error).__name__}",
        f"  Message: {error}",
    ]
    if additional_context:
        lines.append("  Context:")
        for key, value in additional_context.items():
            lines.append(f"    {key}: {value}")
    logger.error('\n'.join(lines))

    if reraise:
        raise error


@contextmanager
def report_errors(
    operation: str,
    category: ErrorCategory,
    additional_context: Optional[Dict[str, Any]] = None,
):
    """
    Context manager that logs and suppresses any Exception.

    Only meant for cleanup paths where a failure must not replace the
    result of the work that came before it.
    """
    try:
        yield
    except Exception as e:
        handle_error(e, operation, category, additional_context=additional_context)
