"""
Centralized error handling utilities.

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Malformed HEX string | `InvalidFormatError` | `raise InvalidFormatError("#12")` |
| Incomplete RGB/HSL/HSV value | `InvalidArgumentError` | `raise InvalidArgumentError("RGB", "missing channel", field="b")` |
| Pydantic error on a colour value | `wrap_validation_error` | `raise wrap_validation_error(e, "HSL", value) from e` |
| Config file syntax/value error | `wrap_pydantic_error` | `raise wrap_pydantic_error(e, str(path)) from e` |

### Handling Patterns

| Pattern | Code |
|---------|------|
| Log and re-raise | `@handle_errors(operation_name="mix colours")` |
| Try multiple ops, collect errors | `collector = collect_errors("inspect colours"); with collector.try_operation(...): ...` |
| Critical section with auto-logging | `with ErrorContext("load config"): ...` |

## The Layers

```
┌─────────────────────────────────────┐
│  CLI                                │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑ ColourModelError
┌─────────────────────────────────────┐
│  ColourModel / conversions          │
│  - Converts pydantic errors         │
└─────────────────────────────────────┘
                  ↑ ValidationError, ValueError
┌─────────────────────────────────────┐
│  pydantic models, int(x, 16)        │
└─────────────────────────────────────┘
```
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .base import ColourModelError
from .colour import InvalidArgumentError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(*, operation_name: str, log_level: int = logging.ERROR) -> Callable:
    """
    Decorator that logs errors raised by the wrapped function and re-raises them.

    Library errors are logged with their technical message; anything else
    is logged with a traceback.

    Args:
        operation_name: Name of the operation for logging (e.g., "mix colours")
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except ColourModelError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")
                raise

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )
                raise

        return wrapper
    return decorator


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("load config", re_raise=False) as ctx:
            config = ColourConfig.load_or_default(path)

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        # KeyboardInterrupt and SystemExit always propagate
        if not isinstance(exc_val, Exception):
            return False

        self.error = exc_val

        if isinstance(exc_val, ColourModelError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        # True suppresses the exception
        return not self.re_raise


def wrap_validation_error(error: Exception, kind: str, value: Any = None) -> InvalidArgumentError:
    """
    Convert a Pydantic validation error on a colour value to InvalidArgumentError.

    Args:
        error: The Pydantic ValidationError
        kind: Which representation was being validated ("RGB", "HSL", "HSV")
        value: The rejected input

    Returns:
        An InvalidArgumentError naming the first offending field
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ())) or None
            if first_error.get('type') == 'missing':
                reason = "is missing"
            else:
                reason = first_error.get('msg', 'validation failed')
            if len(errors) > 1:
                reason += f" (and {len(errors) - 1} more)"
            return InvalidArgumentError(kind, reason, value=value, field=field)

    return InvalidArgumentError(kind, str(error), value=value)


def wrap_pydantic_error(error: Exception, file_path: str) -> ColourModelError:
    """
    Convert Pydantic validation errors to configuration exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            if len(errors) == 1:
                first_error = errors[0]
                field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
                reason = first_error.get('msg', 'validation failed')
                value = first_error.get('input', None)

                return ConfigValidationError(
                    field=field,
                    value=value,
                    error_msg=reason,
                    file_path=file_path
                )
            else:
                error_lines = []
                for err in errors:
                    field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                    msg = err.get('msg', 'validation failed')
                    error_lines.append(f"  - {field}: {msg}")

                combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

                return ConfigValidationError(
                    field="multiple fields",
                    value=None,
                    error_msg=combined_msg,
                    file_path=file_path
                )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ColourModelError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("inspect colours")

        for value in values:
            with collector.try_operation(f"inspect {value}"):
                ColourModel(value)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, ColourModelError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
