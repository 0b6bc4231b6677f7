# ABOUTME: Error types for the books query layer and the log-and-rethrow boundary.
# ABOUTME: Store failures pass through unchanged; bad arguments raise ValidationError.

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pymongo.errors import PyMongoError

F = TypeVar("F", bound=Callable[..., Any])

StoreError = PyMongoError


class ValidationError(ValueError):
    """Raised when a caller passes an argument outside the operation's domain.

    Always raised before the store is contacted.
    """


def log_failures(func: F) -> F:
    """Log any exception raised by a query operation, then re-raise it unchanged.

    The exception object is not wrapped or translated, so callers can still
    catch pymongo errors (or ValidationError) directly.
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            logger.exception("Error in %s: %s", func.__name__, exc)
            raise
        logger.debug("%s completed", func.__name__)
        return result

    return wrapper  # type: ignore[return-value]
