"""
Error handling utilities.
"""
import functools
from typing import Any, Callable, Tuple, Type
from .logging_config import get_logger
from .exceptions import ProptypesError


logger = get_logger(__name__)


def capture_errors(
    func: Callable,
    *args,
    passthrough: Tuple[Type[BaseException], ...] = (),
    **kwargs
) -> Any:
    """
    Call a function and hand back any exception it raises as its result.

    Args:
        func: Function to execute
        *args: Positional arguments for function
        passthrough: Exception types that are re-raised instead of captured
        **kwargs: Keyword arguments for function

    Returns:
        Function result, or the exception instance it raised
    """
    try:
        return func(*args, **kwargs)
    except passthrough:
        raise
    except Exception as e:
        logger.debug(f"Captured {type(e).__name__} from {getattr(func, '__name__', func)!r}: {e}")
        return e


def handle_errors(default_return: Any = None, log_level: str = "DEBUG"):
    """
    Decorator that turns proptypes errors into a default return value.

    Only ``ProptypesError`` is handled; anything else propagates.

    Args:
        default_return: Value to return on error
        log_level: Logging level for handled errors
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ProptypesError as e:
                log_method = getattr(logger, log_level.lower())
                log_method(
                    f"proptypes error in {func.__name__}: {e.message}",
                    extra={'extra_fields': e.to_dict()}
                )
                return default_return

        return wrapper
    return decorator
