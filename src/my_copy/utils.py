"""Utilities."""
import functools
import inspect
import logging
import os

L = logging.getLogger(__name__)


def log(function, logger=L):
    """Log the arguments a function is called with, defaults included."""
    signature = inspect.signature(function)

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(logging.DEBUG):
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            str_args = ", ".join(f"{k}={v!r}" for k, v in bound.arguments.items())
            logger.debug("Calling %s(%s)", function.__name__, str_args)

        return function(*args, **kwargs)

    return wrapper


def close_quietly(fd: int) -> None:
    """Close a file descriptor on a failure path, logging instead of raising.

    Used only after a primary error has already been raised, so that the original
    diagnostic is the one reported.
    """
    try:
        os.close(fd)
    except OSError as e:
        L.debug("Ignoring error while closing fd %d: %s", fd, e)
