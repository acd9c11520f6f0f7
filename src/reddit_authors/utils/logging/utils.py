# ABOUTME: structlog helpers for the harvest: module loggers, timed request logging and run-scoped context
# ABOUTME: The request decorator reads the target URL from a named argument of the wrapped coroutine

import functools
import inspect
import time
import uuid
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

import structlog

R = TypeVar("R")

ROOT_LOGGER_NAME = "reddit_authors"


def get_logger(name: str = ROOT_LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_run_id() -> str:
    """Short random id that ties together the log lines of one run."""
    return uuid.uuid4().hex[:8]


def log_api_call(
    api_name: str, url_param: str = "target_url"
) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Time an HTTP coroutine and log the URL it requested.

    The URL is taken from the wrapped coroutine's *url_param* argument. Only the
    outcome of a completed request is logged here; callers that turn an exception
    into a failed result are expected to log that failure themselves.

    Args:
        api_name: Label for the endpoint being called
        url_param: Name of the parameter holding the requested URL
    """

    def decorator(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        signature = inspect.signature(func)
        if url_param not in signature.parameters:
            raise TypeError(f"{func.__qualname__} has no parameter named {url_param!r}")
        logger = get_logger(func.__module__)

        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            url = signature.bind(*args, **kwargs).arguments[url_param]
            bound_logger = logger.bind(api_name=api_name, url=url)
            bound_logger.debug("Sending request")

            start_time = time.perf_counter()
            result = await func(*args, **kwargs)
            bound_logger.info(
                "Request completed",
                duration_seconds=round(time.perf_counter() - start_time, 3),
                status_code=getattr(result, "status_code", None),
            )
            return result

        return wrapper

    return decorator


@contextmanager
def with_batch_context(batch_name: str, **context: Any) -> Iterator[structlog.stdlib.BoundLogger]:
    """Yield a logger bound to a fresh run id; an escaping exception is logged before it propagates."""
    bound_logger = get_logger().bind(batch=batch_name, run_id=new_run_id(), **context)
    try:
        yield bound_logger
    except Exception as e:
        bound_logger.error("Batch run aborted", error=str(e), error_type=type(e).__name__)
        raise
