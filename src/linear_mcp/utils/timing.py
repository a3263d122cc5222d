"""Performance timing decorator."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger("linear_mcp")


def timed(capability: str) -> Callable:
    """Decorator that logs execution time of an async handler call.

    Args:
        capability: Protocol name of the handler (e.g. "tool:create-issue").
            Attached to the log record as ``capability`` and ``elapsed``.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            start = time.monotonic()
            try:
                return await fn(*args, **kwargs)
            finally:
                elapsed = time.monotonic() - start
                logger.debug(
                    "%s (%s) completed in %.3fs",
                    capability,
                    fn.__qualname__,
                    elapsed,
                    extra={"capability": capability, "elapsed": elapsed},
                )

        return wrapper

    return decorator
