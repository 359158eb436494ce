# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                     WANDERPOST ERROR HANDLING UTILITIES                    ║
# ║ Tagged generation outcomes and the async boundary that turns any failure   ║
# ║ into a logged fallback value.                                              ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ CONFIGURATION AND GLOBALS                                                  ║
# ╚════════════════════════════════════════════════════════════════════════════╝

logger = logging.getLogger("wanderpost")

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ OUTCOME TYPES                                                              ║
# ╚════════════════════════════════════════════════════════════════════════════╝

class FallbackReason(str, Enum):
    """Why a generator returned its fallback value instead of backend output."""
    MISSING_CREDENTIAL = "missing_credential"
    REQUEST_FAILED = "request_failed"
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a single generation call.

    `reason` is None when `value` came from the backend. Otherwise `value`
    is a fallback and `reason` says why; `error` keeps the exception that
    caused it, if any.
    """
    value: str
    reason: Optional[FallbackReason] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, value: str) -> "Outcome":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: str, reason: FallbackReason,
                 error: Optional[Exception] = None) -> "Outcome":
        return cls(value=value, reason=reason, error=error)

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ EXCEPTIONS                                                                 ║
# ╚════════════════════════════════════════════════════════════════════════════╝

class GenerationError(Exception):
    """Base error for generation failures detected on our side."""
    reason = FallbackReason.REQUEST_FAILED


class EmptyResultError(GenerationError):
    """The backend answered successfully but produced nothing usable."""
    reason = FallbackReason.EMPTY_RESULT

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ ASYNCHRONOUS ERROR HANDLING                                                ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- with_async_fallback ---
# Awaits an outcome-producing coroutine and converts any Exception into a
# fallback Outcome. Cancellation is not an Exception and still propagates.
# Args:
#     coro_func: The async function to execute; must return an Outcome.
#     *args: Positional arguments for the async function.
#     fallback_value: The value returned to the caller on failure.
#     error_message: A prefix for the log message when an error occurs.
#     **kwargs: Keyword arguments for the async function.
# Returns: The coroutine's Outcome, or a fallback Outcome on error.
async def with_async_fallback(
    coro_func: Callable[..., Awaitable[Outcome]],
    *args: Any,
    fallback_value: str,
    error_message: str = "An async error occurred",
    **kwargs: Any
) -> Outcome:
    try:
        return await coro_func(*args, **kwargs)
    except Exception as e:
        reason = getattr(e, "reason", FallbackReason.REQUEST_FAILED)
        if not isinstance(reason, FallbackReason):
            reason = FallbackReason.REQUEST_FAILED
        logger.exception(f"{error_message}: {e}")
        return Outcome.fallback(fallback_value, reason, error=e)
