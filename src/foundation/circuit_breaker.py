"""Circuit breaker utilities for the database client.

This module wraps `aiobreaker` (native asyncio circuit breakers) so that client
coroutine methods fail fast once the database has failed repeatedly, instead of
piling requests onto a dead connection pool.

## Circuit Breaker States

- **CLOSED**: Normal operation, calls pass through
- **OPEN**: Dependency is failing, calls fail immediately without touching it
- **HALF_OPEN**: Recovery timeout elapsed, the next call is a trial

The breaker never retries a call. A failed call propagates its own exception;
only calls rejected by an open breaker are converted into an `UpstreamError`
(or the subclass given to the decorator).

## Usage

```python
@attrs.define(frozen=False, slots=True)
class MyClient:
    _async_breaker: aiobreaker.CircuitBreaker = attrs.field(init=False)

    def __attrs_post_init__(self) -> None:
        self._async_breaker = create_async_circuit_breaker("mongo", 5, 30)

    @with_circuit_breaker_async("mongo")
    async def fetch(self, key: str) -> dict:
        return await self._collection.find_one({"key": key})
```
"""

import functools
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import NoReturn

import aiobreaker

from foundation.exceptions import UpstreamError

logger = logging.getLogger("foundation.circuit_breaker")


class CircuitBreakerListener(aiobreaker.CircuitBreakerListener):
    """Logging listener for circuit breaker events."""

    def state_change(
        self,
        breaker: aiobreaker.CircuitBreaker,
        old: aiobreaker.CircuitBreakerState | None,
        new: aiobreaker.CircuitBreakerState,
    ) -> None:
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "circuit_breaker": breaker.name,
                "old_state": str(old),
                "new_state": str(new),
                "failure_count": breaker.fail_counter,
            },
        )

    def failure(self, breaker: aiobreaker.CircuitBreaker, exception: Exception) -> None:
        logger.error(
            "Circuit breaker failure",
            extra={
                "circuit_breaker": breaker.name,
                "failure_count": breaker.fail_counter,
                "exception_type": type(exception).__name__,
                "exception_message": str(exception),
            },
        )


def create_async_circuit_breaker(
    name: str,
    failure_threshold: int = 5,
    recovery_timeout: int = 30,
    counted_errors: tuple[type[BaseException], ...] | None = None,
) -> aiobreaker.CircuitBreaker:
    """Create an async circuit breaker with a logging listener.

    Args:
        name: Unique name for the circuit breaker (e.g., "mongo").
        failure_threshold: Number of consecutive failures before opening
            circuit. Default: 5.
        recovery_timeout: Seconds to wait before attempting recovery.
            Default: 30.
        counted_errors: Exception types that count as failures. Any other
            exception propagates unchanged and counts as a success.
            Default: every exception counts.

    Returns:
        Configured aiobreaker.CircuitBreaker instance.

    Note:
        State transitions:
        - CLOSED → OPEN: After `failure_threshold` consecutive failures
        - OPEN → HALF_OPEN: After `recovery_timeout` seconds
        - HALF_OPEN → CLOSED: After first successful call
        - HALF_OPEN → OPEN: If call fails during recovery
    """
    exclude = []
    if counted_errors is not None:
        exclude.append(lambda exception: not isinstance(exception, counted_errors))

    return aiobreaker.CircuitBreaker(
        fail_max=failure_threshold,
        timeout_duration=timedelta(seconds=recovery_timeout),
        exclude=exclude,
        listeners=[CircuitBreakerListener()],
        name=name,
    )


def handle_circuit_breaker_error(
    service_name: str,
    error_type: type[UpstreamError] = UpstreamError,
) -> NoReturn:
    """Raise the error used when a circuit breaker rejects a call.

    Args:
        service_name: Name of the service (for error message).
        error_type: `UpstreamError` subclass to raise.

    Raises:
        UpstreamError: Always (or the given subclass).
    """
    msg = (
        f"{service_name} service is currently unavailable. "
        "The circuit breaker is open due to repeated failures."
    )
    raise error_type(msg)


def with_circuit_breaker_async(
    service_name: str,
    error_type: type[UpstreamError] = UpstreamError,
) -> Callable:
    """Decorator to wrap async method calls with circuit breaker protection.

    The decorated method's instance must carry an `_async_breaker` attribute
    holding an `aiobreaker.CircuitBreaker`.

    Args:
        service_name: Service name for error messages.
        error_type: `UpstreamError` subclass raised when the breaker rejects
            the call.

    Returns:
        Decorator function that wraps async methods with circuit breaker logic.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            breaker = getattr(self, "_async_breaker", None)
            if breaker is None:
                msg = (
                    f"{self.__class__.__name__} has no _async_breaker. "
                    "Use create_async_circuit_breaker() to create one."
                )
                raise RuntimeError(msg)

            # An open breaker rejects inside call_async; checking current_state
            # up front would also block the half-open trial call.
            async def _impl():
                return await func(self, *args, **kwargs)

            try:
                return await breaker.call_async(_impl)
            except aiobreaker.CircuitBreakerError:
                handle_circuit_breaker_error(service_name, error_type)

        return wrapper

    return decorator
