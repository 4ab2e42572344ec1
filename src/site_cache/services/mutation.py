"""Three-phase mutation runner.

A mutation runs:
1. ``on_mutate`` - optional optimistic cache write, returns a rollback context
2. ``mutation_fn`` - the network call
3. ``on_success`` (cache reconciliation) or ``on_error`` (rollback)

Expected failures (``SiteCacheError``) reach the caller as a
``MutationError``; other exceptions propagate unchanged. A cancelled
mutation is rolled back before the cancellation propagates. Nothing is
retried.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from site_cache.exceptions import MutationError, SiteCacheError
from site_cache.logging import get_logger

logger = get_logger(__name__)

TVariables = TypeVar("TVariables")
TResult = TypeVar("TResult")

SuccessCallback = Callable[[Any, Any], None]
ErrorCallback = Callable[[MutationError, Any], None]


class Mutation(Generic[TVariables, TResult]):
    """One mutation operation with a pending flag and outcome callbacks.

    Mutations that share a lock run one at a time, in the order they
    were issued. The list services hand the same lock to all mutations
    of one collection.

    Example:
        ```python
        mutation = Mutation(
            send_update,
            entity_label="Testimonial",
            operation="update",
            on_success=write_to_cache,
        )
        mutation.add_success_callback(lambda result, variables: print("Saved"))

        updated = await mutation.mutate(EntityUpdate(id=3, data={"name": "Ana"}))
        ```
    """

    def __init__(
        self,
        mutation_fn: Callable[[TVariables], Awaitable[Any]],
        *,
        entity_label: str,
        operation: str,
        on_mutate: Callable[[TVariables], Any] | None = None,
        on_success: Callable[[Any, TVariables, Any], TResult] | None = None,
        on_error: Callable[[BaseException, TVariables, Any], bool] | None = None,
        lock: asyncio.Lock | None = None,
    ) -> None:
        """Initialize the mutation.

        Args:
            mutation_fn: Performs the network call.
            entity_label: Human-readable entity name used in errors.
            operation: Verb used in errors ("create", "reorder", ...).
            on_mutate: Optimistic phase; its return value is the context.
            on_success: Reconciles the cache; its return value is the result.
            on_error: Rolls back; returns True if anything was restored.
            lock: Serializes this mutation with others sharing the lock.
        """
        self._mutation_fn = mutation_fn
        self._entity_label = entity_label
        self._operation = operation
        self._on_mutate = on_mutate
        self._on_success = on_success
        self._on_error = on_error
        self._lock = lock or asyncio.Lock()
        self._pending = 0
        self._success_callbacks: list[SuccessCallback] = []
        self._error_callbacks: list[ErrorCallback] = []

    @property
    def is_pending(self) -> bool:
        """True while a call is queued or running."""
        return self._pending > 0

    @property
    def operation(self) -> str:
        """The operation verb."""
        return self._operation

    @property
    def entity_label(self) -> str:
        """The entity name."""
        return self._entity_label

    def add_success_callback(self, callback: SuccessCallback) -> None:
        """Call ``callback(result, variables)`` after every success."""
        self._success_callbacks.append(callback)

    def add_error_callback(self, callback: ErrorCallback) -> None:
        """Call ``callback(error, variables)`` after every failure."""
        self._error_callbacks.append(callback)

    async def mutate(
        self,
        variables: TVariables,
        *,
        on_success: SuccessCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> TResult:
        """Run the mutation.

        Args:
            variables: Mutation input
            on_success: Extra callback for this call only
            on_error: Extra callback for this call only

        Returns:
            The reconciled result

        Raises:
            MutationError: If the network call failed (cache already rolled back)
        """
        self._pending += 1
        try:
            async with self._lock:
                return await self._run(variables, on_success, on_error)
        finally:
            self._pending -= 1

    async def _run(
        self,
        variables: TVariables,
        on_success: SuccessCallback | None,
        on_error: ErrorCallback | None,
    ) -> TResult:
        context = self._on_mutate(variables) if self._on_mutate else None

        try:
            response = await self._mutation_fn(variables)
        except asyncio.CancelledError as e:
            logger.warning("%s %s cancelled", self._operation, self._entity_label)
            if self._on_error:
                self._on_error(e, variables, context)
            raise
        except Exception as e:
            rolled_back = bool(self._on_error(e, variables, context)) if self._on_error else False
            if not isinstance(e, SiteCacheError):
                raise

            error = MutationError(self._entity_label, self._operation, e, rolled_back=rolled_back)
            logger.warning("%s", error.message)
            for callback in [*self._error_callbacks, *([on_error] if on_error else [])]:
                callback(error, variables)
            raise error from e

        result = self._on_success(response, variables, context) if self._on_success else response
        for callback in [*self._success_callbacks, *([on_success] if on_success else [])]:
            callback(result, variables)
        return result
