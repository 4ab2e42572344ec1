"""Notifications for collection managers.

Every mutation outcome becomes a dismissable notification: a short
confirmation on success, and on failure a destructive message naming
the entity and asking the user to retry.
"""

from typing import Any

from site_cache.exceptions import MutationError
from site_cache.protocols import Notifier
from site_cache.services import ListMutationService, Mutation


class ManagerHandler:
    """Binds a ListMutationService to a Notifier.

    Example:
        ```python
        manager = ManagerHandler(service=testimonials, notifier=notifier)

        # The hook-style contract the UI consumes
        await manager.update_mutation.mutate(EntityUpdate(id=3, data={...}))
        manager.reorder_mutation.is_pending
        ```
    """

    SUCCESS_TITLES = {
        "create": "{label} created!",
        "update": "{label} updated!",
        "delete": "{label} removed!",
    }

    def __init__(self, service: ListMutationService, notifier: Notifier) -> None:
        """Initialize the manager handler.

        Args:
            service: The collection's mutation service (required).
            notifier: Where notifications are shown (required).
        """
        self._service = service
        self._notifier = notifier

        for mutation in self.mutations:
            mutation.add_success_callback(self._success_callback(mutation))
            mutation.add_error_callback(self._error_callback(mutation))

    @property
    def create_mutation(self) -> Mutation:
        return self._service.create_mutation

    @property
    def update_mutation(self) -> Mutation:
        return self._service.update_mutation

    @property
    def delete_mutation(self) -> Mutation:
        return self._service.delete_mutation

    @property
    def reorder_mutation(self) -> Mutation:
        return self._service.reorder_mutation

    @property
    def mutations(self) -> tuple[Mutation, ...]:
        """The four mutations, in create/update/delete/reorder order."""
        return (self.create_mutation, self.update_mutation, self.delete_mutation, self.reorder_mutation)

    @property
    def is_pending(self) -> bool:
        """True while any mutation of the collection is queued or running."""
        return any(mutation.is_pending for mutation in self.mutations)

    def _success_callback(self, mutation: Mutation):
        label = self._service.entity_label

        def notify_success(result: Any, variables: Any) -> None:
            if mutation.operation == "reorder":
                self._notifier.notify("Order updated!", f"{label} reordered successfully.")
            else:
                self._notifier.notify(self.SUCCESS_TITLES[mutation.operation].format(label=label))

        return notify_success

    def _error_callback(self, mutation: Mutation):
        label = self._service.entity_label

        def notify_error(error: MutationError, variables: Any) -> None:
            if error.rolled_back:
                description = f"{error.cause.message}. The order was reverted. Please try again."
            else:
                description = f"{error.cause.message}. Please try again."
            self._notifier.notify(f"Could not {mutation.operation} {label}", description, variant="destructive")

        return notify_error
