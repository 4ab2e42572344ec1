"""Notifications for config forms."""

from site_cache.dto import ConfigUpsertRequest
from site_cache.exceptions import MutationError
from site_cache.protocols import Notifier
from site_cache.services import ConfigService


class ConfigHandler:
    """Binds a ConfigService to a Notifier.

    Messages name the config key that was saved or deleted.
    """

    def __init__(self, service: ConfigService, notifier: Notifier) -> None:
        self._service = service
        self._notifier = notifier

        service.upsert_mutation.add_success_callback(self._saved)
        service.upsert_mutation.add_error_callback(self._save_failed)
        service.delete_mutation.add_success_callback(self._deleted)
        service.delete_mutation.add_error_callback(self._delete_failed)

    @property
    def upsert_mutation(self):
        return self._service.upsert_mutation

    @property
    def delete_mutation(self):
        return self._service.delete_mutation

    def _saved(self, entry: dict, request: ConfigUpsertRequest) -> None:
        self._notifier.notify("Settings saved!", f"'{request.key}' was updated successfully.")

    def _save_failed(self, error: MutationError, request: ConfigUpsertRequest) -> None:
        self._notifier.notify(
            f"Could not save '{request.key}'",
            f"{error.cause.message}. Please try again.",
            variant="destructive",
        )

    def _deleted(self, result: None, key: str) -> None:
        self._notifier.notify("Settings removed!", f"'{key}' was deleted.")

    def _delete_failed(self, error: MutationError, key: str) -> None:
        self._notifier.notify(
            f"Could not delete '{key}'",
            f"{error.cause.message}. Please try again.",
            variant="destructive",
        )
