"""Custom exceptions for site_cache.

Every expected failure derives from ``SiteCacheError`` so callers can
tell request and mutation failures apart from programming errors.
"""

from typing import Any


class SiteCacheError(Exception):
    """Base exception class for site_cache."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# Request Exceptions
class NetworkError(SiteCacheError):
    """Raised when the site API cannot be reached."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        super().__init__(
            message=f"{method} {url} failed: {reason}",
            error_code="NETWORK_ERROR",
            status_code=503,
            details={"method": method, "url": url, "reason": reason},
        )


class ApiRequestError(SiteCacheError):
    """Raised when the site API answers with a non-2xx status."""

    def __init__(self, method: str, url: str, status_code: int, body: str = ""):
        self.method = method
        self.url = url
        self.body = body
        super().__init__(
            message=f"HTTP {status_code}: {method} {url}" + (f" - {body}" if body else ""),
            error_code="API_REQUEST_ERROR",
            status_code=status_code,
            details={"method": method, "url": url, "body": body},
        )


# Mutation Exceptions
class MutationError(SiteCacheError):
    """Raised when a mutation fails. The caller may retry it."""

    def __init__(
        self,
        entity_label: str,
        operation: str,
        cause: SiteCacheError,
        rolled_back: bool = False,
    ):
        self.entity_label = entity_label
        self.operation = operation
        self.cause = cause
        self.rolled_back = rolled_back
        super().__init__(
            message=f"Failed to {operation} {entity_label}: {cause.message}",
            error_code="MUTATION_FAILED",
            status_code=cause.status_code,
            details={
                "entity": entity_label,
                "operation": operation,
                "rolled_back": rolled_back,
                "cause": cause.error_code,
            },
        )


# Config Exceptions
class InvalidConfigError(SiteCacheError):
    """Raised when a config value does not match the shape of its key."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(
            message=f"Invalid value for config '{key}': {reason}",
            error_code="INVALID_CONFIG",
            status_code=422,
            details={"key": key, "reason": reason},
        )


# Storage Exceptions
class NotFoundError(SiteCacheError):
    """Raised when a config key or entity does not exist."""

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(
            message=f"{resource} '{identifier}' not found",
            error_code="NOT_FOUND",
            status_code=404,
            details={"resource": resource, "id": identifier},
        )
