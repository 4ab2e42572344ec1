"""Data Transfer Objects for API contracts.

These Pydantic models define the wire contract with the site API and
the typed shape of known config values.

Internal domain logic should use entities from the entities package.
"""

from .config_values import (
    KNOWN_CONFIG_KEYS,
    ConfigEntry,
    GeneralInfo,
    GenericConfigEntry,
    MaintenanceMode,
    SectionTexts,
    SectionVisibility,
    parse_config_entry,
    parse_config_list,
    validate_config_value,
)
from .requests import ConfigUpsertRequest, ReorderItem, normalize_reorder_items
from .responses import ConfigEntryResponse, OrderedEntityResponse, StatusResponse

__all__ = [
    "ConfigUpsertRequest",
    "ReorderItem",
    "normalize_reorder_items",
    "ConfigEntryResponse",
    "OrderedEntityResponse",
    "StatusResponse",
    "KNOWN_CONFIG_KEYS",
    "ConfigEntry",
    "GeneralInfo",
    "GenericConfigEntry",
    "MaintenanceMode",
    "SectionTexts",
    "SectionVisibility",
    "parse_config_entry",
    "parse_config_list",
    "validate_config_value",
]
