"""Typed config values.

Each config key names one editable section of the site, and each
section owns the shape of its value. Known keys are modelled as a
discriminated union on ``key`` so a mismatched payload is caught before
it is sent; unknown keys fall back to ``GenericConfigEntry``.

Missing subfields are filled with defaults, and a ``null`` value reads
as an empty section.
"""

from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from site_cache.exceptions import InvalidConfigError


class _ConfigValue(BaseModel):
    model_config = ConfigDict(extra="allow")


class SectionTexts(_ConfigValue):
    """Badge, title and description shown above a section."""

    badge: str = ""
    title: str = ""
    description: str = ""


class MaintenanceMode(_ConfigValue):
    """Maintenance page switch and its texts."""

    isEnabled: bool = False
    title: str = "Site under maintenance"
    message: str = "We are making some improvements to offer an even better experience. We will be back soon!"


class SectionVisibility(_ConfigValue):
    """Per-section visibility flags. Sections are visible unless switched off."""

    hero: bool = True
    about: bool = True
    specialties: bool = True
    articles: bool = True
    gallery: bool = True
    services: bool = True
    testimonials: bool = True
    faq: bool = True
    contact: bool = True
    inspirational: bool = True


class GeneralInfo(_ConfigValue):
    """Practitioner name, registration and site identity."""

    headerName: str = ""
    crp: str = ""
    siteName: str = ""
    description: str = ""


class _KnownConfigEntry(BaseModel):
    @field_validator("value", mode="before", check_fields=False)
    @classmethod
    def _empty_when_null(cls, value: Any) -> Any:
        return {} if value is None else value


class SectionTextsEntry(_KnownConfigEntry):
    key: Literal[
        "faq_section",
        "testimonials_section",
        "services_section",
        "specialties_section",
        "photo_carousel_section",
    ]
    value: SectionTexts = Field(default_factory=SectionTexts)


class MaintenanceModeEntry(_KnownConfigEntry):
    key: Literal["maintenance_mode"]
    value: MaintenanceMode = Field(default_factory=MaintenanceMode)


class SectionVisibilityEntry(_KnownConfigEntry):
    key: Literal["section_visibility"]
    value: SectionVisibility = Field(default_factory=SectionVisibility)


class SectionOrderEntry(_KnownConfigEntry):
    key: Literal["section_order"]
    value: dict[str, int] = Field(default_factory=dict)


class GeneralInfoEntry(_KnownConfigEntry):
    key: Literal["general_info"]
    value: GeneralInfo = Field(default_factory=GeneralInfo)


class GenericConfigEntry(BaseModel):
    """Config entry whose key has no typed model."""

    key: str
    value: Any = None


KnownConfigEntry = Annotated[
    Union[
        SectionTextsEntry,
        MaintenanceModeEntry,
        SectionVisibilityEntry,
        SectionOrderEntry,
        GeneralInfoEntry,
    ],
    Field(discriminator="key"),
]

ConfigEntry = Union[
    SectionTextsEntry,
    MaintenanceModeEntry,
    SectionVisibilityEntry,
    SectionOrderEntry,
    GeneralInfoEntry,
    GenericConfigEntry,
]

_known_entries: TypeAdapter = TypeAdapter(KnownConfigEntry)

KNOWN_CONFIG_KEYS: frozenset[str] = frozenset(
    key
    for model in (
        SectionTextsEntry,
        MaintenanceModeEntry,
        SectionVisibilityEntry,
        SectionOrderEntry,
        GeneralInfoEntry,
    )
    for key in get_args(model.model_fields["key"].annotation)
)


def parse_config_entry(raw: dict[str, Any]) -> ConfigEntry:
    """Parse one {key, value} dict into its typed entry.

    Raises:
        InvalidConfigError: If a known key carries a value of the wrong shape
    """
    key = raw.get("key")
    if key not in KNOWN_CONFIG_KEYS:
        return GenericConfigEntry.model_validate(raw)
    try:
        return _known_entries.validate_python(raw)
    except ValidationError as e:
        raise InvalidConfigError(str(key), str(e)) from e


def parse_config_list(raw: list[dict[str, Any]] | None) -> list[ConfigEntry]:
    """Parse a config list as returned by the config endpoints."""
    return [parse_config_entry(item) for item in raw or []]


def validate_config_value(key: str, value: Any) -> Any:
    """Check a value against the model of its key and fill defaults.

    Unknown keys are returned unchanged.

    Returns:
        The JSON value to send

    Raises:
        InvalidConfigError: If the value does not fit the key's model
    """
    if key not in KNOWN_CONFIG_KEYS:
        return value
    entry = parse_config_entry({"key": key, "value": value})
    if isinstance(entry.value, BaseModel):
        return entry.value.model_dump()
    return entry.value
