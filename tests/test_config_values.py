"""
Tests for typed config values.
"""

import pytest

from site_cache.dto import (
    KNOWN_CONFIG_KEYS,
    GenericConfigEntry,
    parse_config_entry,
    parse_config_list,
    validate_config_value,
)
from site_cache.dto.config_values import (
    MaintenanceModeEntry,
    SectionOrderEntry,
    SectionTextsEntry,
    SectionVisibilityEntry,
)
from site_cache.exceptions import InvalidConfigError


def test_section_texts_keys_share_one_model():
    for key in ("faq_section", "testimonials_section", "photo_carousel_section"):
        assert isinstance(parse_config_entry({"key": key, "value": {}}), SectionTextsEntry)


def test_null_value_reads_as_empty_section():
    entry = parse_config_entry({"key": "faq_section", "value": None})

    assert entry.value.title == ""
    assert entry.value.badge == ""


def test_missing_fields_get_defaults():
    entry = parse_config_entry({"key": "maintenance_mode", "value": {"isEnabled": True}})

    assert isinstance(entry, MaintenanceModeEntry)
    assert entry.value.isEnabled is True
    assert entry.value.title == "Site under maintenance"


def test_sections_are_visible_unless_switched_off():
    entry = parse_config_entry({"key": "section_visibility", "value": {"gallery": False}})

    assert isinstance(entry, SectionVisibilityEntry)
    assert entry.value.gallery is False
    assert entry.value.contact is True


def test_section_order_is_a_mapping_of_positions():
    entry = parse_config_entry({"key": "section_order", "value": {"hero": 0, "about": 1}})

    assert isinstance(entry, SectionOrderEntry)
    assert entry.value == {"hero": 0, "about": 1}


def test_unknown_key_is_generic():
    entry = parse_config_entry({"key": "custom_footer", "value": ["a", 1]})

    assert isinstance(entry, GenericConfigEntry)
    assert entry.value == ["a", 1]


def test_wrong_shape_raises_invalid_config():
    with pytest.raises(InvalidConfigError) as exc_info:
        parse_config_entry({"key": "section_order", "value": "hero,about"})

    assert exc_info.value.key == "section_order"
    assert exc_info.value.error_code == "INVALID_CONFIG"


def test_validate_keeps_extra_fields():
    value = validate_config_value("general_info", {"siteName": "Clinic", "instagram": "@clinic"})

    assert value == {
        "headerName": "",
        "crp": "",
        "siteName": "Clinic",
        "description": "",
        "instagram": "@clinic",
    }


def test_validate_passes_unknown_keys_through():
    value = {"anything": object()}

    assert validate_config_value("hero_image", value) is value


def test_parse_config_list():
    assert parse_config_list(None) == []
    entries = parse_config_list([{"key": "faq_section", "value": {}}, {"key": "x", "value": 1}])
    assert [type(e) for e in entries] == [SectionTextsEntry, GenericConfigEntry]


def test_known_keys():
    assert "maintenance_mode" in KNOWN_CONFIG_KEYS
    assert "general_info" in KNOWN_CONFIG_KEYS
    assert len(KNOWN_CONFIG_KEYS) == 9
