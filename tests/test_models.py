"""Tests for the page and record Pydantic models."""

import pytest
from pydantic import ValidationError

from hoyowiki_data.models import CanonicalRecord, ModuleField, ModuleRecord, RawModule, RawPage


class TestRawPage:
    def test_upstream_keys(self):
        page = RawPage.model_validate(
            {
                "id": "1001",
                "name": "March 7th",
                "desc": "<p>Desc</p>",
                "menu_name": "Characters",
                "modules": [{"name": "Attributes", "components": []}],
                "filter_values": {"character_paths": {"values": ["Preservation"]}},
                "icon_url": "ignored",
            }
        )

        assert page.name == "March 7th"
        assert page.description == "<p>Desc</p>"
        assert page.category_label == "Characters"
        assert len(page.modules) == 1
        assert page.attribute("character_paths") == "Preservation"

    def test_nulls_become_empty(self):
        page = RawPage.model_validate(
            {"name": None, "desc": None, "menu_name": None, "modules": None, "filter_values": None}
        )

        assert page.name == ""
        assert page.description == ""
        assert page.category_label == ""
        assert page.modules == []
        assert page.filter_values == {}

    @pytest.mark.parametrize(
        "filter_values",
        [
            {},
            {"character_rarity": None},
            {"character_rarity": {}},
            {"character_rarity": {"values": []}},
            {"character_rarity": {"values": [None]}},
            {"character_rarity": {"values": "5-Star"}},
        ],
    )
    def test_missing_attribute_is_blank(self, filter_values):
        page = RawPage.model_validate({"filter_values": filter_values})
        assert page.attribute("character_rarity") == ""

    def test_immutable(self):
        page = RawPage.model_validate({"name": "Himeko"})
        with pytest.raises(ValidationError):
            page.name = "Welt"

    def test_invalid_modules_rejected(self):
        with pytest.raises(ValidationError):
            RawPage.model_validate({"modules": "not a list"})


class TestRawModule:
    def test_payload_from_first_component(self):
        module = RawModule.model_validate(
            {"name": "Story", "components": [{"data": '{"data":"a"}'}, {"data": "second"}]}
        )
        assert module.payload == '{"data":"a"}'

    def test_payload_without_components(self):
        assert RawModule.model_validate({"name": "Story", "components": None}).payload == ""


class TestCanonicalRecord:
    def test_output_uses_aliases_and_omits_unset(self):
        record = CanonicalRecord(
            type="Character",
            name="Seele",
            description="Quick",
            modules=[ModuleRecord(name="Stats", fields=[ModuleField(key="HP", value="931")])],
            path="The Hunt",
            faction="Belobog",
            rarity="5-Star",
            combat_type="Quantum",
        )

        assert record.to_output() == {
            "type": "Character",
            "name": "Seele",
            "description": "Quick",
            "modules": [{"name": "Stats", "fields": [{"key": "HP", "value": "931"}]}],
            "path": "The Hunt",
            "faction": "Belobog",
            "rarity": "5-Star",
            "combatType": "Quantum",
        }

    def test_description_only_output(self):
        record = CanonicalRecord(type="Adventure", name="Trailblaze", description="Text")
        assert record.to_output() == {
            "type": "Adventure",
            "name": "Trailblaze",
            "description": "Text",
        }
