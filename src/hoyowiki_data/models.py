"""Pydantic models for HoYoLAB wiki pages and their normalized records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

# --- Upstream page ---


class RawComponent(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    component_id: str = ""
    layout: str = ""
    data: str | None = None
    style: str = ""


class RawModule(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    name: str | None = None
    components: list[RawComponent] = Field(default_factory=list)

    @field_validator("components", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def payload(self) -> str:
        """The embedded JSON document carried by the first component, or ""."""
        if not self.components:
            return ""
        return self.components[0].data or ""


class RawPage(BaseModel):
    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    id: int | str | None = None
    name: str = ""
    description: str = Field(default="", alias="desc")
    category_label: str = Field(default="", alias="menu_name")
    modules: list[RawModule] = Field(default_factory=list)
    filter_values: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "description", "category_label", mode="before")
    @classmethod
    def _none_as_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("modules", mode="before")
    @classmethod
    def _none_as_no_modules(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("filter_values", mode="before")
    @classmethod
    def _none_as_no_filters(cls, value: Any) -> Any:
        return {} if value is None else value

    def attribute(self, key: str) -> str:
        """First value of a filter attribute, or "" when it is missing."""
        entry = self.filter_values.get(key)
        if not isinstance(entry, dict):
            return ""
        values = entry.get("values")
        if not isinstance(values, list) or not values or values[0] is None:
            return ""
        return str(values[0])


# --- Normalized output ---


class ModuleField(BaseModel):
    model_config = {"frozen": True}

    key: str
    value: str


class ModuleRecord(BaseModel):
    model_config = {"frozen": True}

    name: str
    fields: list[ModuleField] = Field(default_factory=list)


class CanonicalRecord(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    type: str
    name: str
    description: str
    modules: list[ModuleRecord] | None = None
    path: str | None = None
    faction: str | None = None
    rarity: str | None = None
    combat_type: str | None = Field(default=None, alias="combatType")

    def to_output(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
