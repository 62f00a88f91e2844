"""
Type definitions for HoYoLAB wiki API responses.

Provides TypedDict structures matching the entry_page envelope so the fetch
layer and the normalizer agree on what crosses the boundary.
"""

from typing import Any, NotRequired, TypedDict


class FilterValue(TypedDict):
    values: list[str]


class HoYoComponent(TypedDict):
    component_id: str
    layout: str
    data: str
    style: str


class HoYoModule(TypedDict):
    name: str
    components: list[HoYoComponent]


class HoYoPage(TypedDict):
    id: int | str
    name: str
    desc: str
    menu_name: str
    modules: list[HoYoModule]
    filter_values: NotRequired[dict[str, FilterValue]]


class EnvelopeData(TypedDict):
    page: HoYoPage


class HoYoEnvelope(TypedDict):
    retcode: int
    message: str
    data: EnvelopeData | dict[str, Any] | None
