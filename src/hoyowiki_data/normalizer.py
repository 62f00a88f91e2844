"""
Module normalization for HoYoLAB wiki pages.

Every page module embeds its content as a JSON string. The embedded document
is either ``{"list": [...]}`` holding entries of several undeclared shapes,
or ``{"data": "<html>"}`` holding a single HTML value. Entries are told apart
by which fields they carry, checked in a fixed order because real data can
match more than one shape.
"""

import json
import logging
from typing import Any, Literal, NamedTuple

from hoyowiki_data.exceptions import MalformedPayload
from hoyowiki_data.models import ModuleField, ModuleRecord, RawModule
from hoyowiki_data.text import extract_text

log = logging.getLogger(__name__)

EntryShape = Literal["key_value", "key_values", "title_desc", "name_desc", "unrecognized"]

# (shape, label field, content field), first match wins.
_ENTRY_SHAPES: tuple[tuple[EntryShape, str, str], ...] = (
    ("key_value", "key", "value"),
    ("key_values", "key", "values"),
    ("title_desc", "title", "desc"),
    ("name_desc", "name", "desc"),
)

_PLACEHOLDER_ENTRY = {"key": "", "value": [""]}


class ClassifiedEntry(NamedTuple):
    shape: EntryShape
    field: ModuleField | None


UNRECOGNIZED = ClassifiedEntry(shape="unrecognized", field=None)


def _as_key(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def classify_entry(entry: Any) -> ClassifiedEntry:
    if not isinstance(entry, dict):
        return UNRECOGNIZED

    for shape, label_field, content_field in _ENTRY_SHAPES:
        if label_field in entry and content_field in entry:
            field = ModuleField(
                key=_as_key(entry[label_field]),
                value=extract_text(entry[content_field]),
            )
            return ClassifiedEntry(shape=shape, field=field)

    return UNRECOGNIZED


def _parse_payload(module_name: str, payload: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedPayload(module_name, str(e)) from e


def _fields_from_list(module_name: str, entries: list[Any]) -> list[ModuleField]:
    fields: list[ModuleField] = []
    for index, entry in enumerate(entries):
        classified = classify_entry(entry)
        if classified.field is None:
            log.debug("Module '%s': skipping unrecognized entry %d", module_name, index)
            continue
        fields.append(classified.field)
    return fields


def normalize_module(module: RawModule) -> ModuleRecord | None:
    name = module.name
    if not name:
        log.warning("Empty module name detected, assuming no data is present")
        return None

    payload = module.payload
    if not payload:
        log.warning("Module '%s' is empty, skipping", name)
        return None

    log.debug("Parsing module '%s'", name)
    container = _parse_payload(name, payload)
    if not isinstance(container, dict):
        log.warning("Module '%s' payload is not a JSON object, skipping", name)
        return None

    if "list" in container:
        entries = container["list"]
        if entries is None:
            entries = [_PLACEHOLDER_ENTRY]
        if not isinstance(entries, list):
            log.warning("Module '%s' has a non-list 'list' field, skipping", name)
            return None
        return ModuleRecord(name=name, fields=_fields_from_list(name, entries))

    data = container.get("data")
    if isinstance(data, str):
        return ModuleRecord(name=name, fields=[ModuleField(key="", value=extract_text(data))])

    log.warning("Module '%s' has neither a 'list' nor a 'data' field, skipping", name)
    return None


def normalize_modules(modules: list[RawModule]) -> list[ModuleRecord]:
    records = []
    for module in modules:
        record = normalize_module(module)
        if record is not None:
            records.append(record)
    return records
