"""
Category dispatch from a raw wiki page to its canonical record.

The page's menu label is looked up in the family's category table and the
resulting strategy tag selects the builder. Labels missing from the table
fall back to a description-only record typed with the raw label.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hoyowiki_data.categories import (
    CHARACTER_ATTRIBUTE_KEYS,
    CategoryRule,
    GameFamily,
    Strategy,
    get_category_table,
    resolve_game_family,
)
from hoyowiki_data.exceptions import MalformedInput
from hoyowiki_data.models import CanonicalRecord, RawPage
from hoyowiki_data.normalizer import normalize_modules
from hoyowiki_data.text import extract_text

log = logging.getLogger(__name__)


def _build_character(page: RawPage, rule: CategoryRule, family: GameFamily) -> CanonicalRecord:
    keys = CHARACTER_ATTRIBUTE_KEYS[family]
    return CanonicalRecord(
        type=rule.type,
        name=page.name,
        description=extract_text(page.description),
        modules=normalize_modules(page.modules),
        path=extract_text(page.attribute(keys["path"])),
        faction=extract_text(page.attribute(keys["faction"])),
        rarity=extract_text(page.attribute(keys["rarity"])),
        combat_type=extract_text(page.attribute(keys["combat_type"])),
    )


def _build_generic(page: RawPage, rule: CategoryRule, family: GameFamily) -> CanonicalRecord:
    return CanonicalRecord(
        type=rule.type,
        name=page.name,
        description=extract_text(page.description),
        modules=normalize_modules(page.modules),
    )


def _build_bare(page: RawPage, rule: CategoryRule, family: GameFamily) -> CanonicalRecord:
    return CanonicalRecord(
        type=rule.type,
        name=page.name,
        description=extract_text(page.description),
    )


_BUILDERS: dict[Strategy, Callable[[RawPage, CategoryRule, GameFamily], CanonicalRecord]] = {
    "character": _build_character,
    "generic": _build_generic,
    "bare": _build_bare,
}


def to_canonical_record(
    page: RawPage,
    family: GameFamily | str,
    table: Mapping[str, CategoryRule] | None = None,
) -> CanonicalRecord:
    resolved = resolve_game_family(family)
    if table is None:
        table = get_category_table(resolved)

    label = page.category_label
    rule = table.get(label)
    if rule is None:
        log.info("Category '%s' has no specific handling, keeping description only", label)
        rule = CategoryRule(strategy="bare", type=label)
    else:
        log.info("Category '%s' detected for '%s' (%s)", label, page.name, rule.strategy)

    return _BUILDERS[rule.strategy](page, rule, resolved)


def parse_page(envelope: Any) -> RawPage:
    """Pull ``data.page`` out of an entry_page envelope and validate it."""
    if not isinstance(envelope, dict):
        raise MalformedInput("Envelope must be a JSON object")

    data = envelope.get("data")
    page = data.get("page") if isinstance(data, dict) else None
    if not isinstance(page, dict):
        raise MalformedInput("Envelope is missing the 'data.page' object")

    try:
        return RawPage.model_validate(page)
    except PydanticValidationError as e:
        raise MalformedInput(f"Page object does not match the expected shape: {e}") from e


def normalize_envelope(
    envelope: Any,
    family: GameFamily | str,
    table: Mapping[str, CategoryRule] | None = None,
) -> list[CanonicalRecord]:
    page = parse_page(envelope)
    return [to_canonical_record(page, family, table)]
