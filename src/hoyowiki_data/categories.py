"""
Category tables mapping wiki menu labels to normalization strategies.

Each supported game family has its own table. A table is plain data: label
-> (strategy, output type). Teaching the normalizer a new category means
adding a row here or in the YAML override file, not writing a new branch.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hoyowiki_data.config import get_settings
from hoyowiki_data.exceptions import ConfigError, UnknownGameFamily

log = logging.getLogger(__name__)

Strategy = Literal["character", "generic", "bare"]


class GameFamily(str, Enum):
    GENSHIN = "genshin"
    STAR_RAIL = "hsr"


class CategoryRule(BaseModel):
    model_config = {"frozen": True}

    strategy: Strategy
    type: str


# --- Character attribute keys ---

CHARACTER_ATTRIBUTE_KEYS: dict[GameFamily, dict[str, str]] = {
    GameFamily.STAR_RAIL: {
        "path": "character_paths",
        "faction": "character_factions",
        "rarity": "character_rarity",
        "combat_type": "character_combat_type",
    },
    GameFamily.GENSHIN: {
        "path": "character_weapon",
        "faction": "character_region",
        "rarity": "character_rarity",
        "combat_type": "character_vision",
    },
}


def _rules(strategy: Strategy, *labels: str) -> dict[str, CategoryRule]:
    return {label: CategoryRule(strategy=strategy, type=label) for label in labels}


_CHARACTER_RULES = {
    "Characters": CategoryRule(strategy="character", type="Character"),
    "Character Archive": CategoryRule(strategy="character", type="Character"),
}

_BARE_RULES = _rules("bare", "Adventure", "Tutorial")

DEFAULT_CATEGORY_TABLES: dict[GameFamily, dict[str, CategoryRule]] = {
    GameFamily.GENSHIN: {
        **_CHARACTER_RULES,
        **_rules(
            "generic",
            "Weapons",
            "Artifacts",
            "Enemies and Monsters",
            "Enemies",
            "Materials",
            "Food",
            "Furnishings",
            "Books",
            "NPC Archive",
            "Glossary",
            "Domains",
            "Geography",
            "Wildlife",
            "Outfits",
            "Genius Invokation TCG",
            "Events",
        ),
        **_BARE_RULES,
    },
    GameFamily.STAR_RAIL: {
        **_CHARACTER_RULES,
        **_rules(
            "generic",
            "Aeons",
            "Light Cones",
            "Relics",
            "Planar Ornaments",
            "Enemies",
            "Items",
            "Factions",
            "Books",
            "Readables",
            "Glossary",
            "Events",
            "Achievements",
            "NPCs",
            "Locations",
            "Phone Wallpapers",
        ),
        **_BARE_RULES,
    },
}


def resolve_game_family(family: GameFamily | str) -> GameFamily:
    if isinstance(family, GameFamily):
        return family
    try:
        return GameFamily(family)
    except ValueError as e:
        raise UnknownGameFamily(str(family)) from e


def _parse_rule(label: str, raw: Any) -> CategoryRule:
    if isinstance(raw, str):
        raw = {"strategy": raw}
    if not isinstance(raw, dict):
        raise ConfigError(f"Category '{label}' must map to a strategy name or a mapping")
    try:
        return CategoryRule.model_validate({"type": label, **raw})
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid rule for category '{label}': {e}") from e


def load_category_overrides(path: Path) -> dict[GameFamily, dict[str, CategoryRule]]:
    """
    Load extra category rules from a YAML file.

    The file maps a game family id to a mapping of label -> rule, where a
    rule is either a bare strategy name or ``{strategy: ..., type: ...}``::

        hsr:
          Memories: generic
          Trailblazer Archive: {strategy: character, type: Character}
    """
    if not path.exists():
        raise ConfigError(f"Category override file not found at {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Category override file {path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Category override file {path} must contain a mapping")

    overrides: dict[GameFamily, dict[str, CategoryRule]] = {}
    for family_id, labels in data.items():
        try:
            family = resolve_game_family(family_id)
        except UnknownGameFamily as e:
            raise ConfigError(f"Category override file {path}: {e}") from e
        if not isinstance(labels, dict):
            raise ConfigError(f"Category overrides for '{family_id}' must be a mapping")
        overrides[family] = {
            str(label): _parse_rule(str(label), raw) for label, raw in labels.items()
        }
    return overrides


@lru_cache(maxsize=16)
def _build_category_table(
    family: GameFamily, overrides_path: Path | None
) -> tuple[tuple[str, CategoryRule], ...]:
    table = dict(DEFAULT_CATEGORY_TABLES[family])
    if overrides_path is not None:
        extra = load_category_overrides(overrides_path).get(family, {})
        if extra:
            log.debug("Applying %d category overrides for %s", len(extra), family.value)
        table.update(extra)
    return tuple(table.items())


def get_category_table(
    family: GameFamily | str, overrides_path: Path | None = None
) -> dict[str, CategoryRule]:
    """
    Default table for ``family`` merged with the override file, if any.

    The override file is read once per (family, path); later calls reuse
    the merged table. Call ``clear_category_cache`` after editing the file.
    """
    resolved = resolve_game_family(family)
    path = overrides_path or get_settings().category_overrides
    if path is not None:
        path = path.resolve()
    return dict(_build_category_table(resolved, path))


def clear_category_cache() -> None:
    _build_category_table.cache_clear()
