"""
HoYoLAB wiki client for fetching entry pages.

The wiki frontend lives on wiki.hoyolab.com, but page content is served as
JSON from a separate static API. Responses are not cached and failed
requests are not retried.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from hoyowiki_data.categories import CategoryRule, GameFamily, resolve_game_family
from hoyowiki_data.config import get_settings
from hoyowiki_data.dispatcher import normalize_envelope
from hoyowiki_data.exceptions import WikiError
from hoyowiki_data.models import CanonicalRecord
from hoyowiki_data.types import HoYoEnvelope

log = logging.getLogger(__name__)

WIKI_DISPLAY_NAMES: dict[GameFamily, str] = {
    GameFamily.GENSHIN: "Genshin Impact",
    GameFamily.STAR_RAIL: "Honkai: Star Rail",
}


def build_entry_url(family: GameFamily, entry_id: int) -> str:
    settings = get_settings()
    base = settings.api_base_url.rstrip("/")
    return f"{base}/{family.value}/wapi/entry_page?entry_page_id={entry_id}"


def _request_headers(family: GameFamily) -> dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.user_agent,
        "Accept-Language": f"{settings.language},en;q=0.6",
        "X-Rpc-Language": settings.language,
        "X-Rpc-Wiki_app": family.value,
    }


def fetch_entry_page(family: GameFamily | str, entry_id: int) -> HoYoEnvelope:
    resolved = resolve_game_family(family)
    if entry_id <= 0:
        raise WikiError(f"Invalid wiki entry ID: {entry_id}")

    url = build_entry_url(resolved, entry_id)
    log.info("Entry %d: fetching from the %s wiki API", entry_id, WIKI_DISPLAY_NAMES[resolved])
    settings = get_settings()
    try:
        response = httpx.get(url, headers=_request_headers(resolved), timeout=settings.api_timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise WikiError(
            f"Failed to fetch wiki entry {entry_id}: HTTP {e.response.status_code}"
        ) from e
    except httpx.RequestError as e:
        raise WikiError(f"Network error fetching wiki entry {entry_id}: {e}") from e

    try:
        data: dict[str, Any] = response.json()
    except (ValueError, TypeError) as e:
        raise WikiError(f"Invalid JSON response for wiki entry {entry_id}") from e

    if not isinstance(data, dict):
        raise WikiError(f"Unexpected wiki API response format for entry {entry_id}")

    retcode = data.get("retcode")
    if retcode != 0:
        message = data.get("message") or "Unknown error"
        raise WikiError(f"Wiki entry {entry_id} not available: retcode {retcode} ({message})")

    page_data = data.get("data")
    if not isinstance(page_data, dict) or not isinstance(page_data.get("page"), dict):
        raise WikiError(f"Wiki API response for entry {entry_id} has no page")

    log.info("Entry %d: received page '%s'", entry_id, page_data["page"].get("name", ""))
    return data  # type: ignore[return-value]


def scrape_entry(
    family: GameFamily | str,
    entry_id: int,
    table: Mapping[str, CategoryRule] | None = None,
) -> list[CanonicalRecord]:
    envelope = fetch_entry_page(family, entry_id)
    return normalize_envelope(envelope, family, table)
