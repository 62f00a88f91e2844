"""
CLI script for normalizing HoYoLAB wiki entries to plain text records.

Pipeline:
1. Fetch the entry_page envelope from the wiki API (or read a saved one)
2. Dispatch on the page's category label
3. Normalize modules and strip HTML
4. Write the one-element record list as JSON or YAML
"""

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from hoyowiki_data import dispatcher, terminal, wiki
from hoyowiki_data.categories import CategoryRule, GameFamily, get_category_table
from hoyowiki_data.config import get_settings
from hoyowiki_data.exceptions import HoYoWikiError, MalformedInput


def load_envelope(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise MalformedInput(f"{path} is not valid JSON: {e}") from e


def render(records: list[dict[str, Any]], output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(records, sort_keys=False, allow_unicode=True)
    return json.dumps(records, indent=2, ensure_ascii=False) + "\n"


def scrape(
    family: GameFamily,
    entry_id: int | None = None,
    input_path: Path | None = None,
    table: Mapping[str, CategoryRule] | None = None,
) -> list[dict[str, Any]]:
    if table is None:
        table = get_category_table(family)

    if input_path is not None:
        terminal.info(f"Normalizing saved envelope {input_path}")
        records = dispatcher.normalize_envelope(load_envelope(input_path), family, table)
    else:
        if entry_id is None:
            raise ValueError("Either an entry ID or an input file is required")
        wiki_name = wiki.WIKI_DISPLAY_NAMES[family]
        terminal.info(f"Scraping the HoYoLAB {wiki_name} wiki for entry {entry_id}")
        records = wiki.scrape_entry(family, entry_id, table)

    known_types = {rule.type for rule in table.values()}
    for record in records:
        if record.type not in known_types:
            terminal.warning(f"Category '{record.type}' is not mapped, kept description only")
        terminal.record_summary(record)
    return [record.to_output() for record in records]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Convert a HoYoLAB wiki entry into a plain text record"
    )
    parser.add_argument(
        "--wiki",
        required=True,
        choices=[family.value for family in GameFamily],
        help="Wiki to read from",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--entry-id", type=int, help="Wiki entry_page_id (must be positive)")
    source.add_argument("--input", type=Path, help="Saved entry_page JSON envelope")
    parser.add_argument(
        "--format", choices=["json", "yaml"], default="json", help="Output format (default: json)"
    )
    parser.add_argument("--output", type=Path, help="Write to this file instead of stdout")

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    family = GameFamily(args.wiki)
    try:
        table = get_category_table(family)
        records = scrape(family, entry_id=args.entry_id, input_path=args.input, table=table)
    except HoYoWikiError as e:
        terminal.error(str(e))
        sys.exit(1)
    except (OSError, ValueError) as e:
        terminal.error(f"Unexpected error: {e}")
        sys.exit(1)

    text = render(records, args.format)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        terminal.success(f"Wrote {args.output}")
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
