"""
Terminal output helpers for the scrape script.

Colors are only emitted when stdout is a TTY and NO_COLOR is unset.
"""

import os
import sys
from enum import Enum

from hoyowiki_data.models import CanonicalRecord


class Color(Enum):
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_CYAN = "\033[96m"
    BRIGHT_WHITE = "\033[97m"


def _supports_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def colorize(text: str, *colors: Color) -> str:
    if not _supports_color():
        return text
    prefix = "".join(c.value for c in colors)
    return f"{prefix}{text}{Color.RESET.value}"


def info(message: str) -> None:
    print(message, file=sys.stderr)


def success(message: str) -> None:
    print(colorize(message, Color.BRIGHT_GREEN), file=sys.stderr)


def warning(message: str) -> None:
    print(colorize(f"⚠ {message}", Color.BRIGHT_YELLOW), file=sys.stderr)


def error(message: str) -> None:
    print(colorize(f"✗ {message}", Color.BRIGHT_RED), file=sys.stderr)


def section_header(title: str) -> None:
    separator = "=" * 60
    print(f"\n{colorize(separator, Color.BRIGHT_BLUE)}", file=sys.stderr)
    print(colorize(title, Color.BOLD, Color.BRIGHT_CYAN), file=sys.stderr)
    print(colorize(separator, Color.BRIGHT_BLUE), file=sys.stderr)


def key_value(key: str, value: str, indent: int = 0) -> None:
    spaces = " " * indent
    colored_key = colorize(f"{key}:", Color.BRIGHT_WHITE)
    print(f"{spaces}{colored_key} {value}", file=sys.stderr)


def record_summary(record: CanonicalRecord) -> None:
    section_header(f"{record.type}: {record.name}")
    for label, value in (
        ("Path", record.path),
        ("Faction", record.faction),
        ("Rarity", record.rarity),
        ("Combat type", record.combat_type),
    ):
        if value:
            key_value(label, value, indent=2)

    if record.modules is None:
        info(colorize("  Description only", Color.DIM))
        return

    key_value("Modules", str(len(record.modules)), indent=2)
    for module in record.modules:
        bullet = colorize("•", Color.BRIGHT_BLUE)
        print(f"    {bullet} {module.name} ({len(module.fields)} fields)", file=sys.stderr)
