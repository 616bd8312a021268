"""Count translatable strings in pulled locale files."""

from pathlib import Path
from typing import Any, Mapping

import yaml


def count_entries(document: Any) -> int:
    """
    Count the leaf entries of a nested translation document.

    Every value that is not itself a mapping counts as one entry, at any depth.

    Example:
        count_entries({"en-US": {"user": {"name": "Name", "email": "Email"}}})
        # 2
    """
    if not isinstance(document, Mapping):
        return 0
    total = 0
    for value in document.values():
        if isinstance(value, Mapping):
            total += count_entries(value)
        else:
            total += 1
    return total


def count_locale_file(path: Path) -> int:
    with path.open("r", encoding="utf-8") as f:
        return count_entries(yaml.safe_load(f))
