"""Shopping checklist: which list items have already been picked up."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .ingredient_parser import ParsedIngredient, parse_ingredient
from .logging_config import get_logger
from .shopping_list import ShoppingCategory, iter_items

logger = get_logger(__name__)


class ChecklistError(Exception):
    """Exception raised for checklist persistence errors."""

    pass


@dataclass
class Checklist:
    """Checked items, stored by aggregation key."""

    checked: set[str] = field(default_factory=set)
    updated_at: datetime | None = None

    def is_checked(self, item: ParsedIngredient) -> bool:
        return item.key in self.checked

    def check(self, item: ParsedIngredient) -> None:
        self.checked.add(item.key)

    def uncheck(self, item: ParsedIngredient) -> None:
        self.checked.discard(item.key)

    def toggle(self, item: ParsedIngredient) -> bool:
        """Flip an item's state; returns True if it is now checked."""
        if self.is_checked(item):
            self.uncheck(item)
            return False
        self.check(item)
        return True

    def reset(self) -> None:
        """Uncheck everything."""
        self.checked.clear()

    def progress(self, groups: Iterable[ShoppingCategory]) -> tuple[int, int]:
        """
        Count checked items in a shopping list.

        Keys saved for items no longer on the list are ignored.

        Returns:
            Tuple of (checked_count, total_count)
        """
        items = list(iter_items(groups))
        done = sum(1 for item in items if self.is_checked(item))
        return done, len(items)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "version": 1,
            "checked": sorted(self.checked),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Checklist:
        """Create from dict."""
        updated_at = None
        if data.get("updated_at"):
            updated_at = datetime.fromisoformat(data["updated_at"])

        checked = data.get("checked", [])
        if not isinstance(checked, list) or not all(isinstance(key, str) for key in checked):
            raise ValueError("checked must be a list of item keys")

        return cls(checked=set(checked), updated_at=updated_at)


def load_checklist(checklist_file: Path) -> Checklist:
    """Load checklist from disk; a missing or unreadable file gives an empty one."""
    if not checklist_file.exists():
        return Checklist()

    try:
        with open(checklist_file, encoding="utf-8") as f:
            data = json.load(f)
        return Checklist.from_dict(data)
    except (OSError, json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        logger.warning(f"Ignoring unreadable checklist {checklist_file}: {e}")
        return Checklist()


def save_checklist(checklist: Checklist, checklist_file: Path) -> None:
    """Save checklist to disk."""
    checklist.updated_at = datetime.now()
    try:
        checklist_file.parent.mkdir(parents=True, exist_ok=True)
        with open(checklist_file, "w", encoding="utf-8") as f:
            json.dump(checklist.to_dict(), f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ChecklistError(f"Failed to save checklist: {e}") from e


def find_item(groups: Iterable[ShoppingCategory], text: str) -> ParsedIngredient | None:
    """
    Find a shopping list item by name or aggregation key (case-insensitive).

    Falls back to parsing the text as an ingredient line, so "2 cloves garlic"
    finds the "Garlic" item.
    """
    wanted = text.strip().lower()
    items = list(iter_items(groups))

    for item in items:
        if wanted in (item.key, item.name.lower()):
            return item

    parsed = parse_ingredient(text)
    for item in items:
        if item.key == parsed.key:
            return item
    for item in items:
        if item.name.lower() == parsed.name.lower():
            return item

    return None
