"""Freezer item model and expiration helpers."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from .parsing import DEFAULT_EXPIRATION_DAYS, parse_item_text

if TYPE_CHECKING:
    from .textparse import TextParser

ITEM_SOURCES = ("text", "voice", "image", "barcode", "manual")


@dataclass
class FreezerItem:
    """An item stored in the freezer."""

    name: str
    quantity: int
    category: str
    expiration_date: date
    size: str = ""
    tags: list[str] = field(default_factory=list)
    notes: str = ""
    image_url: str = ""
    source: str = "text"  # text | voice | image | barcode | manual
    added_date: date = field(default_factory=date.today)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "size": self.size,
            "category": self.category,
            "expirationDate": self.expiration_date.isoformat(),
            "addedDate": self.added_date.isoformat(),
            "notes": self.notes,
            "tags": list(self.tags),
            "imageUrl": self.image_url,
            "source": self.source,
        }


async def create_freezer_item_from_parsed_text(
    text: str,
    image_url: str = "",
    parser: TextParser | None = None,
    default_expiration_days: int = DEFAULT_EXPIRATION_DAYS,
    source: str = "text",
    today: date | None = None,
) -> FreezerItem:
    """Parse a text description and build a new freezer item from it."""
    if source not in ITEM_SOURCES:
        raise ValueError(f"Unknown item source: {source!r}")

    today = today or date.today()
    details = await parse_item_text(text, default_expiration_days, parser, today)

    return FreezerItem(
        name=details.name,
        quantity=details.quantity,
        category=details.category,
        expiration_date=details.expiration_date,
        size=details.size,
        tags=list(details.tags),
        image_url=image_url,
        source=source,
        added_date=today,
    )


def days_until_expiration(item: FreezerItem, today: date | None = None) -> int:
    today = today or date.today()
    return (item.expiration_date - today).days


def is_item_expired(item: FreezerItem, today: date | None = None) -> bool:
    return days_until_expiration(item, today) <= 0


def is_item_expiring_within(
    item: FreezerItem, days: int = 7, today: date | None = None
) -> bool:
    """True when the item expires after today but within ``days`` days."""
    left = days_until_expiration(item, today)
    return 0 < left <= days


def expiration_status(days_left: int) -> str:
    if days_left <= 0:
        return "Expired"
    if days_left == 1:
        return "1 day left"
    return f"{days_left} days left"
