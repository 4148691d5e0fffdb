"""Validation of structured item details returned by AI-backed parsers."""

from __future__ import annotations

import json
import logging
import re
from datetime import date

from ..categories import DEFAULT_CATEGORY, CATEGORIES, is_valid_category
from ..foodkeeper import calculate_expiration_date
from . import ParsedItemDetails

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def build_prompt(text: str, default_expiration_days: int, today: date) -> str:
    """Prompt asking a model for one item as a JSON object."""
    categories = ", ".join(CATEGORIES)
    return f"""\
You are a food item parser for a freezer inventory app called Frostie.

Given the following text describing a food item, extract:

- name: the food item name (proper capitalization, plural if quantity > 1)
- quantity: number of units (default 1)
- category: one of: {categories}
- size: size or weight (e.g. "1 lb", "500g"), empty string if none
- expirationDate: ISO date (YYYY-MM-DD).
  - If a specific date is given, use it.
  - If a relative period is given ("expires in 2 weeks", "good for 3 days"),
    add it to TODAY. TODAY is {today.isoformat()}.
  - Otherwise default to {default_expiration_days} days from today.
- tags: 2-3 relevant lowercase tags (e.g. protein, dinner, homemade)

Text: "{text}"

Return only a JSON object, no other text:
{{"name": string, "quantity": number, "category": string, "size": string,
"expirationDate": string, "tags": string[]}}
"""


def extract_json_object(text: str) -> dict:
    """Pull the first JSON object out of a model reply.

    Raises:
        ValueError: If the reply contains no JSON object.
        json.JSONDecodeError: If the object is malformed.
    """
    match = _JSON_OBJECT.search(text)
    if not match:
        raise ValueError("No JSON object found in model response")
    data = json.loads(match.group(0))
    if not isinstance(data, dict):
        raise ValueError("Model response is not a JSON object")
    return data


def _parse_iso_date(value) -> date | None:
    if not isinstance(value, str) or len(value) < 10:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _coerce_quantity(value) -> int:
    try:
        quantity = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 1
    return quantity if quantity >= 1 else 1


def details_from_payload(
    payload: dict,
    default_expiration_days: int = 30,
    today: date | None = None,
) -> ParsedItemDetails:
    """Validate a ``parsedDetails`` mapping into ``ParsedItemDetails``.

    Missing or invalid fields get safe defaults. An expiration date that is
    missing, unparseable, or not after ``today`` is replaced with the
    FoodKeeper estimate for the returned name and category.

    Raises:
        ValueError: If the payload has no usable item name.
    """
    today = today or date.today()

    name = str(payload.get("name") or "").strip()
    if not name:
        raise ValueError("Parsed details have no item name")

    category = payload.get("category") or DEFAULT_CATEGORY
    if not is_valid_category(category):
        logger.debug("Unknown category %r, using %s", category, DEFAULT_CATEGORY)
        category = DEFAULT_CATEGORY

    raw_tags = payload.get("tags")
    tags = tuple(str(t) for t in raw_tags) if isinstance(raw_tags, list) else ()

    expiration_date = _parse_iso_date(payload.get("expirationDate"))
    if expiration_date is None or expiration_date <= today:
        logger.warning(
            "AI returned unusable expiration date %r for %r, using FoodKeeper",
            payload.get("expirationDate"), name,
        )
        expiration_date = calculate_expiration_date(
            name, category, default_expiration_days, today
        )

    return ParsedItemDetails(
        name=name,
        quantity=_coerce_quantity(payload.get("quantity")),
        category=category,
        size=str(payload.get("size") or ""),
        expiration_date=expiration_date,
        tags=tags,
    )
