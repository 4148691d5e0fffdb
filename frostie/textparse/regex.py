"""Deterministic, rule-based item text parser."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from ..categories import guess_category
from ..foodkeeper import calculate_expiration_date
from . import ParsedItemDetails, TextParser
from .extractors import (
    extract_expiration_phrase,
    extract_explicit_tags,
    extract_quantity_and_size,
    normalize_name,
    suggest_basic_tags,
)

logger = logging.getLogger(__name__)

UNNAMED_ITEM = "Unnamed Item"


def regex_parse_item_text(
    text: str,
    default_expiration_days: int = 30,
    today: date | None = None,
) -> ParsedItemDetails:
    """Parse an item description such as "2 8oz salmon fillets #dinner".

    Stages run in a fixed order: tags, expiration phrase, quantity and size,
    category, expiration resolution, name normalization, suggested tags.

    Expiration precedence is an explicit phrase in the text, then the
    FoodKeeper estimate for the cleaned name, then ``today`` plus
    ``default_expiration_days``.
    """
    today = today or date.today()
    logger.debug("Parsing %r (default %d days)", text, default_expiration_days)

    tagged = extract_explicit_tags(text.strip())
    expiry = extract_expiration_phrase(tagged.remaining_text, today)
    sized = extract_quantity_and_size(expiry.remaining_text)
    name = sized.remaining_text

    category = guess_category(name)
    logger.debug("Guessed category %r for %r", category, name)

    default_date = today + timedelta(days=default_expiration_days)
    if expiry.explicit and expiry.date is not None:
        expiration_date = expiry.date
        logger.debug("Using explicit expiration date %s", expiration_date)
    else:
        foodkeeper_date = calculate_expiration_date(
            name, category, default_expiration_days, today
        )
        if foodkeeper_date != default_date:
            logger.debug("Using FoodKeeper expiration date %s", foodkeeper_date)
        else:
            logger.debug("Using default expiration date %s", default_date)
        expiration_date = foodkeeper_date

    name = normalize_name(name, sized.quantity) or UNNAMED_ITEM

    tags = tagged.tags or suggest_basic_tags(name, category)

    details = ParsedItemDetails(
        name=name,
        quantity=sized.quantity,
        category=category,
        size=sized.size,
        expiration_date=expiration_date,
        tags=tuple(tags),
    )
    logger.debug("Parsed details: %s", details)
    return details


class RegexTextParser(TextParser):
    """Rule-based parser; total for any string input."""

    name = "regex"

    async def parse(
        self,
        text: str,
        default_expiration_days: int = 30,
        today: date | None = None,
    ) -> ParsedItemDetails:
        return regex_parse_item_text(text, default_expiration_days, today)
