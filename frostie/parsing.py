"""Entry point for turning free-text item descriptions into item details."""

from __future__ import annotations

import logging
from datetime import date

from .textparse import FallbackTextParser, ParsedItemDetails, TextParser
from .textparse.regex import RegexTextParser

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_DAYS = 30


async def parse_item_text(
    text: str,
    default_expiration_days: int = DEFAULT_EXPIRATION_DAYS,
    parser: TextParser | None = None,
    today: date | None = None,
) -> ParsedItemDetails:
    """Parse an item description, preferring an AI-backed parser.

    Args:
        text: Raw user input, e.g. "2 8oz salmon fillets good for 2 weeks #dinner".
        default_expiration_days: Horizon used when neither the text nor the
            FoodKeeper data gives an expiration.
        parser: Remote parser to try first. When omitted, or when it raises,
            the deterministic regex parser is used.
        today: Reference date, defaults to ``date.today()``.

    Returns:
        Parsed item details. Never raises for string input.
    """
    today = today or date.today()

    if parser is None:
        logger.debug("No remote parser configured, using regex parser")
        parser = RegexTextParser()
    elif not isinstance(parser, (RegexTextParser, FallbackTextParser)):
        parser = FallbackTextParser(parser, RegexTextParser())

    details = await parser.parse(text, default_expiration_days, today)
    logger.debug("Parsed %r with %s parser: %s", text, parser.name, details)
    return details
