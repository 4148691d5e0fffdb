"""Extraction stages of the deterministic item-text parser.

Each stage takes the working text and returns what it found together with the
text that remains once the match is removed. Stages are run in a fixed order by
``regex_parse_item_text``; running them in another order changes results.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass, field
from datetime import date, timedelta

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"#(\w+)", re.ASCII)

_NUMBER_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

_AMOUNT = r"(\d+|one|two|three|four|five|six|seven|eight|nine|ten)"
_PERIOD_UNIT = r"(days?|weeks?|months?)"

_ABSOLUTE_DATE_PATTERN = re.compile(
    r"expires?:?\s?(\d{1,2})[-/](\d{1,2})[-/](\d{2,4})", re.IGNORECASE
)

# Tried in order; the first one that matches is the only one used
_PERIOD_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"expires?\s+in\s+{_AMOUNT}\s+{_PERIOD_UNIT}", re.IGNORECASE),
    re.compile(rf"good\s+for\s+{_AMOUNT}\s+{_PERIOD_UNIT}", re.IGNORECASE),
    re.compile(rf"for\s+{_AMOUNT}\s+{_PERIOD_UNIT}", re.IGNORECASE),
    re.compile(rf"\bin\s+{_AMOUNT}\s+{_PERIOD_UNIT}\b", re.IGNORECASE),
]

# Longest alternatives first so "lbs" is not cut short at "lb"
_SIZE_UNITS = [
    "kilograms", "kilogram", "milliliters", "milliliter", "pounds", "pound",
    "ounces", "ounce", "grams", "gram", "fl oz", "lbs", "lb", "kg", "oz",
    "ml", "g",
]
_SIZE_UNIT = "(?:" + "|".join(re.escape(u) for u in _SIZE_UNITS) + r")\b"
_SIZE_PATTERN = re.compile(rf"\d+\s*{_SIZE_UNIT}", re.IGNORECASE)

_OF_ANYWHERE_PATTERN = re.compile(r"\d+\s+of\s+", re.IGNORECASE)
_OF_LEADING_PATTERN = re.compile(r"^(\d+)\s+of\s+", re.IGNORECASE)
_LEADING_QUANTITY_PATTERN = re.compile(r"^(\d+)\s+")

# (keywords, tag) rules for suggested tags, evaluated in order
_TAG_RULES: list[tuple[tuple[str, ...], str]] = [
    (("chicken", "beef", "pork"), "protein"),
    (("vegetable", "fruit"), "healthy"),
    (("dinner", "meal"), "meal"),
    (("leftover",), "leftovers"),
    (("dessert", "ice cream"), "dessert"),
]

MAX_SUGGESTED_TAGS = 3


@dataclass
class TagExtraction:
    tags: list[str] = field(default_factory=list)
    remaining_text: str = ""


@dataclass
class ExpirationExtraction:
    date: date | None = None
    explicit: bool = False
    remaining_text: str = ""


@dataclass
class QuantityExtraction:
    quantity: int = 1
    size: str = ""
    remaining_text: str = ""


def _remove_first(text: str, fragment: str) -> str:
    return text.replace(fragment, "", 1).strip()


def extract_explicit_tags(text: str) -> TagExtraction:
    """Collect ``#tag`` tokens in order of appearance and strip them all."""
    tags = _TAG_PATTERN.findall(text)
    remaining = _TAG_PATTERN.sub("", text).strip()
    if tags:
        logger.debug("Extracted tags %s, remaining %r", tags, remaining)
    return TagExtraction(tags=tags, remaining_text=remaining)


def suggest_basic_tags(name: str, category: str) -> list[str]:
    """Derive up to three tags from the category and name keywords."""
    tags: list[str] = []
    lowered = name.lower()

    if category != "Other":
        tags.append(re.sub(r"[^a-z0-9]", "", category.lower()))

    for keywords, tag in _TAG_RULES:
        if any(keyword in lowered for keyword in keywords):
            tags.append(tag)

    return tags[:MAX_SUGGESTED_TAGS]


def add_months(start: date, months: int) -> date:
    """Advance by calendar months, rolling day-of-month overflow forward.

    Jan 31 + 1 month lands on Mar 3 (or Mar 2 in a leap year) rather than
    being clamped to the end of February.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)


def _parse_absolute_date(month: str, day: str, year: str) -> date | None:
    y = int(year)
    if len(year) <= 2:
        y += 2000 if y < 50 else 1900
    m, d = int(month), int(day)
    if y < 1 or not 1 <= m <= 12:
        return None
    if not 1 <= d <= calendar.monthrange(y, m)[1]:
        return None
    return date(y, m, d)


def _period_to_date(amount: str, unit: str, today: date) -> date | None:
    lowered = amount.lower()
    unit = unit.lower()
    try:
        n = _NUMBER_WORDS[lowered] if lowered in _NUMBER_WORDS else int(amount)
        if unit.startswith("day"):
            return today + timedelta(days=n)
        if unit.startswith("week"):
            return today + timedelta(days=n * 7)
        return add_months(today, n)
    except (OverflowError, ValueError):
        # Too many digits for int(), or beyond date.max
        return None


def _to_count(digits: str) -> int | None:
    try:
        return int(digits)
    except ValueError:
        # Over the interpreter's integer string conversion limit
        return None


def _strip_orphaned_s(text: str) -> str:
    # Removing a phrase mid-word can leave a lone "s" behind
    if re.search(r"\bs$", text):
        text = re.sub(r"\bs\b", "", text, count=1).strip()
    return text


def extract_expiration_phrase(
    text: str, today: date | None = None
) -> ExpirationExtraction:
    """Find an explicit expiration date or relative shelf-life period.

    Only the first matching phrase is used. Its text is always removed, but a
    date that is not strictly after ``today`` is discarded, leaving the
    decision to the knowledge base or the default horizon.
    """
    today = today or date.today()

    match = _ABSOLUTE_DATE_PATTERN.search(text)
    if match:
        remaining = _strip_orphaned_s(_remove_first(text, match.group(0)))
        parsed = _parse_absolute_date(*match.group(1, 2, 3))
        if parsed is None:
            logger.debug("Unparseable date in %r", match.group(0))
        elif parsed <= today:
            logger.debug("Ignoring past expiration date %s", parsed.isoformat())
        else:
            logger.debug("Explicit expiration date %s", parsed.isoformat())
            return ExpirationExtraction(parsed, True, remaining)
        return ExpirationExtraction(None, False, remaining)

    for pattern in _PERIOD_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        remaining = _strip_orphaned_s(_remove_first(text, match.group(0)))
        expires = _period_to_date(match.group(1), match.group(2), today)
        if expires is None or expires <= today:
            logger.debug("Ignoring non-future period %r", match.group(0))
            return ExpirationExtraction(None, False, remaining)
        logger.debug(
            "Relative expiration %r -> %s", match.group(0), expires.isoformat()
        )
        return ExpirationExtraction(expires, True, remaining)

    return ExpirationExtraction(None, False, text)


def extract_quantity_and_size(text: str) -> QuantityExtraction:
    """Pull the item count and a weight/volume size token out of the text.

    Handles a leading count ("2 salmon fillets"), a size token ("8oz") and
    "N of X" phrasing ("3 of the 500g packs").
    """
    quantity = 1
    size = ""
    remaining = text

    # "N of ..." is resolved after the size token is gone
    if not _OF_ANYWHERE_PATTERN.search(remaining):
        match = _LEADING_QUANTITY_PATTERN.match(remaining)
        if match:
            quantity = _to_count(match.group(1)) or quantity
            remaining = _remove_first(remaining, match.group(0))

    match = _SIZE_PATTERN.search(remaining)
    if match:
        size = match.group(0).strip()
        remaining = _remove_first(remaining, match.group(0))

    match = _OF_LEADING_PATTERN.match(remaining)
    if match:
        quantity = _to_count(match.group(1)) or quantity
        remaining = _remove_first(remaining, match.group(0))

    if remaining.lower().startswith("of "):
        remaining = remaining[3:].strip()

    return QuantityExtraction(max(quantity, 1), size, remaining)


def normalize_name(name: str, quantity: int) -> str:
    """Capitalize each word and pluralize the last one when quantity > 1.

    Words ending in s, sh, ch, x or z are left as they are.
    """
    words = [w[:1].upper() + w[1:].lower() for w in name.split()]
    if not words:
        return ""

    last = words[-1]
    if quantity > 1 and not last.endswith("s"):
        if last.endswith("y"):
            words[-1] = last[:-1] + "ies"
        elif not last.endswith(("sh", "ch", "x", "z")):
            words[-1] = last + "s"

    return " ".join(words)
