"""Shelf-life knowledge base for frozen foods.

Storage ranges are freezer times from the USDA FoodKeeper database, keyed by a
canonical lowercase food name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# Average days per month used when converting a month range into days
DAYS_PER_MONTH = 30.44


@dataclass(frozen=True)
class FoodExpirationInfo:
    min_months: float
    max_months: float
    category: str  # Informational only; lookups never branch on it

    @property
    def average_days(self) -> int:
        """Midpoint of the storage range, in whole days."""
        return round(((self.min_months + self.max_months) / 2) * DAYS_PER_MONTH)


# Iteration order matters: substring tiers return the first key that matches
FOODKEEPER_DATA: Mapping[str, FoodExpirationInfo] = MappingProxyType({
    # Meat
    "beef": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "ground beef": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "steak": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "pork": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "ground pork": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "pork chops": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "lamb": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "ground lamb": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "veal": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "bacon": FoodExpirationInfo(1, 2, "Meat & Poultry"),
    "sausage": FoodExpirationInfo(1, 2, "Meat & Poultry"),
    "ham": FoodExpirationInfo(1, 2, "Meat & Poultry"),
    "goat": FoodExpirationInfo(4, 12, "Meat & Poultry"),
    "bison": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "rabbit": FoodExpirationInfo(9, 9, "Meat & Poultry"),

    # Poultry
    "chicken": FoodExpirationInfo(9, 12, "Meat & Poultry"),
    "chicken breast": FoodExpirationInfo(9, 9, "Meat & Poultry"),
    "chicken thighs": FoodExpirationInfo(9, 9, "Meat & Poultry"),
    "chicken legs": FoodExpirationInfo(9, 9, "Meat & Poultry"),
    "chicken wings": FoodExpirationInfo(9, 9, "Meat & Poultry"),
    "ground chicken": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "rotisserie chicken": FoodExpirationInfo(4, 4, "Meat & Poultry"),
    "turkey": FoodExpirationInfo(12, 12, "Meat & Poultry"),
    "ground turkey": FoodExpirationInfo(3, 4, "Meat & Poultry"),
    "turkey breast": FoodExpirationInfo(9, 9, "Meat & Poultry"),
    "duck": FoodExpirationInfo(6, 6, "Meat & Poultry"),
    "goose": FoodExpirationInfo(6, 6, "Meat & Poultry"),
    "cornish hen": FoodExpirationInfo(12, 12, "Meat & Poultry"),

    # Seafood
    "fish": FoodExpirationInfo(6, 8, "Seafood"),
    "salmon": FoodExpirationInfo(2, 3, "Seafood"),
    "tuna": FoodExpirationInfo(2, 3, "Seafood"),
    "cod": FoodExpirationInfo(6, 8, "Seafood"),
    "tilapia": FoodExpirationInfo(6, 8, "Seafood"),
    "halibut": FoodExpirationInfo(6, 8, "Seafood"),
    "flounder": FoodExpirationInfo(6, 8, "Seafood"),
    "shrimp": FoodExpirationInfo(6, 18, "Seafood"),
    "crab": FoodExpirationInfo(6, 18, "Seafood"),
    "lobster": FoodExpirationInfo(6, 18, "Seafood"),
    "scallops": FoodExpirationInfo(6, 18, "Seafood"),
    "clams": FoodExpirationInfo(3, 4, "Seafood"),
    "oysters": FoodExpirationInfo(3, 4, "Seafood"),
    "mussels": FoodExpirationInfo(3, 4, "Seafood"),

    # Dairy
    "butter": FoodExpirationInfo(6, 9, "Dairy & Alternatives"),
    "cheese": FoodExpirationInfo(6, 6, "Dairy & Alternatives"),
    "milk": FoodExpirationInfo(3, 3, "Dairy & Alternatives"),
    "yogurt": FoodExpirationInfo(1, 2, "Dairy & Alternatives"),
    "cream": FoodExpirationInfo(3, 4, "Dairy & Alternatives"),
    "ice cream": FoodExpirationInfo(6, 6, "Dairy & Alternatives"),
    "cottage cheese": FoodExpirationInfo(3, 3, "Dairy & Alternatives"),
    "sour cream": FoodExpirationInfo(2, 2, "Dairy & Alternatives"),

    # Fruits and vegetables
    "fruit": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "apples": FoodExpirationInfo(8, 8, "Fruits & Vegetables"),
    "bananas": FoodExpirationInfo(2, 3, "Fruits & Vegetables"),
    "berries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "strawberries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "blueberries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "raspberries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "blackberries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "cherries": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "grapes": FoodExpirationInfo(1, 1, "Fruits & Vegetables"),
    "melon": FoodExpirationInfo(1, 1, "Fruits & Vegetables"),
    "watermelon": FoodExpirationInfo(12, 12, "Fruits & Vegetables"),
    "cantaloupe": FoodExpirationInfo(12, 12, "Fruits & Vegetables"),
    "honeydew": FoodExpirationInfo(12, 12, "Fruits & Vegetables"),
    "pineapple": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "mango": FoodExpirationInfo(6, 8, "Fruits & Vegetables"),
    "peaches": FoodExpirationInfo(2, 2, "Fruits & Vegetables"),
    "plums": FoodExpirationInfo(2, 2, "Fruits & Vegetables"),
    "pears": FoodExpirationInfo(2, 2, "Fruits & Vegetables"),
    "vegetable": FoodExpirationInfo(10, 18, "Fruits & Vegetables"),
    "vegetables": FoodExpirationInfo(10, 18, "Fruits & Vegetables"),
    "broccoli": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "cauliflower": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "carrots": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "corn": FoodExpirationInfo(8, 8, "Fruits & Vegetables"),
    "peas": FoodExpirationInfo(8, 8, "Fruits & Vegetables"),
    "green beans": FoodExpirationInfo(8, 8, "Fruits & Vegetables"),
    "spinach": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "asparagus": FoodExpirationInfo(5, 5, "Fruits & Vegetables"),
    "kale": FoodExpirationInfo(8, 12, "Fruits & Vegetables"),
    "potatoes": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "onions": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "tomatoes": FoodExpirationInfo(2, 2, "Fruits & Vegetables"),
    "peppers": FoodExpirationInfo(6, 8, "Fruits & Vegetables"),
    "zucchini": FoodExpirationInfo(10, 10, "Fruits & Vegetables"),
    "squash": FoodExpirationInfo(10, 12, "Fruits & Vegetables"),
    "eggplant": FoodExpirationInfo(6, 8, "Fruits & Vegetables"),

    # Bread and bakery
    "bread": FoodExpirationInfo(3, 5, "Bakery & Bread"),
    "bagel": FoodExpirationInfo(3, 3, "Bakery & Bread"),
    "muffin": FoodExpirationInfo(2, 3, "Bakery & Bread"),
    "cookies": FoodExpirationInfo(8, 12, "Bakery & Bread"),
    "cake": FoodExpirationInfo(6, 6, "Bakery & Bread"),
    "pie": FoodExpirationInfo(8, 8, "Bakery & Bread"),
    "dough": FoodExpirationInfo(12, 12, "Bakery & Bread"),
    "roll": FoodExpirationInfo(3, 5, "Bakery & Bread"),
    "rolls": FoodExpirationInfo(3, 5, "Bakery & Bread"),
    "tortillas": FoodExpirationInfo(6, 6, "Bakery & Bread"),

    # Prepared foods
    "soup": FoodExpirationInfo(2, 3, "Soups & Broths"),
    "stew": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "chili": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "pizza": FoodExpirationInfo(12, 12, "Ready-to-Eat"),
    "casserole": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "pasta": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "lasagna": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "rice": FoodExpirationInfo(6, 6, "Prepared Meals"),
    "meal": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "leftovers": FoodExpirationInfo(2, 3, "Prepared Meals"),
    "sauce": FoodExpirationInfo(4, 6, "Soups & Broths"),
    "gravy": FoodExpirationInfo(2, 3, "Soups & Broths"),
    "broth": FoodExpirationInfo(2, 3, "Soups & Broths"),
    "stock": FoodExpirationInfo(2, 3, "Soups & Broths"),
})


def find_best_food_match(item_name: str) -> str | None:
    """Find the knowledge base key that best matches an item name.

    Tiers, first hit wins:
        1. exact (case-insensitive) match
        2. a key contained in the item name
        3. the item name contained in a key

    Returns:
        The matching key, or None when nothing matches.
    """
    if not item_name:
        return None

    lowered = item_name.lower()

    for food in FOODKEEPER_DATA:
        if lowered == food.lower():
            return food

    for food in FOODKEEPER_DATA:
        if food.lower() in lowered:
            return food

    for food in FOODKEEPER_DATA:
        if lowered in food.lower():
            return food

    return None


def get_expiration_info(
    item_name: str, category: str | None = None
) -> FoodExpirationInfo | None:
    """Return the storage range for an item, or None if it is unknown."""
    food = find_best_food_match(item_name)
    if food is None:
        return None
    return FOODKEEPER_DATA[food]


def calculate_expiration_date(
    item_name: str,
    category: str | None = None,
    default_days: int = 30,
    today: date | None = None,
) -> date:
    """Estimate an expiration date from the knowledge base.

    Args:
        item_name: Free-text item name.
        category: Optional category hint, used for logging only.
        default_days: Days from today used when the item is unknown.
        today: Reference date, defaults to ``date.today()``.

    Returns:
        ``today`` plus the midpoint of the matched storage range, or
        ``today + default_days`` when there is no match.
    """
    today = today or date.today()
    info = get_expiration_info(item_name, category)

    if info is None:
        logger.debug(
            "FoodKeeper: no match for %r (%s), using default %d days",
            item_name, category or "no category", default_days,
        )
        return today + timedelta(days=default_days)

    days = info.average_days
    logger.debug(
        "FoodKeeper: %r -> %s-%s months, using %d days",
        item_name, info.min_months, info.max_months, days,
    )
    return today + timedelta(days=days)
