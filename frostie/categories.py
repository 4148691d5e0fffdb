"""Freezer item categories and keyword-based category guessing."""

from __future__ import annotations

CATEGORIES: tuple[str, ...] = (
    "Meat & Poultry",
    "Seafood",
    "Fruits & Vegetables",
    "Prepared Meals",
    "Ready-to-Eat",
    "Bakery & Bread",
    "Dairy & Alternatives",
    "Soups & Broths",
    "Herbs & Seasonings",
    "Other",
)

DEFAULT_CATEGORY = "Other"

# Ordered: the first keyword found in the name decides the category
_CATEGORY_KEYWORDS: list[tuple[str, str]] = [
    # Meat & Poultry
    ("meat", "Meat & Poultry"),
    ("chicken", "Meat & Poultry"),
    ("beef", "Meat & Poultry"),
    ("pork", "Meat & Poultry"),
    ("turkey", "Meat & Poultry"),
    ("lamb", "Meat & Poultry"),
    ("steak", "Meat & Poultry"),
    ("ground", "Meat & Poultry"),
    ("burger", "Meat & Poultry"),
    ("sausage", "Meat & Poultry"),
    ("bacon", "Meat & Poultry"),
    # Seafood
    ("fish", "Seafood"),
    ("shrimp", "Seafood"),
    ("seafood", "Seafood"),
    ("scallop", "Seafood"),
    ("salmon", "Seafood"),
    ("tuna", "Seafood"),
    ("cod", "Seafood"),
    ("tilapia", "Seafood"),
    ("crab", "Seafood"),
    ("lobster", "Seafood"),
    # Fruits & Vegetables
    ("vegetable", "Fruits & Vegetables"),
    ("veg", "Fruits & Vegetables"),
    ("fruit", "Fruits & Vegetables"),
    ("berry", "Fruits & Vegetables"),
    ("berries", "Fruits & Vegetables"),
    ("broccoli", "Fruits & Vegetables"),
    ("carrot", "Fruits & Vegetables"),
    ("spinach", "Fruits & Vegetables"),
    ("banana", "Fruits & Vegetables"),
    ("apple", "Fruits & Vegetables"),
    ("peas", "Fruits & Vegetables"),
    ("corn", "Fruits & Vegetables"),
    # Prepared Meals
    ("leftover", "Prepared Meals"),
    ("meal prep", "Prepared Meals"),
    ("casserole", "Prepared Meals"),
    ("stew", "Prepared Meals"),
    ("prepared", "Prepared Meals"),
    # Ready-to-Eat
    ("dinner", "Ready-to-Eat"),
    ("pizza", "Ready-to-Eat"),
    ("breakfast", "Ready-to-Eat"),
    ("meal", "Ready-to-Eat"),
    ("nugget", "Ready-to-Eat"),
    ("fries", "Ready-to-Eat"),
    # Bakery & Bread
    ("bread", "Bakery & Bread"),
    ("dough", "Bakery & Bread"),
    ("pastry", "Bakery & Bread"),
    ("bagel", "Bakery & Bread"),
    ("muffin", "Bakery & Bread"),
    ("roll", "Bakery & Bread"),
    ("bun", "Bakery & Bread"),
    # Dairy & Alternatives
    ("ice cream", "Dairy & Alternatives"),
    ("butter", "Dairy & Alternatives"),
    ("cheese", "Dairy & Alternatives"),
    ("milk", "Dairy & Alternatives"),
    ("yogurt", "Dairy & Alternatives"),
    ("cream", "Dairy & Alternatives"),
    # Soups & Broths
    ("soup", "Soups & Broths"),
    ("broth", "Soups & Broths"),
    ("stock", "Soups & Broths"),
    ("chili", "Soups & Broths"),
    # Herbs & Seasonings
    ("herb", "Herbs & Seasonings"),
    ("spice", "Herbs & Seasonings"),
    ("season", "Herbs & Seasonings"),
    ("basil", "Herbs & Seasonings"),
    ("mint", "Herbs & Seasonings"),
    ("parsley", "Herbs & Seasonings"),
    ("thyme", "Herbs & Seasonings"),
    ("oregano", "Herbs & Seasonings"),
]


def get_categories(include_all_option: bool = False) -> list[str]:
    """Return the category labels, optionally prefixed with "All Categories"."""
    if include_all_option:
        return ["All Categories", *CATEGORIES]
    return list(CATEGORIES)


def is_valid_category(category: str) -> bool:
    return category in CATEGORIES


def guess_category(name: str) -> str:
    """Guess a category from an item name by substring keyword matching."""
    lowered = name.lower()
    for keyword, category in _CATEGORY_KEYWORDS:
        if keyword in lowered:
            return category
    return DEFAULT_CATEGORY
