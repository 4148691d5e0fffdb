"""Frostie freezer inventory: free-text item parsing and shelf-life estimates."""

from .categories import CATEGORIES, get_categories, guess_category
from .config import FrostieConfig, ParserConfig, load_config
from .foodkeeper import (
    FOODKEEPER_DATA,
    FoodExpirationInfo,
    calculate_expiration_date,
    find_best_food_match,
    get_expiration_info,
)
from .items import FreezerItem, create_freezer_item_from_parsed_text
from .parsing import parse_item_text
from .textparse import ParsedItemDetails, TextParser, create_parser
from .textparse.regex import RegexTextParser, regex_parse_item_text

__version__ = "0.1.0"

__all__ = [
    "CATEGORIES",
    "get_categories",
    "guess_category",
    "FOODKEEPER_DATA",
    "FoodExpirationInfo",
    "find_best_food_match",
    "get_expiration_info",
    "calculate_expiration_date",
    "ParsedItemDetails",
    "TextParser",
    "RegexTextParser",
    "create_parser",
    "parse_item_text",
    "regex_parse_item_text",
    "FreezerItem",
    "create_freezer_item_from_parsed_text",
    "FrostieConfig",
    "ParserConfig",
    "load_config",
]
