from .attributes import generate_attribute_key, parse_attribute_key
from .prices import (
    BulkRule,
    PriceData,
    PriceDisplay,
    PriceRange,
    calculate_bulk_price,
    calculate_discount_percentage,
    calculate_price_range,
    calculate_profit_margin,
    format_money,
    format_price,
    get_price_display,
    is_valid_price,
    sanitize_price,
)
from .slugs import generate_slug, is_valid_slug

__all__ = [
    "BulkRule",
    "PriceData",
    "PriceDisplay",
    "PriceRange",
    "calculate_bulk_price",
    "calculate_discount_percentage",
    "calculate_price_range",
    "calculate_profit_margin",
    "format_money",
    "format_price",
    "generate_attribute_key",
    "generate_slug",
    "get_price_display",
    "is_valid_price",
    "is_valid_slug",
    "parse_attribute_key",
    "sanitize_price",
]
