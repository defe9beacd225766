from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Sequence

# Leading numeric prefix, the same thing a loose float parse accepts: "12.5kg" -> 12.5
NUMBER_PREFIX_PATTERN = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(slots=True)
class PriceData:
    price: float
    compare_price: float | None = None
    cost_price: float | None = None


@dataclass(slots=True)
class PriceDisplay:
    price: str
    original_price: str | None
    discount_percentage: int
    profit_margin: int
    is_on_sale: bool
    savings: str | None


@dataclass(slots=True)
class PriceRange:
    min: float
    max: float
    min_formatted: str
    max_formatted: str
    range: str
    has_range: bool


@dataclass(slots=True)
class BulkRule:
    min_qty: int
    discount_percent: float


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_price(amount: float) -> str:
    """Two decimal digits, no currency symbol."""
    return f"{amount:.2f}"


def format_money(value: Any) -> str:
    """Format a raw amount coming from the API; anything unusable renders as 0.00."""
    return format_price(sanitize_price(value))


def calculate_discount_percentage(price: float, compare_price: float | None) -> int:
    if not compare_price or compare_price <= price:
        return 0
    return _round_half_up(((compare_price - price) / compare_price) * 100)


def calculate_profit_margin(price: float, cost_price: float | None) -> int:
    if not cost_price or cost_price <= 0 or price <= 0:
        return 0
    return _round_half_up(((price - cost_price) / price) * 100)


def get_price_display(price_data: PriceData) -> PriceDisplay:
    price = price_data.price
    compare_price = price_data.compare_price
    cost_price = price_data.cost_price

    is_on_sale = bool(compare_price) and compare_price > price
    return PriceDisplay(
        price=format_price(price),
        original_price=format_price(compare_price) if compare_price else None,
        discount_percentage=calculate_discount_percentage(price, compare_price) if compare_price else 0,
        profit_margin=calculate_profit_margin(price, cost_price) if cost_price else 0,
        is_on_sale=is_on_sale,
        savings=format_price(compare_price - price) if is_on_sale else None,
    )


def calculate_price_range(variants: Iterable[PriceData]) -> PriceRange:
    prices = [variant.price for variant in variants]
    if not prices:
        zero = format_price(0)
        return PriceRange(
            min=0,
            max=0,
            min_formatted=zero,
            max_formatted=zero,
            range=zero,
            has_range=False,
        )

    low = min(prices)
    high = max(prices)
    has_range = low != high
    return PriceRange(
        min=low,
        max=high,
        min_formatted=format_price(low),
        max_formatted=format_price(high),
        range=f"{format_price(low)} - {format_price(high)}" if has_range else format_price(low),
        has_range=has_range,
    )


def is_valid_price(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    try:
        return math.isfinite(value) and value >= 0
    except OverflowError:
        return False


def sanitize_price(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        try:
            parsed = float(value)
        except (OverflowError, ValueError):
            return 0.0
    else:
        match = NUMBER_PREFIX_PATTERN.match(str(value))
        if match is None:
            return 0.0
        try:
            parsed = float(match.group(1))
        except ValueError:
            return 0.0
    return parsed if is_valid_price(parsed) else 0.0


def calculate_bulk_price(base_price: float, quantity: int, bulk_rules: Sequence[BulkRule]) -> float:
    applicable_discount = 0.0
    for rule in sorted(bulk_rules, key=lambda item: item.min_qty, reverse=True):
        if quantity >= rule.min_qty:
            applicable_discount = rule.discount_percent
            break
    return base_price * (1 - applicable_discount / 100)
