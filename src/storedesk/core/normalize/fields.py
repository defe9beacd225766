from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from dateutil import parser as dt_parser

from storedesk.core.pricing import sanitize_price


def optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_quantity(value: Any, default: int = 1) -> int:
    quantity = sanitize_price(value)
    if quantity <= 0:
        return default
    return int(quantity) or default


def to_optional_amount(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return sanitize_price(value)


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def parse_datetime(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = dt_parser.parse(str(value))
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
