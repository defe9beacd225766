from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable

from storedesk.core.normalize.models import ALL_STATUSES, Order


@dataclass(slots=True)
class OrderFilter:
    query: str = ""
    status: str = ALL_STATUSES
    payment_status: str = ALL_STATUSES
    start_date: datetime | None = None
    end_date: datetime | None = None

    @property
    def is_active(self) -> bool:
        return bool(
            self.query
            or self.status != ALL_STATUSES
            or self.payment_status != ALL_STATUSES
            or self.start_date
            or self.end_date
        )


def _as_aware(value: datetime) -> datetime:
    # Order timestamps are normalized to aware datetimes; naive bounds are read as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _contains(value: str | None, term: str) -> bool:
    return bool(value) and term in value.lower()


def matches_query(order: Order, query: str) -> bool:
    term = query.lower()
    if (
        _contains(order.order_number, term)
        or _contains(order.email, term)
        or _contains(order.shipping_first_name, term)
        or _contains(order.shipping_last_name, term)
    ):
        return True
    return any(_contains(item.product_name, term) or _contains(item.sku, term) for item in order.items)


def filter_orders(orders: Iterable[Order], order_filter: OrderFilter) -> list[Order]:
    filtered = list(orders)

    if order_filter.query:
        filtered = [order for order in filtered if matches_query(order, order_filter.query)]

    if order_filter.status != ALL_STATUSES:
        filtered = [order for order in filtered if order.status == order_filter.status]

    if order_filter.payment_status != ALL_STATUSES:
        filtered = [order for order in filtered if order.payment_status == order_filter.payment_status]

    if order_filter.start_date is not None:
        start = _as_aware(order_filter.start_date)
        filtered = [order for order in filtered if order.created_at is not None and order.created_at >= start]

    if order_filter.end_date is not None:
        end = _as_aware(order_filter.end_date)
        filtered = [order for order in filtered if order.created_at is not None and order.created_at <= end]

    return filtered
