from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from storedesk.core.normalize.models import Order


@dataclass(slots=True)
class OrderStats:
    total_orders: int
    total_revenue: float
    pending_orders: int
    completed_orders: int


def summarize_orders(orders: Iterable[Order]) -> OrderStats:
    total_orders = 0
    total_revenue = 0.0
    pending_orders = 0
    completed_orders = 0

    for order in orders:
        total_orders += 1
        total_revenue += order.total_amount
        if order.status == "pending":
            pending_orders += 1
        elif order.status == "completed":
            completed_orders += 1

    return OrderStats(
        total_orders=total_orders,
        total_revenue=round(total_revenue, 2),
        pending_orders=pending_orders,
        completed_orders=completed_orders,
    )
