from .filters import OrderFilter, filter_orders, matches_query
from .summary import OrderStats, summarize_orders

__all__ = ["OrderFilter", "OrderStats", "filter_orders", "matches_query", "summarize_orders"]
