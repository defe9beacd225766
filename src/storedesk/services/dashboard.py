from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from storedesk.core.normalize import (
    AddonCatalogEntry,
    Order,
    Product,
    index_addon_catalog,
    normalize_orders,
    normalize_products,
)
from storedesk.core.orders import OrderFilter, OrderStats, filter_orders, summarize_orders
from storedesk.core.pricing import PriceData, calculate_price_range, format_price, is_valid_slug
from storedesk.sources.admin_api import AdminApiSource

# Failures that leave the dashboard state as it was.
FETCH_ERRORS = (requests.RequestException, ValueError)

PRODUCT_TYPE_LABELS = {
    "simple": "Simple",
    "variable": "Variable",
    "group": "Group",
}


@dataclass(slots=True)
class OrdersView:
    orders: list[Order]
    stats: OrderStats
    filter_active: bool

    @property
    def empty_message(self) -> str:
        return "No orders match your filters" if self.filter_active else "No orders found"


@dataclass(slots=True)
class ProductRow:
    id: str
    name: str
    slug: str | None
    slug_valid: bool
    type_label: str
    price_label: str
    status_label: str
    featured_label: str


class OrdersDashboard:
    def __init__(self, source: AdminApiSource, logger: logging.Logger | logging.LoggerAdapter):
        self.source = source
        self.logger = logger
        self.orders: list[Order] = []
        self.addon_catalog: dict[str, AddonCatalogEntry] = {}

    def refresh(self) -> bool:
        try:
            payload = self.source.fetch_orders()
        except FETCH_ERRORS as exc:
            self.logger.error("Error fetching orders: %s", exc)
            return False

        self.orders = normalize_orders(payload)
        self.logger.info("Orders loaded: %s", len(self.orders))
        return True

    def refresh_addons(self) -> bool:
        try:
            payload = self.source.fetch_addons()
        except FETCH_ERRORS as exc:
            self.logger.warning("Failed to fetch addons: %s", exc)
            return False

        self.addon_catalog = index_addon_catalog(entry for entry in payload if isinstance(entry, dict))
        self.logger.info("Addon catalog loaded: %s", len(self.addon_catalog))
        return True

    def view(self, order_filter: OrderFilter | None = None) -> OrdersView:
        order_filter = order_filter or OrderFilter()
        filtered = filter_orders(self.orders, order_filter)
        return OrdersView(
            orders=filtered,
            stats=summarize_orders(filtered),
            filter_active=order_filter.is_active,
        )

    def delete_order(self, order_id: str) -> bool:
        try:
            self.source.delete_order(order_id)
        except requests.RequestException as exc:
            self.logger.error("Error deleting order %s: %s", order_id, exc)
            return False

        self.orders = [order for order in self.orders if order.id != order_id]
        self.logger.info("Order deleted: %s", order_id)
        return True


class ProductsDashboard:
    def __init__(self, source: AdminApiSource, logger: logging.Logger | logging.LoggerAdapter):
        self.source = source
        self.logger = logger
        self.products: list[Product] = []

    def refresh(self) -> bool:
        try:
            payload = self.source.fetch_products()
        except FETCH_ERRORS as exc:
            self.logger.error("Error fetching products: %s", exc)
            return False

        self.products = normalize_products(payload)
        self.logger.info("Products loaded: %s", len(self.products))
        return True

    def delete_product(self, product_id: str) -> bool:
        try:
            self.source.delete_product(product_id)
        except requests.RequestException as exc:
            self.logger.error("Error deleting product %s: %s", product_id, exc)
            return False

        self.products = [product for product in self.products if product.id != product_id]
        self.logger.info("Product deleted: %s", product_id)
        return True

    @staticmethod
    def price_label(product: Product) -> str:
        if product.product_type == "group" and product.price == 0:
            return "From addons"
        if product.product_type == "variable" and product.variants:
            variants = [PriceData(price=v.price, compare_price=v.compare_price) for v in product.variants]
            return calculate_price_range(variants).range
        return format_price(product.price)

    def rows(self) -> list[ProductRow]:
        return [
            ProductRow(
                id=product.id,
                name=product.name,
                slug=product.slug,
                slug_valid=is_valid_slug(product.slug),
                type_label=PRODUCT_TYPE_LABELS.get(product.product_type, "Simple"),
                price_label=self.price_label(product),
                status_label="Active" if product.is_active else "Inactive",
                featured_label="Featured" if product.is_featured else "Normal",
            )
            for product in self.products
        ]
