from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

ORDER_STATUSES = ("pending", "confirmed", "processing", "completed", "cancelled")
PAYMENT_STATUSES = ("pending", "paid", "failed", "refunded")
PRODUCT_TYPES = ("simple", "variable", "group")
ALL_STATUSES = "all"


@dataclass(slots=True)
class AddonSelection:
    addon_id: str | None
    addon_title: str | None = None
    title: str | None = None
    name: str | None = None
    price: float = 0.0
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass(slots=True)
class AddonCatalogEntry:
    id: str
    title: str | None
    price: float = 0.0


@dataclass(slots=True)
class OrderItem:
    id: str | None
    product_name: str
    quantity: int = 1
    price: float = 0.0
    total_price: float = 0.0
    variant_title: str | None = None
    sku: str | None = None
    product_image: str | None = None
    addons: list[AddonSelection] = field(default_factory=list)


@dataclass(slots=True)
class Order:
    id: str
    order_number: str
    email: str
    status: str
    payment_status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    phone: str | None = None
    fulfillment_status: str | None = None
    subtotal: float = 0.0
    tax_amount: float = 0.0
    shipping_amount: float = 0.0
    discount_amount: float = 0.0
    total_amount: float = 0.0
    currency: str | None = None
    shipping_first_name: str | None = None
    shipping_last_name: str | None = None
    shipping_address1: str | None = None
    shipping_city: str | None = None
    shipping_state: str | None = None
    shipping_country: str | None = None
    customer_name: str | None = None
    items: list[OrderItem] = field(default_factory=list)

    @property
    def display_customer_name(self) -> str:
        if self.shipping_first_name and self.shipping_last_name:
            return f"{self.shipping_first_name} {self.shipping_last_name}"
        return self.customer_name or "Guest"

    @property
    def shipping_address(self) -> str:
        parts = [
            self.shipping_address1,
            self.shipping_city,
            self.shipping_state,
            self.shipping_country,
        ]
        return ", ".join(part for part in parts if part)


@dataclass(slots=True)
class ProductVariant:
    price: float
    compare_price: float | None = None
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Product:
    id: str
    name: str
    slug: str | None = None
    product_type: str = "simple"
    price: float = 0.0
    compare_price: float | None = None
    cost_price: float | None = None
    is_active: bool = True
    is_featured: bool = False
    variants: list[ProductVariant] = field(default_factory=list)
