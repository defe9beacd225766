from .addons import (
    AddonPayloadError,
    addons_subtotal,
    index_addon_catalog,
    load_addons,
    parse_addon_payload,
    resolve_addon_title,
)
from .ingest import normalize_order, normalize_orders, normalize_product, normalize_products
from .models import (
    ALL_STATUSES,
    ORDER_STATUSES,
    PAYMENT_STATUSES,
    PRODUCT_TYPES,
    AddonCatalogEntry,
    AddonSelection,
    Order,
    OrderItem,
    Product,
    ProductVariant,
)

__all__ = [
    "ALL_STATUSES",
    "ORDER_STATUSES",
    "PAYMENT_STATUSES",
    "PRODUCT_TYPES",
    "AddonCatalogEntry",
    "AddonPayloadError",
    "AddonSelection",
    "Order",
    "OrderItem",
    "Product",
    "ProductVariant",
    "addons_subtotal",
    "index_addon_catalog",
    "load_addons",
    "normalize_order",
    "normalize_orders",
    "normalize_product",
    "normalize_products",
    "parse_addon_payload",
    "resolve_addon_title",
]
