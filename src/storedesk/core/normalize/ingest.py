from __future__ import annotations

from typing import Any, Iterable, Mapping

from storedesk.core.pricing import sanitize_price

from .addons import load_addons
from .fields import optional_str, parse_datetime, to_bool, to_optional_amount, to_quantity
from .models import Order, OrderItem, Product, ProductVariant

# Amounts arrive from the database layer as numbers or as decimal strings.
# They are coerced here once; invalid values become 0.
ORDER_AMOUNT_FIELDS = {
    "subtotal": "subtotal",
    "taxAmount": "tax_amount",
    "shippingAmount": "shipping_amount",
    "discountAmount": "discount_amount",
    "totalAmount": "total_amount",
}


def normalize_order_item(payload: Mapping[str, Any]) -> OrderItem:
    quantity = to_quantity(payload.get("quantity"))
    price = sanitize_price(payload.get("price"))
    total_price_raw = payload.get("totalPrice")
    total_price = sanitize_price(total_price_raw) if total_price_raw is not None else round(price * quantity, 2)

    return OrderItem(
        id=optional_str(payload.get("id")),
        product_name=optional_str(payload.get("productName")) or "",
        quantity=quantity,
        price=price,
        total_price=total_price,
        variant_title=optional_str(payload.get("variantTitle")),
        sku=optional_str(payload.get("sku")),
        product_image=optional_str(payload.get("productImage")),
        addons=load_addons(payload.get("addons")),
    )


def normalize_order(payload: Mapping[str, Any]) -> Order:
    user = payload.get("user") if isinstance(payload.get("user"), Mapping) else {}
    amounts = {attr: sanitize_price(payload.get(key)) for key, attr in ORDER_AMOUNT_FIELDS.items()}
    raw_items = payload.get("items") or []

    return Order(
        id=optional_str(payload.get("id")) or "",
        order_number=optional_str(payload.get("orderNumber")) or "",
        email=optional_str(payload.get("email")) or optional_str(user.get("email")) or "",
        status=(optional_str(payload.get("status")) or "").lower(),
        payment_status=(optional_str(payload.get("paymentStatus")) or "").lower(),
        created_at=parse_datetime(payload.get("createdAt")),
        updated_at=parse_datetime(payload.get("updatedAt")),
        phone=optional_str(payload.get("phone")),
        fulfillment_status=optional_str(payload.get("fulfillmentStatus")),
        currency=optional_str(payload.get("currency")),
        shipping_first_name=optional_str(payload.get("shippingFirstName")),
        shipping_last_name=optional_str(payload.get("shippingLastName")),
        shipping_address1=optional_str(payload.get("shippingAddress1")),
        shipping_city=optional_str(payload.get("shippingCity")),
        shipping_state=optional_str(payload.get("shippingState")),
        shipping_country=optional_str(payload.get("shippingCountry")),
        customer_name=optional_str(user.get("name")),
        items=[normalize_order_item(item) for item in raw_items if isinstance(item, Mapping)],
        **amounts,
    )


def normalize_orders(payloads: Iterable[Mapping[str, Any]]) -> list[Order]:
    return [normalize_order(payload) for payload in payloads if isinstance(payload, Mapping)]


def normalize_variant(payload: Mapping[str, Any]) -> ProductVariant:
    attributes = payload.get("attributes")
    return ProductVariant(
        price=sanitize_price(payload.get("price")),
        compare_price=to_optional_amount(payload.get("comparePrice")),
        attributes={str(k): str(v) for k, v in attributes.items()} if isinstance(attributes, Mapping) else {},
    )


def normalize_product(payload: Mapping[str, Any]) -> Product:
    # Listing rows come joined as {"product": {...}, ...}; single lookups are flat.
    data = payload.get("product") if isinstance(payload.get("product"), Mapping) else payload
    raw_variants = data.get("variants") or payload.get("variants") or []
    product_type = (optional_str(data.get("productType")) or "simple").lower()

    return Product(
        id=optional_str(data.get("id")) or "",
        name=optional_str(data.get("name")) or "",
        slug=optional_str(data.get("slug")),
        product_type=product_type,
        price=sanitize_price(data.get("price")),
        compare_price=to_optional_amount(data.get("comparePrice")),
        cost_price=to_optional_amount(data.get("costPrice")),
        is_active=to_bool(data.get("isActive", True)),
        is_featured=to_bool(data.get("isFeatured", False)),
        variants=[normalize_variant(variant) for variant in raw_variants if isinstance(variant, Mapping)],
    )


def normalize_products(payloads: Iterable[Mapping[str, Any]]) -> list[Product]:
    return [normalize_product(payload) for payload in payloads if isinstance(payload, Mapping)]
