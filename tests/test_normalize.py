from __future__ import annotations

from datetime import datetime, timezone

from storedesk.core.normalize import normalize_order, normalize_orders, normalize_product


def test_normalize_order_coerces_amounts_once(order_payloads) -> None:  # noqa: ANN001
    order = normalize_order(order_payloads[0])

    assert order.total_amount == 50.0
    assert order.subtotal == 40.0
    assert order.tax_amount == 4.0
    assert order.created_at == datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
    assert order.display_customer_name == "Alice Martin"
    assert order.shipping_address == "1 Main St, Springfield, US"
    item = order.items[0]
    assert item.product_name == "Ceramic Mug"
    assert item.total_price == 40.0
    assert item.addons[0].addon_id == "gift"


def test_normalize_order_falls_back_to_user_name_and_guest(order_payloads) -> None:  # noqa: ANN001
    orders = normalize_orders(order_payloads)

    assert orders[1].display_customer_name == "Bob Stone"
    # only a first name is not enough for the shipping name
    assert orders[2].display_customer_name == "Guest"
    assert orders[2].total_amount == 0.0


def test_normalize_order_tolerates_garbage() -> None:
    order = normalize_order(
        {
            "id": 9,
            "orderNumber": 2001,
            "status": "PENDING",
            "totalAmount": "not a number",
            "createdAt": "yesterday-ish",
            "items": [{"productName": "Pen", "price": "2", "quantity": "0"}, "junk"],
        }
    )

    assert order.id == "9"
    assert order.order_number == "2001"
    assert order.status == "pending"
    assert order.total_amount == 0.0
    assert order.created_at is None
    assert len(order.items) == 1
    assert order.items[0].quantity == 1
    assert order.items[0].total_price == 2.0


def test_normalize_order_zeroes_amounts_too_large_for_float() -> None:
    order = normalize_order(
        {
            "id": "big",
            "totalAmount": 10**400,
            "items": [{"productName": "Pen", "price": 10**400, "quantity": 10**400}],
        }
    )

    assert order.total_amount == 0.0
    assert order.items[0].price == 0.0
    assert order.items[0].quantity == 1


def test_offset_timestamps_are_converted_to_utc() -> None:
    order = normalize_order({"id": "x", "createdAt": "2024-01-15T11:30:00+02:00"})

    assert order.created_at == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
    assert order.created_at.utcoffset().total_seconds() == 0


def test_naive_timestamps_are_utc() -> None:
    order = normalize_order({"id": "x", "createdAt": "2024-01-15 09:30:00"})

    assert order.created_at == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


def test_normalize_product_unwraps_listing_rows() -> None:
    product = normalize_product(
        {
            "product": {
                "id": "p1",
                "name": "Tote",
                "slug": "tote",
                "productType": "variable",
                "price": "12.00",
                "comparePrice": "15",
                "isActive": True,
                "isFeatured": 0,
                "variants": [
                    {"price": "10", "attributes": {"color": "red"}},
                    {"price": 14.5, "comparePrice": None},
                ],
            }
        }
    )

    assert product.id == "p1"
    assert product.product_type == "variable"
    assert product.price == 12.0
    assert product.compare_price == 15.0
    assert product.cost_price is None
    assert product.is_featured is False
    assert [variant.price for variant in product.variants] == [10.0, 14.5]
    assert product.variants[0].attributes == {"color": "red"}
