from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from storedesk.config import Settings
from tests.fakes import FakeAdminSource


@pytest.fixture()
def settings(tmp_path: Path, monkeypatch) -> Settings:  # noqa: ANN001
    root = tmp_path / "project"
    root.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("STOREDESK_HOME", str(root))
    s = Settings.load(base_dir=root)
    s.ensure_directories()
    return s


@pytest.fixture()
def test_logger() -> logging.Logger:
    logger = logging.getLogger("storedesk-test")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)
    return logger


@pytest.fixture()
def order_payloads() -> list[dict[str, Any]]:
    return [
        {
            "id": "ord-1",
            "orderNumber": "1001",
            "email": "alice@example.com",
            "phone": "+1 555 0100",
            "status": "pending",
            "paymentStatus": "pending",
            "subtotal": "40.00",
            "taxAmount": "4.00",
            "shippingAmount": "6.00",
            "discountAmount": "0",
            "totalAmount": "50.00",
            "currency": "USD",
            "shippingFirstName": "Alice",
            "shippingLastName": "Martin",
            "shippingAddress1": "1 Main St",
            "shippingCity": "Springfield",
            "shippingCountry": "US",
            "createdAt": "2024-03-01T10:00:00Z",
            "items": [
                {
                    "id": "item-1",
                    "productName": "Ceramic Mug",
                    "variantTitle": "Blue",
                    "sku": "MUG-BLU",
                    "quantity": 2,
                    "price": "20.00",
                    "totalPrice": "40.00",
                    "addons": '[{"addonId": "gift", "price": "2.50", "quantity": 1}]',
                }
            ],
        },
        {
            "id": "ord-2",
            "orderNumber": "1002",
            "email": "bob@example.com",
            "status": "completed",
            "paymentStatus": "paid",
            "subtotal": 120,
            "taxAmount": 0,
            "shippingAmount": 0,
            "discountAmount": 20,
            "totalAmount": 100,
            "createdAt": "2024-03-05T12:30:00Z",
            "user": {"id": "u-2", "name": "Bob Stone", "email": "bob@example.com"},
            "items": [
                {
                    "id": "item-2",
                    "productName": "Linen Apron",
                    "sku": "APR-01",
                    "quantity": 1,
                    "price": 100,
                    "totalPrice": 100,
                    "addons": [
                        {"addonId": "wrap", "addonTitle": "Gift wrap", "price": 5, "quantity": 2},
                        {"addonId": "card", "price": 1},
                    ],
                }
            ],
        },
        {
            "id": "ord-3",
            "orderNumber": "1003",
            "email": "carol@example.com",
            "status": "completed",
            "paymentStatus": "refunded",
            "totalAmount": None,
            "createdAt": "2024-03-10T08:15:00Z",
            "shippingFirstName": "Carol",
            "items": [],
        },
    ]


@pytest.fixture()
def addon_payloads() -> list[dict[str, Any]]:
    return [
        {"id": "gift", "title": "Gift message", "price": "2.50"},
        {"id": "card", "title": "Greeting card", "price": "1.00"},
    ]


@pytest.fixture()
def fake_source(order_payloads, addon_payloads) -> FakeAdminSource:  # noqa: ANN001
    return FakeAdminSource(orders=order_payloads, addons=addon_payloads)
