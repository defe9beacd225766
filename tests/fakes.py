from __future__ import annotations

from typing import Any

import requests


class FakeAdminSource:
    """In-memory stand-in for AdminApiSource."""

    def __init__(
        self,
        orders: list[dict[str, Any]] | None = None,
        addons: list[dict[str, Any]] | None = None,
        products: list[dict[str, Any]] | None = None,
    ):
        self.orders = orders or []
        self.addons = addons or []
        self.products = products or []
        self.fail_fetch = False
        self.fail_delete = False
        self.deleted: list[str] = []
        self.closed = False

    def _maybe_fail(self, flag: bool) -> None:
        if flag:
            raise requests.ConnectionError("backend unavailable")

    def fetch_orders(self) -> list[dict[str, Any]]:
        self._maybe_fail(self.fail_fetch)
        return list(self.orders)

    def fetch_addons(self) -> list[dict[str, Any]]:
        self._maybe_fail(self.fail_fetch)
        return list(self.addons)

    def fetch_products(self) -> list[dict[str, Any]]:
        self._maybe_fail(self.fail_fetch)
        return list(self.products)

    def delete_order(self, order_id: str) -> None:
        self._maybe_fail(self.fail_delete)
        self.deleted.append(order_id)

    def delete_product(self, product_id: str) -> None:
        self._maybe_fail(self.fail_delete)
        self.deleted.append(product_id)

    def check_connection(self) -> None:
        self._maybe_fail(self.fail_fetch)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeAdminSource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
