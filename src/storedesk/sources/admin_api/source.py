from __future__ import annotations

from typing import Any

import requests

from storedesk.config import Settings


class AdminApiSource:
    """Thin client over the backend's admin endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_sec: float = 15.0,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_settings(cls, settings: Settings) -> AdminApiSource:
        return cls(settings.api_url, token=settings.api_token, timeout_sec=settings.http_timeout_sec)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def _get_list(self, path: str) -> list[dict[str, Any]]:
        response = self.session.get(self._url(path), timeout=self.timeout_sec)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError(f"Expected a JSON array from /api/{path}, got {type(payload).__name__}")
        return payload

    def _delete(self, path: str) -> None:
        response = self.session.delete(self._url(path), timeout=self.timeout_sec)
        response.raise_for_status()

    def fetch_orders(self) -> list[dict[str, Any]]:
        return self._get_list("orders")

    def fetch_addons(self) -> list[dict[str, Any]]:
        return self._get_list("addons")

    def fetch_products(self) -> list[dict[str, Any]]:
        return self._get_list("products")

    def delete_order(self, order_id: str) -> None:
        self._delete(f"orders/{order_id}")

    def delete_product(self, product_id: str) -> None:
        self._delete(f"products/{product_id}")

    def check_connection(self) -> None:
        response = self.session.get(self._url("orders"), timeout=self.timeout_sec)
        response.raise_for_status()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> AdminApiSource:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
