from __future__ import annotations

import csv
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from storedesk.config import DEFAULT_CURRENCY
from storedesk.core.normalize import AddonCatalogEntry, Order, OrderItem, resolve_addon_title
from storedesk.core.pricing import format_price

CSV_HEADERS = [
    "Order Number",
    "Customer Name",
    "Email",
    "Phone",
    "Status",
    "Payment Status",
    "Subtotal",
    "Tax Amount",
    "Shipping Amount",
    "Discount Amount",
    "Total Amount",
    "Currency",
    "Shipping Address",
    "Order Date",
    "Items Count",
    "Items Detail",
]
SUPPORTED_FORMATS = {"csv", "xlsx"}


def describe_item(item: OrderItem, catalog: Mapping[str, AddonCatalogEntry]) -> str:
    text = item.product_name
    if item.variant_title:
        text += f" ({item.variant_title})"
    text += f" x{item.quantity}"
    if item.addons:
        titles = [resolve_addon_title(addon, catalog, index) for index, addon in enumerate(item.addons)]
        text += f" (Addons: {', '.join(titles)})"
    return text


def build_export_rows(
    orders: Iterable[Order],
    catalog: Mapping[str, AddonCatalogEntry] | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> list[list[str]]:
    catalog = catalog or {}
    rows: list[list[str]] = []
    for order in orders:
        rows.append(
            [
                order.order_number,
                order.display_customer_name,
                order.email,
                order.phone or "",
                order.status,
                order.payment_status,
                format_price(order.subtotal),
                format_price(order.tax_amount),
                format_price(order.shipping_amount),
                format_price(order.discount_amount),
                format_price(order.total_amount),
                order.currency or default_currency,
                order.shipping_address,
                order.created_at.strftime("%Y-%m-%d %H:%M:%S") if order.created_at else "",
                str(len(order.items)),
                " | ".join(describe_item(item, catalog) for item in order.items),
            ]
        )
    return rows


def _to_frame(rows: list[list[str]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=CSV_HEADERS, dtype=str)


def render_orders_csv(
    orders: Iterable[Order],
    catalog: Mapping[str, AddonCatalogEntry] | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> str:
    rows = build_export_rows(orders, catalog, default_currency)
    lines = [",".join(CSV_HEADERS)]
    if rows:
        body = _to_frame(rows).to_csv(
            index=False,
            header=False,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )
        lines.append(body.rstrip("\n"))
    return "\n".join(lines)


def export_orders(
    orders: Iterable[Order],
    catalog: Mapping[str, AddonCatalogEntry] | None,
    formats: list[str],
    out_dir: Path,
    *,
    export_date: date | None = None,
    default_currency: str = DEFAULT_CURRENCY,
) -> list[Path]:
    unknown = [item for item in formats if item not in SUPPORTED_FORMATS]
    if unknown:
        raise ValueError(f"Unsupported export formats: {unknown}")

    out_dir.mkdir(parents=True, exist_ok=True)
    orders_list = list(orders)
    stamp = (export_date or datetime.now(timezone.utc).date()).isoformat()

    created_files: list[Path] = []
    if "csv" in formats:
        csv_path = (out_dir / f"orders_export_{stamp}.csv").resolve()
        content = render_orders_csv(orders_list, catalog, default_currency)
        csv_path.write_text(content, encoding="utf-8", newline="")
        created_files.append(csv_path)

    if "xlsx" in formats:
        xlsx_path = (out_dir / f"orders_export_{stamp}.xlsx").resolve()
        df = _to_frame(build_export_rows(orders_list, catalog, default_currency))
        with pd.ExcelWriter(xlsx_path, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name="orders")
        created_files.append(xlsx_path)

    return created_files
