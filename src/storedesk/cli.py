from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

import typer
from dateutil import parser as dt_parser
from rich import print
from rich.table import Table

from storedesk.config import Settings
from storedesk.core.logging import configure_logging, get_logger
from storedesk.core.normalize import (
    ALL_STATUSES,
    ORDER_STATUSES,
    PAYMENT_STATUSES,
    addons_subtotal,
    resolve_addon_title,
)
from storedesk.core.orders import OrderFilter
from storedesk.core.pricing import format_price, generate_slug
from storedesk.services import OrdersDashboard, ProductsDashboard, export_orders, run_doctor_checks
from storedesk.services.exporter import SUPPORTED_FORMATS
from storedesk.sources.admin_api import AdminApiSource

app = typer.Typer(no_args_is_help=True, help="storedesk: orders and products admin console")

# Shown per order in the table before collapsing into "... and N more".
ITEMS_PREVIEW = 2


def _load_settings(base_dir: Path | None = None) -> Settings:
    settings = Settings.load(base_dir=base_dir)
    settings.ensure_directories()
    return settings


def _build_source(settings: Settings) -> AdminApiSource:
    return AdminApiSource.from_settings(settings)


def _start_run(settings: Settings, command: str) -> logging.LoggerAdapter:
    correlation_id = uuid.uuid4().hex
    configure_logging(settings.logs_dir, correlation_id=correlation_id, command=command)
    return get_logger(f"storedesk.{command}", correlation_id)


def _parse_date(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = dt_parser.parse(value)
    except (ValueError, OverflowError) as exc:
        raise typer.BadParameter(f"Invalid date: {value}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _build_filter(
    search: str,
    status: str,
    payment: str,
    start: str | None,
    end: str | None,
) -> OrderFilter:
    if status != ALL_STATUSES and status not in ORDER_STATUSES:
        raise typer.BadParameter(f"Invalid status: {status}")
    if payment != ALL_STATUSES and payment not in PAYMENT_STATUSES:
        raise typer.BadParameter(f"Invalid payment status: {payment}")
    return OrderFilter(
        query=search,
        status=status,
        payment_status=payment,
        start_date=_parse_date(start),
        end_date=_parse_date(end),
    )


SEARCH_OPTION = typer.Option("", "--search", "-s", help="Order number, email, customer, product or SKU")
STATUS_OPTION = typer.Option(ALL_STATUSES, help=f"Order status: {ALL_STATUSES}, {', '.join(ORDER_STATUSES)}")
PAYMENT_OPTION = typer.Option(ALL_STATUSES, help=f"Payment status: {ALL_STATUSES}, {', '.join(PAYMENT_STATUSES)}")
START_OPTION = typer.Option(None, help="Created on or after this date/time")
END_OPTION = typer.Option(None, help="Created on or before this date/time")


def _load_orders_dashboard(source: AdminApiSource, logger: logging.LoggerAdapter) -> OrdersDashboard:
    dashboard = OrdersDashboard(source=source, logger=logger)
    if not dashboard.refresh():
        print("[red]Failed to load orders[/red]")
        raise typer.Exit(1)
    dashboard.refresh_addons()
    return dashboard


@app.command("orders")
def orders_command(
    search: str = SEARCH_OPTION,
    status: str = STATUS_OPTION,
    payment: str = PAYMENT_OPTION,
    start: str | None = START_OPTION,
    end: str | None = END_OPTION,
    addons: bool = typer.Option(False, "--addons/--no-addons", help="Show addon breakdown per item"),
) -> None:
    order_filter = _build_filter(search, status, payment, start, end)
    settings = _load_settings()
    logger = _start_run(settings, "orders")
    with _build_source(settings) as source:
        dashboard = _load_orders_dashboard(source, logger)
    view = dashboard.view(order_filter)
    stats = view.stats

    print(
        f"Total Orders: [bold]{stats.total_orders}[/bold]  "
        f"Total Revenue: [bold]{format_price(stats.total_revenue)}[/bold]  "
        f"Pending: [bold]{stats.pending_orders}[/bold]  "
        f"Completed: [bold]{stats.completed_orders}[/bold]"
    )
    if not view.orders:
        print(f"[yellow]{view.empty_message}[/yellow]")
        return

    table = Table("Order", "Customer", "Items", "Total", "Status", "Payment", "Date")
    for order in view.orders:
        lines: list[str] = []
        for item in order.items[:ITEMS_PREVIEW]:
            variant = f" ({item.variant_title})" if item.variant_title else ""
            lines.append(f"{item.product_name}{variant} x{item.quantity}  {format_price(item.total_price)}")
            if addons and item.addons:
                for index, addon in enumerate(item.addons):
                    title = resolve_addon_title(addon, dashboard.addon_catalog, index)
                    lines.append(f"  • {title} (x{addon.quantity})  {format_price(addon.line_total)}")
                lines.append(f"  Addons subtotal: {format_price(addons_subtotal(item.addons))}")
            elif item.addons:
                lines.append(f"  {len(item.addons)} addon(s)")
        if len(order.items) > ITEMS_PREVIEW:
            lines.append(f"... and {len(order.items) - ITEMS_PREVIEW} more item(s)")

        total = format_price(order.total_amount)
        if order.discount_amount > 0:
            total += f"\n-{format_price(order.discount_amount)} discount"

        table.add_row(
            f"#{order.order_number}",
            f"{order.display_customer_name}\n{order.email}",
            "\n".join(lines) or "No items",
            total,
            order.status,
            order.payment_status,
            order.created_at.strftime("%Y-%m-%d %H:%M") if order.created_at else "",
        )
    print(table)


@app.command("export")
def export_command(
    search: str = SEARCH_OPTION,
    status: str = STATUS_OPTION,
    payment: str = PAYMENT_OPTION,
    start: str | None = START_OPTION,
    end: str | None = END_OPTION,
    format: str = typer.Option("csv", help="Comma separated formats: csv,xlsx"),
    out: Path | None = typer.Option(None, help="Export directory"),
) -> None:
    formats = [item.strip().lower() for item in format.split(",") if item.strip()]
    unknown = [item for item in formats if item not in SUPPORTED_FORMATS]
    if unknown or not formats:
        raise typer.BadParameter(f"Unsupported formats: {unknown or format}")
    order_filter = _build_filter(search, status, payment, start, end)

    settings = _load_settings()
    out_dir = (out or settings.exports_dir).resolve()
    logger = _start_run(settings, "export")
    with _build_source(settings) as source:
        dashboard = _load_orders_dashboard(source, logger)
    view = dashboard.view(order_filter)
    if not view.orders:
        print(f"[yellow]{view.empty_message}[/yellow], nothing to export")
        return

    try:
        files = export_orders(
            view.orders,
            dashboard.addon_catalog,
            formats,
            out_dir,
            default_currency=settings.default_currency,
        )
    except OSError as exc:
        logger.error("Error exporting orders: %s", exc)
        print("[red]Failed to export orders[/red]")
        raise typer.Exit(1) from exc

    print(f"[green]Exported {len(view.orders)} order(s)[/green]")
    for file_path in files:
        print(f"- {file_path}")


@app.command("delete-order")
def delete_order_command(
    order_id: str = typer.Argument(..., help="Order id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    if not yes and not typer.confirm(
        "Are you sure you want to delete this order? This action cannot be undone."
    ):
        raise typer.Abort()

    settings = _load_settings()
    logger = _start_run(settings, "delete-order")
    with _build_source(settings) as source:
        deleted = OrdersDashboard(source=source, logger=logger).delete_order(order_id)
    if not deleted:
        print("[red]Failed to delete order[/red]")
        raise typer.Exit(1)
    print(f"[green]Order deleted[/green]: {order_id}")


@app.command("products")
def products_command() -> None:
    settings = _load_settings()
    logger = _start_run(settings, "products")
    with _build_source(settings) as source:
        dashboard = ProductsDashboard(source=source, logger=logger)
        loaded = dashboard.refresh()
    if not loaded:
        print("[red]Failed to load products[/red]")
        raise typer.Exit(1)

    rows = dashboard.rows()
    if not rows:
        print("[yellow]No products found[/yellow]")
        return

    table = Table("Name", "Slug", "Type", "Price", "Status", "Featured")
    for row in rows:
        slug = row.slug or ""
        if row.slug and not row.slug_valid:
            slug += " [red](invalid)[/red]"
        table.add_row(row.name, slug, row.type_label, row.price_label, row.status_label, row.featured_label)
    print(table)


@app.command("delete-product")
def delete_product_command(
    product_id: str = typer.Argument(..., help="Product id"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    if not yes and not typer.confirm("Are you sure you want to delete this product?"):
        raise typer.Abort()

    settings = _load_settings()
    logger = _start_run(settings, "delete-product")
    with _build_source(settings) as source:
        deleted = ProductsDashboard(source=source, logger=logger).delete_product(product_id)
    if not deleted:
        print("[red]Failed to delete product[/red]")
        raise typer.Exit(1)
    print(f"[green]Product deleted[/green]: {product_id}")


@app.command("doctor")
def doctor_command() -> None:
    settings = _load_settings()
    with _build_source(settings) as source:
        checks = run_doctor_checks(settings, source)

    print("Doctor results:")
    for check in checks:
        status = check["status"].upper()
        print(f"- [{status}] {check['check']}: {check['detail']}")


@app.command("slug")
def slug_command(title: str = typer.Argument(..., help="Product or page title")) -> None:
    slug = generate_slug(title)
    if not slug:
        print("[yellow]Title produced an empty slug[/yellow]")
        raise typer.Exit(1)
    print(slug)


if __name__ == "__main__":
    app()
