from .dashboard import OrdersDashboard, OrdersView, ProductRow, ProductsDashboard
from .doctor import run_doctor_checks
from .exporter import build_export_rows, export_orders, render_orders_csv

__all__ = [
    "OrdersDashboard",
    "OrdersView",
    "ProductRow",
    "ProductsDashboard",
    "build_export_rows",
    "export_orders",
    "render_orders_csv",
    "run_doctor_checks",
]
