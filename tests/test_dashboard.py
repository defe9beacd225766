from __future__ import annotations

from storedesk.core.orders import OrderFilter
from storedesk.services import OrdersDashboard, ProductsDashboard
from tests.fakes import FakeAdminSource


def test_refresh_loads_orders_and_addon_catalog(fake_source, test_logger) -> None:  # noqa: ANN001
    dashboard = OrdersDashboard(source=fake_source, logger=test_logger)

    assert dashboard.refresh() is True
    assert dashboard.refresh_addons() is True
    assert [order.id for order in dashboard.orders] == ["ord-1", "ord-2", "ord-3"]
    assert dashboard.addon_catalog["gift"].title == "Gift message"


def test_failed_refresh_keeps_previous_state(fake_source, test_logger) -> None:  # noqa: ANN001
    dashboard = OrdersDashboard(source=fake_source, logger=test_logger)
    dashboard.refresh()
    dashboard.refresh_addons()

    fake_source.fail_fetch = True

    assert dashboard.refresh() is False
    assert dashboard.refresh_addons() is False
    assert len(dashboard.orders) == 3
    assert "gift" in dashboard.addon_catalog


def test_view_filters_and_summarises(fake_source, test_logger) -> None:  # noqa: ANN001
    dashboard = OrdersDashboard(source=fake_source, logger=test_logger)
    dashboard.refresh()

    view = dashboard.view(OrderFilter(status="completed"))

    assert [order.id for order in view.orders] == ["ord-2", "ord-3"]
    assert view.stats.completed_orders == 2
    assert view.stats.total_revenue == 100.0
    assert view.filter_active is True

    empty = dashboard.view(OrderFilter(query="zzz"))
    assert empty.orders == []
    assert empty.empty_message == "No orders match your filters"
    assert dashboard.view().filter_active is False


def test_delete_order_mutates_only_on_success(fake_source, test_logger) -> None:  # noqa: ANN001
    dashboard = OrdersDashboard(source=fake_source, logger=test_logger)
    dashboard.refresh()

    fake_source.fail_delete = True
    assert dashboard.delete_order("ord-1") is False
    assert len(dashboard.orders) == 3

    fake_source.fail_delete = False
    assert dashboard.delete_order("ord-1") is True
    assert [order.id for order in dashboard.orders] == ["ord-2", "ord-3"]
    assert fake_source.deleted == ["ord-1"]


def _product_source() -> FakeAdminSource:
    return FakeAdminSource(
        products=[
            {"product": {"id": "p1", "name": "Mug", "slug": "mug", "productType": "simple", "price": "9.5"}},
            {
                "product": {
                    "id": "p2",
                    "name": "Gift Box",
                    "slug": "Gift Box",
                    "productType": "group",
                    "price": "0",
                    "isActive": False,
                    "isFeatured": True,
                }
            },
            {
                "product": {
                    "id": "p3",
                    "name": "Tee",
                    "slug": "tee",
                    "productType": "variable",
                    "price": "10",
                    "variants": [{"price": 12}, {"price": "18.5"}],
                }
            },
        ]
    )


def test_product_rows(test_logger) -> None:  # noqa: ANN001
    dashboard = ProductsDashboard(source=_product_source(), logger=test_logger)
    assert dashboard.refresh() is True

    rows = {row.id: row for row in dashboard.rows()}

    assert rows["p1"].price_label == "9.50"
    assert rows["p1"].type_label == "Simple"
    assert rows["p1"].slug_valid is True
    assert rows["p2"].price_label == "From addons"
    assert rows["p2"].status_label == "Inactive"
    assert rows["p2"].featured_label == "Featured"
    assert rows["p2"].slug_valid is False
    assert rows["p3"].price_label == "12.00 - 18.50"
    assert rows["p3"].type_label == "Variable"


def test_delete_product_mutates_only_on_success(test_logger) -> None:  # noqa: ANN001
    source = _product_source()
    dashboard = ProductsDashboard(source=source, logger=test_logger)
    dashboard.refresh()

    source.fail_delete = True
    assert dashboard.delete_product("p1") is False
    assert len(dashboard.products) == 3

    source.fail_delete = False
    assert dashboard.delete_product("p1") is True
    assert [product.id for product in dashboard.products] == ["p2", "p3"]


def test_products_refresh_failure(test_logger) -> None:  # noqa: ANN001
    source = _product_source()
    source.fail_fetch = True
    dashboard = ProductsDashboard(source=source, logger=test_logger)

    assert dashboard.refresh() is False
    assert dashboard.rows() == []
