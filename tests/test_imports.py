"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_cart_schema(self):
        from eventcart.schemas.cart_schema import Cart, CartService, CartVenue, PriceModel
        assert PriceModel.DAY == "day"
        assert Cart is not None

    def test_import_checkout_schema(self):
        from eventcart.schemas.checkout_schema import CheckoutItem, CheckoutResponse
        reply = CheckoutResponse.model_validate({"sessionId": "cs_1"})
        assert reply.session_id == "cs_1"
        assert CheckoutItem(id="a", name="b", price=1).quantity == 1


class TestCartImports:
    def test_package_reexports(self):
        from eventcart.cart import (
            CartStore, Notice, NoticeCollector, NoticeVariant,
            format_service_date_summary, services_cost, total_cost, venue_cost,
        )
        assert NoticeVariant.DESTRUCTIVE == "destructive"
        assert total_cost(None) == 0

    def test_store_constructs_without_arguments(self):
        from eventcart.cart import CartStore
        store = CartStore()
        assert store.cart is None


class TestToolImports:
    def test_import_persistence(self):
        from eventcart.tools.persistence import JsonFileStorage, MemoryStorage, NullStorage
        assert MemoryStorage().get_item("x") is None

    def test_import_checkout(self):
        from eventcart.tools.checkout import CheckoutClient, CheckoutError, CheckoutFlow
        assert issubclass(CheckoutError, Exception)

    def test_import_catalog(self):
        from eventcart.tools.catalog import list_services, list_venues
        assert len(list_venues()) > 0
        assert len(list_services()) > 0


class TestConsoleDemoImports:
    def test_console_session_scenarios(self):
        from console_demo import ConsoleSession
        assert {"booking", "external", "switch"} <= set(ConsoleSession.SCENARIOS)
