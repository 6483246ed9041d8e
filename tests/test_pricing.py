"""Tests for price aggregation and display formatting."""

import pytest

from eventcart.cart.pricing import (
    calculate_service_total,
    cart_summary,
    format_display_price,
    format_service_date_summary,
    services_cost,
    total_cost,
    venue_cost,
    venue_price_breakdown,
)
from eventcart.schemas.cart_schema import CartService, PriceModel
from tests.conftest import make_cart, make_service, make_venue


class TestVenueCost:
    def test_no_cart_is_zero(self):
        assert venue_cost(None) == 0

    def test_multiplies_by_day_count(self):
        cart = make_cart(dates=["2024-06-01", "2024-06-02"])
        assert venue_cost(cart) == 2000

    def test_empty_dates_floor_to_one_day(self):
        assert venue_cost(make_cart(dates=[])) == venue_cost(make_cart(dates=["2024-06-01"]))
        assert venue_cost(make_cart(dates=[])) == 1000

    @pytest.mark.parametrize("model", [PriceModel.HOUR, PriceModel.WEEK])
    def test_hour_and_week_models_also_multiply(self, model):
        cart = make_cart(
            dates=["2024-06-01", "2024-06-02", "2024-06-03"],
            venue=make_venue(base_price=100, model=model),
        )
        assert venue_cost(cart) == 300

    def test_external_venue_costs_nothing(self):
        cart = make_cart(venue=make_venue("external-1", base_price=0))
        assert venue_cost(cart) == 0


class TestServicesCost:
    def test_no_cart_is_zero(self):
        assert services_cost(None) == 0

    def test_no_services_is_zero(self):
        assert services_cost(make_cart()) == 0

    def test_sums_precomputed_totals(self):
        cart = make_cart(services=[make_service("s1", total=200), make_service("s2", total=300)])
        assert services_cost(cart) == 500

    def test_missing_total_counts_as_zero(self):
        service = CartService.model_validate({
            "id": "s9", "name": "Lights", "price": 50, "priceModel": "day",
        })
        cart = make_cart(services=[service, make_service("s1", total=200)])
        assert services_cost(cart) == 200


class TestTotalCost:
    def test_scenario_venue_plus_services(self):
        cart = make_cart(services=[make_service("s1", total=200), make_service("s2", total=300)])
        assert venue_cost(cart) == 2000
        assert services_cost(cart) == 500
        assert total_cost(cart) == 2500

    @pytest.mark.parametrize("dates,totals", [
        ([], []),
        (["2024-06-01"], [10]),
        (["2024-06-01", "2024-06-02", "2024-06-03"], [99.5, 0, 12]),
    ])
    def test_total_is_sum_of_parts(self, dates, totals):
        services = [make_service(f"s{i}", total=t) for i, t in enumerate(totals)]
        cart = make_cart(dates=dates, services=services)
        assert total_cost(cart) == pytest.approx(venue_cost(cart) + services_cost(cart))

    def test_no_cart_total_is_zero(self):
        assert total_cost(None) == 0

    def test_cart_summary(self):
        cart = make_cart(services=[make_service(total=250)])
        assert cart_summary(cart) == {"venue": 2000, "services": 250, "total": 2250}


class TestCalculateServiceTotal:
    def test_day_model_multi_day_charges_per_selected_day(self):
        total = calculate_service_total(
            300, PriceModel.DAY, ["2024-06-01", "2024-06-02"], ["2024-06-01", "2024-06-02", "2024-06-03"]
        )
        assert total == 600

    def test_day_model_single_day_event_charges_once(self):
        assert calculate_service_total(300, PriceModel.DAY, [], ["2024-06-01"]) == 300

    def test_hour_model_is_not_multiplied(self):
        total = calculate_service_total(95, PriceModel.HOUR, ["2024-06-01", "2024-06-02"], ["2024-06-01", "2024-06-02"])
        assert total == 95


class TestServiceDateSummary:
    def test_whole_single_day_event(self):
        cart = make_cart(dates=["2024-06-01"])
        assert format_service_date_summary(make_service(selected_days=[]), cart) == "Event day (2024-06-01)"

    def test_all_event_days(self):
        dates = ["2024-06-01", "2024-06-02", "2024-06-03"]
        cart = make_cart(dates=dates)
        assert format_service_date_summary(make_service(selected_days=dates), cart) == "All event days (3)"

    def test_same_days_different_order_is_not_all_days(self):
        cart = make_cart(dates=["2024-06-01", "2024-06-02"])
        service = make_service(selected_days=["2024-06-02", "2024-06-01"])
        assert format_service_date_summary(service, cart) == "2 days: 2024-06-02, 2024-06-01"

    def test_single_day(self):
        cart = make_cart(dates=["2024-06-01", "2024-06-02"])
        service = make_service(selected_days=["2024-06-02"])
        assert format_service_date_summary(service, cart) == "1 day (2024-06-02)"

    def test_single_day_matching_single_day_event_is_all_days(self):
        cart = make_cart(dates=["2024-06-01"])
        service = make_service(selected_days=["2024-06-01"])
        assert format_service_date_summary(service, cart) == "All event days (1)"

    def test_two_or_three_days_are_listed(self):
        cart = make_cart(dates=["2024-06-01", "2024-06-02", "2024-06-03", "2024-06-04"])
        service = make_service(selected_days=["2024-06-03", "2024-06-01", "2024-06-04"])
        assert format_service_date_summary(service, cart) == "3 days: 2024-06-03, 2024-06-01, 2024-06-04"

    def test_four_or_more_days_show_sorted_range(self):
        dates = [f"2024-06-0{d}" for d in range(1, 7)]
        cart = make_cart(dates=dates)
        service = make_service(selected_days=["2024-06-05", "2024-06-02", "2024-06-04", "2024-06-03"])
        assert format_service_date_summary(service, cart) == "4 days (2024-06-02 to 2024-06-05)"

    def test_fallback_for_whole_multi_day_event(self):
        cart = make_cart(dates=["2024-06-01", "2024-06-02"])
        assert format_service_date_summary(make_service(selected_days=[]), cart) == "Specific dates selected"


class TestDisplayFormatting:
    def test_day_suffix(self):
        assert format_display_price(500, PriceModel.DAY) == "$500 / event day"

    def test_hour_suffix(self):
        assert format_display_price(800, PriceModel.HOUR) == "$800 / hour*"

    def test_week_suffix(self):
        assert format_display_price(4200, PriceModel.WEEK) == "$4,200 / week"

    def test_no_model(self):
        assert format_display_price(99.5) == "$99.50"

    def test_missing_amount(self):
        assert format_display_price(None) == "N/A"

    def test_breakdown_for_day_venue(self):
        assert venue_price_breakdown(make_cart()) == "($1,000 × 2 days)"

    def test_breakdown_singular_day(self):
        assert venue_price_breakdown(make_cart(dates=["2024-06-01"])) == "($1,000 × 1 day)"

    def test_no_breakdown_for_hour_venue(self):
        cart = make_cart(venue=make_venue(model=PriceModel.HOUR))
        assert venue_price_breakdown(cart) == ""

    def test_no_breakdown_without_cart(self):
        assert venue_price_breakdown(None) == ""
