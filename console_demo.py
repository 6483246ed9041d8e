"""
Offline console demo: walks a booking cart through venue, services and checkout.

Uses the real cart store, pricing, persistence and checkout flow. The
payment endpoint is replaced by an in-process fake, so no network calls
are made and no API keys are needed.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario external
    python console_demo.py --scenario switch
"""

import argparse
import shlex
import uuid
from typing import Optional

import httpx

from eventcart.cart.notifications import Notice, NoticeVariant
from eventcart.cart.pricing import (
    cart_summary,
    format_display_price,
    format_service_date_summary,
    venue_price_breakdown,
)
from eventcart.cart.state import CartStore
from eventcart.config import settings
from eventcart.logging_context import set_session_id
from eventcart.tools.catalog import list_services, list_venues, to_cart_service, to_cart_venue
from eventcart.tools.checkout import CheckoutClient, CheckoutFlow
from eventcart.tools.persistence import MemoryStorage, create_storage

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

HELP_TEXT = """Commands:
  venues | services                     list the catalog
  venue <id> <date> [<date> ...]        attach a catalog venue
  external "<name>" "<location>" <date> [<date> ...]
  service <id> [<day> ...]              add a service (days only for multi-day events)
  remove <id>                           remove a service
  dates <date> [<date> ...]             change the event dates
  show                                  print the cart
  checkout | confirm | clear | quit"""


def _fake_payment_endpoint(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"sessionId": f"cs_test_{uuid.uuid4().hex[:12]}"})


class ConsoleSession:
    """Drives one cart from the terminal."""

    def __init__(self, persist: bool = False) -> None:
        set_session_id(f"DEMO-{uuid.uuid4().hex[:6].upper()}")
        storage = create_storage("file") if persist else MemoryStorage()
        self.store = CartStore(storage=storage, notify=self.show_notice)
        self.checkout_client = CheckoutClient(
            client=httpx.Client(transport=httpx.MockTransport(_fake_payment_endpoint))
        )
        self.checkout = CheckoutFlow(
            self.store,
            self.checkout_client,
            notify=self.show_notice,
        )

    def show_notice(self, notice: Notice) -> None:
        colour = RED if notice.variant == NoticeVariant.DESTRUCTIVE else GREEN
        text = f"{notice.title}" + (f" - {notice.description}" if notice.description else "")
        print(f"{colour}{BOLD}[notice]{RESET} {colour}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    SCENARIOS: dict[str, list[str]] = {
        "booking": [
            "venue sunset-hall 2024-06-01 2024-06-02",
            "service moment-capturers 2024-06-01 2024-06-02",
            "service rhythm-revolution 2024-06-02",
            "service rhythm-revolution 2024-06-02",
            "show",
            "checkout",
            "confirm",
            "show",
        ],
        "external": [
            'external "Grandma\'s Barn" "14 Orchard Lane" 2024-09-14',
            "service ethereal-blooms",
            'external "Lakeside Pavilion" "2 Shore Road" 2024-09-14',
            "show",
            "venue rooftop-garden 2024-09-14",
            "show",
        ],
        "switch": [
            "service gourmet-gatherings",
            "venue sunset-hall 2024-06-01",
            "service gourmet-gatherings",
            "venue sunset-hall 2024-06-01 2024-06-02 2024-06-03",
            "show",
            "venue harbour-loft 2024-06-01",
            "remove gourmet-gatherings",
            "show",
            "clear",
            "checkout",
        ],
    }

    MAX_INPUT_LENGTH = 500

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  EVENT CART - Scenario: {scenario}{RESET}")
        print(f"{BOLD}  App: {settings.app_name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

        for step in steps:
            print(f"\n{BLUE}> {RESET}{step}")
            self._process_input(step)

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        self.close()

    def run(self) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  EVENT CART - Console Demo{RESET}")
        print(f"{BOLD}  Type 'help' for commands, 'quit' to exit{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

        while True:
            user_input = input(f"\n{BLUE}> {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                break
            if len(user_input) > self.MAX_INPUT_LENGTH:
                print(f"{YELLOW}Input too long.{RESET}")
                continue
            self._process_input(user_input)

        self.close()

    def close(self) -> None:
        self.store.close()
        self.checkout_client.close()

    def _process_input(self, text: str) -> None:
        try:
            command, *args = shlex.split(text)
        except ValueError:
            print(f"{YELLOW}Could not parse that line (unbalanced quotes?).{RESET}")
            return

        command = command.lower()
        if command == "help":
            print(HELP_TEXT)
        elif command == "venues":
            for v in list_venues():
                print(f"  {v['id']:<18} {v['name']} ({v['city']})")
        elif command == "services":
            for s in list_services():
                print(f"  {s['id']:<18} {s['name']} [{s['category']}]")
        elif command == "venue" and len(args) >= 2:
            self._attach_venue(args[0], args[1:])
        elif command == "external" and len(args) >= 3:
            self.store.attach_external_venue(args[0], args[1], args[2:])
        elif command == "service" and args:
            self._add_service(args[0], args[1:])
        elif command == "remove" and args:
            self.store.remove_service(args[0])
        elif command == "dates" and args:
            self.store.update_dates(args)
        elif command == "show":
            self._show_cart()
        elif command == "checkout":
            session_id = self.checkout.start()
            if session_id:
                self.system_log(f"Redirecting to payment (session {session_id})")
        elif command == "confirm":
            self.checkout.confirm()
        elif command == "clear":
            self.store.clear()
        else:
            print(f"{YELLOW}Unknown command. Type 'help'.{RESET}")

    def _attach_venue(self, venue_id: str, dates: list[str]) -> None:
        venue = to_cart_venue(venue_id)
        if venue is None:
            print(f"{YELLOW}No venue '{venue_id}' in the catalog.{RESET}")
            return
        self.store.attach_catalog_venue(venue, dates, self.store.event_time_slot or "Full day")

    def _add_service(self, service_id: str, days: list[str]) -> None:
        service = to_cart_service(service_id, days, self.store.selected_dates)
        if service is None:
            print(f"{YELLOW}No service '{service_id}' in the catalog.{RESET}")
            return
        self.store.add_service(service)

    def _show_cart(self) -> None:
        cart = self.store.cart
        if cart is None:
            self.system_log("Cart is empty")
            return

        venue = cart.venue
        print(f"  {BOLD}{venue.name}{RESET}  {format_display_price(venue.price.base_price, venue.price.model)}")
        print(f"  {DIM}{venue.location.address} | {', '.join(cart.selected_dates)} | {cart.time_slot}{RESET}")
        for service in cart.services:
            print(
                f"   + {service.name}: {format_display_price(service.total_calculated_price)}"
                f"  {DIM}{format_service_date_summary(service, cart)}{RESET}"
            )

        totals = cart_summary(cart)
        breakdown = venue_price_breakdown(cart)
        print(f"  Venue:    {format_display_price(totals['venue'])} {DIM}{breakdown}{RESET}")
        print(f"  Services: {format_display_price(totals['services'])}")
        print(f"  {BOLD}Total:    {format_display_price(totals['total'])}{RESET}")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Offline event cart demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    parser.add_argument(
        "--persist",
        action="store_true",
        help="Keep the cart in the JSON storage file between runs",
    )
    args = parser.parse_args(argv)

    session = ConsoleSession(persist=args.persist)
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
