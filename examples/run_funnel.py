#!/usr/bin/env python3
"""
Example: walk the loan funnel once against BASE_URL.

Usage:
    BASE_URL=https://www.upgrade.com/ python examples/run_funnel.py [amount] [purpose]
"""

import sys

from playwright.sync_api import sync_playwright

from loanfunnel import (
    FieldPresence,
    SessionContext,
    get_config,
    get_random_borrower,
    start_funnel,
)
from loanfunnel.log import configure_logging


def main():
    amount = sys.argv[1] if len(sys.argv) > 1 else "9000"
    purpose = sys.argv[2] if len(sys.argv) > 2 else "Large Purchase"

    config = get_config()
    configure_logging(config)
    borrower = get_random_borrower()

    with sync_playwright() as p:
        browser = getattr(p, config.browser_name).launch(headless=config.headless)
        page = browser.new_page(viewport=config.viewport)
        page.set_default_timeout(config.default_timeout_ms)

        context = SessionContext()
        context.attach_to_page(page)

        home = start_funnel(page, config, context)
        basic_info = home.enter_amount_and_get_started(amount, purpose)

        if basic_info.phone_number_presence() is FieldPresence.ABSENT:
            print("This layout does not ask for a phone number")

        income = basic_info.enter_basic_information(borrower)
        income.enter_income_details(borrower)

        print(f"Finished at {page.url}")
        print(context.summary())

        browser.close()


if __name__ == "__main__":
    main()
