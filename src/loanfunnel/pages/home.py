"""Funnel entry point: the landing page."""

from typing import Optional

from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext
from loanfunnel.pages.basic_info import BasicInfoPage
from loanfunnel.pages.lifecycle import PageLifecycle


class HomePage:
    """Landing page with the loan amount / purpose form."""

    TITLE = "Upgrade - Personal Loans, Cards and Rewards Checking | Home"

    SELECTORS = {
        "desired_amount": 'input[name="desiredAmount"]',
        "loan_purpose": 'select[name="loan-purpose"]',
        "get_started": 'button[type="submit"]',
    }

    def __init__(self, page, config: FunnelConfig, context: Optional[SessionContext] = None):
        self.page = page
        self.context = context
        self.lifecycle = PageLifecycle(page, config, "HomePage", context)

    def locator(self, name: str):
        """Fresh locator for a logical element name."""
        return self.page.locator(self.SELECTORS[name])

    def goto(self) -> None:
        self.lifecycle.goto("/")
        self.wait_for_page_load()

    def wait_for_page_load(self) -> None:
        self.lifecycle.wait_for_page_load()

    def enter_amount_and_get_started(self, amount: str, loan_purpose: str) -> BasicInfoPage:
        """
        Fill the desired amount, pick a loan purpose and submit.

        ``loan_purpose`` is matched against the select's option values and
        labels; an unknown purpose fails the step.
        """
        with self.lifecycle.step("enter_amount_and_get_started"):
            self.locator("desired_amount").fill(amount)
            self.locator("loan_purpose").select_option(loan_purpose)
            self.locator("get_started").click()

        next_page = BasicInfoPage(self.page, self.lifecycle.config, self.context)
        next_page.wait_for_page_load()
        return next_page
