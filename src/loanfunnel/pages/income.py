"""Funnel step 3: income details. Last modeled step."""

from typing import Optional

from loanfunnel.borrower import Borrower
from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext
from loanfunnel.pages.lifecycle import PageLifecycle


class IncomePage:
    """Personal information 1 - income."""

    TITLE = "Income information | Upgrade"

    SELECTORS = {
        "individual_annual_income": 'input[data-auto="borrowerIncome"]',
        "additional_annual_income": 'input[data-auto="borrowerAdditionalIncome"]',
        "continue_button": 'button[data-auto="continuePersonalInfo"]',
    }

    def __init__(self, page, config: FunnelConfig, context: Optional[SessionContext] = None):
        self.page = page
        self.lifecycle = PageLifecycle(page, config, "IncomePage", context)

    def locator(self, name: str):
        """Fresh locator for a logical element name."""
        return self.page.locator(self.SELECTORS[name])

    def wait_for_page_load(self) -> None:
        self.lifecycle.wait_for_page_load(ready=self.locator("individual_annual_income"))

    def enter_income_details(self, borrower: Borrower) -> None:
        """
        Fill both income fields and submit.

        Returns once the browser has left the income step and the next
        document reached DOMContentLoaded.
        """
        config = self.lifecycle.config
        with self.lifecycle.step("enter_income_details"):
            self.locator("individual_annual_income").fill(borrower.individual_annual_income)
            self.locator("additional_annual_income").fill(borrower.additional_annual_income)

            income_url = self.page.url
            self.locator("continue_button").click()
            self.page.wait_for_url(
                lambda url: url != income_url,
                wait_until="domcontentloaded",
                timeout=config.default_timeout_ms,
            )
