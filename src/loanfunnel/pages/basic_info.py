"""
Funnel step 2: basic personal information.

The street address field is backed by a third-party autocomplete. Suggestions
arrive asynchronously, so the suggestion listbox must be visible before an
option is picked; the city, state and zip fields are then checked against the
borrower as a correctness check on the autocomplete itself.
"""

from enum import Enum
from typing import Optional

from loanfunnel.borrower import Borrower
from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext
from loanfunnel.pages.income import IncomePage
from loanfunnel.pages.lifecycle import PageLifecycle


class FieldPresence(Enum):
    ABSENT = "absent"
    PRESENT = "present"


class BasicInfoPage:
    """Personal information 1 - basic info."""

    SELECTORS = {
        "first_name": 'input[name="borrowerFirstName"]',
        "last_name": 'input[name="borrowerLastName"]',
        "address": 'input[data-auto="borrowerStreet"]',
        "city": 'input[data-auto="borrowerCity"]',
        "state": 'input[data-auto="borrowerState"]',
        "zip": 'input[data-auto="borrowerZipCode"]',
        "date_of_birth": 'input[data-auto="borrowerDateOfBirth"]',
        "phone_number": 'input[data-auto="borrowerPhoneNumber-localSuffix"]',
        "continue_button": 'button[data-auto="continuePersonalInfo"]',
    }

    SUGGESTION_LIST_NAME = "options"

    def __init__(self, page, config: FunnelConfig, context: Optional[SessionContext] = None):
        self.page = page
        self.context = context
        self.lifecycle = PageLifecycle(page, config, "BasicInfoPage", context)

    def locator(self, name: str):
        """Fresh locator for a logical element name."""
        return self.page.locator(self.SELECTORS[name])

    def suggestion_list(self):
        return self.page.get_by_role("listbox", name=self.SUGGESTION_LIST_NAME)

    def suggestion(self, label: str):
        return self.page.get_by_role("option", name=label, exact=True)

    def wait_for_page_load(self) -> None:
        self.lifecycle.wait_for_page_load(ready=self.locator("first_name"))

    def phone_number_presence(self) -> FieldPresence:
        """Whether this variant of the page asks for a phone number.

        Checked once, without waiting: the field is part of the initial
        render when the layout includes it.
        """
        if self.locator("phone_number").is_visible():
            return FieldPresence.PRESENT
        return FieldPresence.ABSENT

    def enter_basic_information(self, borrower: Borrower) -> IncomePage:
        """Fill the personal details, continue, and return the loaded income page."""
        with self.lifecycle.step("enter_basic_information"):
            self.lifecycle.log.info("entering_borrower", borrower=borrower.display_name)
            self.locator("first_name").fill(borrower.first_name)
            self.locator("last_name").fill(borrower.last_name)
            self.enter_address(borrower)
            self.locator("date_of_birth").fill(borrower.date_of_birth)

            if self.phone_number_presence() is FieldPresence.PRESENT:
                phone = self.locator("phone_number")
                phone.click()
                phone.clear()
                # Masked input only reacts to key events
                phone.press_sequentially(borrower.phone_number)
            else:
                self.lifecycle.log.debug("phone_number_absent")

            self.locator("continue_button").click()

        next_page = IncomePage(self.page, self.lifecycle.config, self.context)
        next_page.wait_for_page_load()
        return next_page

    def enter_address(self, borrower: Borrower) -> None:
        """Type the street address and pick the matching autocomplete suggestion.

        Only an exact match on ``borrower.autocomplete_label`` is accepted;
        if the provider formats the address differently this times out.
        """
        with self.lifecycle.step("enter_address"):
            self.locator("address").fill(borrower.address)

            self.suggestion_list().wait_for(
                state="visible", timeout=self.lifecycle.config.default_timeout_ms
            )
            self.suggestion(borrower.autocomplete_label).click()

            self.lifecycle.verify_value(self.locator("city"), borrower.city)
            self.lifecycle.verify_value(self.locator("state"), borrower.state)
            self.lifecycle.verify_value(self.locator("zip"), borrower.zip)
