"""
loanfunnel - page-object tests for a loan application funnel

Drives the funnel Home -> Basic info -> Income with Playwright. Every page
object owns the locators for its step, and each advance operation returns the
next page only after that page has loaded.

Quick Start:
    ```python
    from playwright.sync_api import sync_playwright
    from loanfunnel import FunnelConfig, SessionContext, get_random_borrower, start_funnel

    config = FunnelConfig()

    with sync_playwright() as p:
        browser = p.chromium.launch()
        page = browser.new_page(viewport=config.viewport)
        page.set_default_timeout(config.default_timeout_ms)

        context = SessionContext()
        context.attach_to_page(page)

        home = start_funnel(page, config, context)
        basic_info = home.enter_amount_and_get_started("9000", "Large Purchase")

        borrower = get_random_borrower()
        income = basic_info.enter_basic_information(borrower)
        income.enter_income_details(borrower)

        print(context.summary())
        browser.close()
    ```
"""

from .borrower import Borrower
from .config import FunnelConfig, get_config
from .context import (
    SessionContext,
    StepRecord,
    ConsoleLog,
    NetworkRequest,
    LogLevel,
)
from .data import (
    BorrowerFactory,
    get_random_borrower,
    format_date_of_birth,
    date_of_birth_for_age,
)
from .exceptions import FunnelError, StepTimeoutError, InteractionError
from .assertions import (
    AssertionContext,
    expect_title,
    expect_url_contains,
    expect_value,
    expect_visible,
    expect_hidden,
)
from .pages import (
    HomePage,
    BasicInfoPage,
    IncomePage,
    FieldPresence,
    PageLifecycle,
    NAVIGATION_GRAPH,
    start_funnel,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Pages
    "HomePage",
    "BasicInfoPage",
    "IncomePage",
    "FieldPresence",
    "PageLifecycle",
    "NAVIGATION_GRAPH",
    "start_funnel",
    # Data
    "Borrower",
    "BorrowerFactory",
    "get_random_borrower",
    "format_date_of_birth",
    "date_of_birth_for_age",
    # Config
    "FunnelConfig",
    "get_config",
    # Context
    "SessionContext",
    "StepRecord",
    "ConsoleLog",
    "NetworkRequest",
    "LogLevel",
    # Errors
    "FunnelError",
    "StepTimeoutError",
    "InteractionError",
    # Assertions
    "AssertionContext",
    "expect_title",
    "expect_url_contains",
    "expect_value",
    "expect_visible",
    "expect_hidden",
]
