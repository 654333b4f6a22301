"""
Pytest configuration and shared fixtures for loanfunnel tests.

Browser fixtures follow the funnel's run configuration: viewport, default
action timeout and expect() timeout all come from FunnelConfig.
"""

import re
from typing import Generator

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, expect, sync_playwright

from loanfunnel.borrower import Borrower
from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext
from loanfunnel.log import configure_logging, get_logger

from funnel_stub import STUB_BASE_URL, FunnelStub

logger = get_logger(__name__)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "browser: runs a real browser against the funnel stub")
    config.addinivalue_line("markers", "live: drives the live site (set LOANFUNNEL_LIVE=1)")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def funnel_config() -> FunnelConfig:
    """Run configuration for browser tests, pointed at the local stub."""
    config = FunnelConfig(
        _env_file=None,
        base_url=STUB_BASE_URL,
        viewport_width=1920,
        viewport_height=1080,
        default_timeout_ms=15_000,
        assertion_timeout_ms=5_000,
    )
    configure_logging(config)
    return config


@pytest.fixture(scope="session")
def playwright_browser(funnel_config):
    """Session-scoped browser for faster tests."""
    with sync_playwright() as p:
        try:
            browser = getattr(p, funnel_config.browser_name).launch(headless=funnel_config.headless)
        except PlaywrightError as e:
            pytest.skip(f"Playwright browser not available: {e}")
        yield browser
        browser.close()


def _open_page(browser, config: FunnelConfig):
    context = browser.new_context(viewport=config.viewport, ignore_https_errors=True)
    if config.trace_dir:
        context.tracing.start(screenshots=True, snapshots=True)
    page = context.new_page()
    page.set_default_timeout(config.default_timeout_ms)
    page.set_default_navigation_timeout(config.default_timeout_ms)
    expect.set_options(timeout=config.assertion_timeout_ms)
    return context, page


def _close_page(request, context, config: FunnelConfig, session: SessionContext):
    rep = getattr(request.node, "rep_call", None)
    failed = rep is not None and rep.failed
    if failed:
        logger.warning(
            "test_failed",
            test=request.node.nodeid,
            summary=session.summary(),
            failed_steps=[s.to_dict() for s in session.failed_steps],
            errors=session.errors[:5],
        )
    if config.trace_dir:
        if failed:
            config.trace_dir.mkdir(parents=True, exist_ok=True)
            name = re.sub(r"[^\w.-]+", "_", request.node.nodeid)
            context.tracing.stop(path=str(config.trace_dir / f"{name}.zip"))
        else:
            context.tracing.stop()
    context.close()


@pytest.fixture
def session_context() -> SessionContext:
    return SessionContext()


@pytest.fixture
def browser_page(request, playwright_browser, funnel_config, session_context) -> Generator[Page, None, None]:
    """Fresh page in its own browser context for each test."""
    context, page = _open_page(playwright_browser, funnel_config)
    session_context.attach_to_page(page)
    yield page
    _close_page(request, context, funnel_config, session_context)


@pytest.fixture
def funnel_stub(browser_page) -> FunnelStub:
    """Stub funnel with the phone-number field."""
    return FunnelStub(with_phone=True).install(browser_page)


@pytest.fixture
def funnel_stub_without_phone(browser_page) -> FunnelStub:
    """Stub funnel for the layout variant that does not ask for a phone number."""
    return FunnelStub(with_phone=False).install(browser_page)


@pytest.fixture
def borrower() -> Borrower:
    """The reference applicant used across funnel scenarios."""
    return Borrower(
        first_name="Nodald",
        last_name="Rumpt",
        address="123 Main Street",
        city="San Francisco",
        state="CA",
        zip="94105",
        date_of_birth="08/25/1993",
        phone_number="4144144144",
        individual_annual_income="120000",
        additional_annual_income="0",
    )

