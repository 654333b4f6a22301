"""
Assertion primitives for funnel pages.

Thin wrappers over Playwright's ``expect`` with millisecond timeouts. Each one
raises AssertionError when the condition does not hold in time.
"""

import re
from typing import List, Optional

from playwright.sync_api import expect


def expect_title(page, expected: str, timeout: Optional[float] = None) -> None:
    """Assert the document title equals ``expected``."""
    expect(page).to_have_title(expected, timeout=timeout)


def expect_url_contains(page, fragment: str, timeout: Optional[float] = None) -> None:
    """Assert the current URL contains ``fragment``."""
    expect(page).to_have_url(re.compile(re.escape(fragment)), timeout=timeout)


def expect_value(locator, value: str, timeout: Optional[float] = None) -> None:
    """Assert an input element holds ``value``."""
    expect(locator).to_have_value(value, timeout=timeout)


def expect_visible(locator, timeout: Optional[float] = None) -> None:
    expect(locator).to_be_visible(timeout=timeout)


def expect_hidden(locator, timeout: Optional[float] = None) -> None:
    expect(locator).to_be_hidden(timeout=timeout)


class AssertionContext:
    """
    Context manager for batching soft assertions.

    Usage:
        with AssertionContext() as check:
            check.value(page.locator("#city"), "San Francisco")
            check.value(page.locator("#state"), "CA")

        # Every check runs; failures are reported together on exit
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout
        self.failures: List[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None and self.failures:
            raise AssertionError(
                f"{len(self.failures)} assertion(s) failed:\n" +
                "\n".join(f"  - {f}" for f in self.failures)
            )
        return False

    def title(self, page, expected: str):
        try:
            expect_title(page, expected, self.timeout)
        except AssertionError as e:
            self.failures.append(str(e))

    def url_contains(self, page, fragment: str):
        try:
            expect_url_contains(page, fragment, self.timeout)
        except AssertionError as e:
            self.failures.append(str(e))

    def value(self, locator, value: str):
        try:
            expect_value(locator, value, self.timeout)
        except AssertionError as e:
            self.failures.append(str(e))

    def visible(self, locator):
        try:
            expect_visible(locator, self.timeout)
        except AssertionError as e:
            self.failures.append(str(e))
