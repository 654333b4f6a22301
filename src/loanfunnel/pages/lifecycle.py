"""
Navigation, wait and assertion behaviour shared by every funnel page.

Pages hold a PageLifecycle instead of inheriting from a base page. The
lifecycle borrows the Playwright Page for the length of a test; it never
closes it.
"""

import time
from contextlib import contextmanager
from typing import Iterator, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from loanfunnel import assertions
from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext, StepRecord
from loanfunnel.exceptions import FunnelError, InteractionError, StepTimeoutError
from loanfunnel.log import get_logger

LOAD_STATE = "domcontentloaded"

logger = get_logger(__name__)


class PageLifecycle:
    """
    Shared lifecycle operations for one funnel page.

    Usage:
        lifecycle = PageLifecycle(page, config, owner="HomePage")
        lifecycle.goto("/")
        lifecycle.verify_page_title("Upgrade - Personal Loans, Cards and Rewards Checking | Home")
    """

    def __init__(
        self,
        page,
        config: FunnelConfig,
        owner: str,
        context: Optional[SessionContext] = None,
    ):
        self.page = page
        self.config = config
        self.owner = owner
        self.context = context
        self.log = logger.bind(page=owner)

    def goto(self, path: str = "/") -> None:
        """Navigate to ``path`` under the base URL and wait for DOMContentLoaded."""
        url = self.config.url_for(path)
        with self.step("goto"):
            self.log.debug("navigating", url=url)
            self.page.goto(url, wait_until=LOAD_STATE, timeout=self.config.default_timeout_ms)

    def wait_for_page_load(self, ready=None) -> None:
        """
        Wait for DOMContentLoaded, then for ``ready`` to be visible if given.

        The readiness locator covers transitions where the click returns
        before the browser has started the next navigation.
        """
        with self.step("wait_for_page_load"):
            self.page.wait_for_load_state(LOAD_STATE, timeout=self.config.default_timeout_ms)
            if ready is not None:
                ready.wait_for(state="visible", timeout=self.config.default_timeout_ms)

    def verify_page_title(self, expected: str, timeout: Optional[float] = None) -> None:
        assertions.expect_title(self.page, expected, self._assertion_timeout(timeout))

    def get_current_url(self) -> str:
        return self.page.url

    def verify_url_contains(self, fragment: str, timeout: Optional[float] = None) -> None:
        assertions.expect_url_contains(self.page, fragment, self._assertion_timeout(timeout))

    def verify_value(self, locator, value: str, timeout: Optional[float] = None) -> None:
        assertions.expect_value(locator, value, self._assertion_timeout(timeout))

    def _assertion_timeout(self, timeout: Optional[float]) -> float:
        return self.config.assertion_timeout_ms if timeout is None else timeout

    @contextmanager
    def step(self, name: str) -> Iterator[None]:
        """
        Run one funnel step: log it, record it, and classify its failure.

        A failure is recorded and logged once, by the innermost step it
        came from; enclosing steps re-raise it untouched.

        Playwright timeouts become StepTimeoutError, other Playwright errors
        become InteractionError, and AssertionError passes through unchanged.
        """
        start = time.time()
        log = self.log.bind(step=name)
        log.info("step_started")
        try:
            yield
        except FunnelError:
            # Raised by a nested step; already recorded and logged there
            raise
        except AssertionError as e:
            if getattr(e, "funnel_step", None) is None:
                e.funnel_step = f"{self.owner}.{name}"
                self._record(name, start, passed=False, reason=str(e))
                log.warning("step_failed", kind="assertion", error=str(e))
            raise
        except PlaywrightTimeoutError as e:
            self._record(name, start, passed=False, reason=str(e))
            log.warning("step_failed", kind="timeout", error=str(e))
            raise StepTimeoutError(str(e), page=self.owner, step=name) from e
        except PlaywrightError as e:
            self._record(name, start, passed=False, reason=str(e))
            log.warning("step_failed", kind="interaction", error=str(e))
            raise InteractionError(str(e), page=self.owner, step=name) from e
        else:
            duration_ms = self._record(name, start, passed=True)
            log.info("step_completed", duration_ms=round(duration_ms, 1))

    def _record(self, name: str, start: float, passed: bool, reason: Optional[str] = None) -> float:
        duration_ms = (time.time() - start) * 1000
        if self.context is not None:
            self.context.add_step(StepRecord(
                page=self.owner,
                step=name,
                passed=passed,
                reason=reason,
                duration_ms=duration_ms,
            ))
        return duration_ms
