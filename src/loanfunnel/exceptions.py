"""
Failures raised by funnel steps.

Three kinds of failure can end a funnel traversal:
- timeouts: a wait condition never became true (StepTimeoutError)
- interaction errors: an action hit an element in an invalid state (InteractionError)
- assertion failures: an explicit check did not hold (plain AssertionError,
  as raised by Playwright's expect)

None of them is retried. The Playwright error that caused a failure is kept as
``__cause__``.
"""

from typing import Optional


class FunnelError(Exception):
    """Base class for failures inside a funnel step."""

    def __init__(self, message: str, page: Optional[str] = None, step: Optional[str] = None):
        self.page = page
        self.step = step
        if page and step:
            message = f"{page}.{step}: {message}"
        super().__init__(message)


class StepTimeoutError(FunnelError):
    """A navigation, element or autocomplete wait ran out of time."""


class InteractionError(FunnelError):
    """An action was attempted on an element that could not take it."""
