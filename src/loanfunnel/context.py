"""
Session context capture for funnel runs.

Records what happened while a test drove the funnel:
- Console errors and warnings
- Failed network requests
- Uncaught page errors
- One record per funnel step (pass/fail, duration)

The pytest harness logs this when a test fails.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class LogLevel(Enum):
    DEBUG = "debug"
    INFO = "info"
    LOG = "log"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ConsoleLog:
    """A single console message."""
    level: LogLevel
    text: str
    timestamp: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None


@dataclass
class NetworkRequest:
    """A network request/response."""
    url: str
    method: str
    status: Optional[int] = None
    failed: bool = False
    failure_reason: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class StepRecord:
    """Outcome of one funnel step."""
    page: str
    step: str
    passed: bool
    reason: Optional[str] = None
    duration_ms: Optional[float] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "step": self.step,
            "result": "PASS" if self.passed else "FAIL",
            "reason": self.reason,
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class SessionContext:
    """
    Captures page activity and step outcomes for one browser session.

    Usage:
        context = SessionContext()
        context.attach_to_page(page)

        home = start_funnel(page, config, context)
        ...

        if context.has_critical_errors():
            print(context.get_critical_errors())
    """
    console_logs: List[ConsoleLog] = field(default_factory=list)
    network_requests: List[NetworkRequest] = field(default_factory=list)
    page_errors: List[str] = field(default_factory=list)
    steps: List[StepRecord] = field(default_factory=list)

    CRITICAL_PATTERNS = [
        "ReferenceError",
        "TypeError",
        "SyntaxError",
        "RangeError",
        "Hydration failed",
        "Minified React error",
        "ChunkLoadError",
        "is not defined",
        "Cannot read properties",
        "undefined is not an object",
    ]

    def attach_to_page(self, page):
        """Attach event listeners to capture page activity."""

        def on_console(msg):
            level_map = {
                "log": LogLevel.LOG,
                "info": LogLevel.INFO,
                "warning": LogLevel.WARNING,
                "warn": LogLevel.WARNING,
                "error": LogLevel.ERROR,
                "debug": LogLevel.DEBUG,
            }
            self.console_logs.append(ConsoleLog(
                level=level_map.get(msg.type, LogLevel.LOG),
                text=msg.text,
                source=msg.location.get("url") if msg.location else None,
            ))

        def on_page_error(error):
            self.page_errors.append(str(error))

        def on_response(response):
            if response.status >= 400:
                self.network_requests.append(NetworkRequest(
                    url=response.url,
                    method=response.request.method,
                    status=response.status,
                    failed=True,
                ))

        def on_request_failed(request):
            failure = request.failure
            self.network_requests.append(NetworkRequest(
                url=request.url,
                method=request.method,
                failed=True,
                failure_reason=failure or "Unknown",
            ))

        page.on("console", on_console)
        page.on("pageerror", on_page_error)
        page.on("response", on_response)
        page.on("requestfailed", on_request_failed)

    def add_step(self, record: StepRecord):
        self.steps.append(record)

    @property
    def errors(self) -> List[str]:
        """Console errors followed by uncaught page errors."""
        console_errors = [
            log.text for log in self.console_logs
            if log.level == LogLevel.ERROR
        ]
        return console_errors + self.page_errors

    @property
    def warnings(self) -> List[str]:
        return [
            log.text for log in self.console_logs
            if log.level == LogLevel.WARNING
        ]

    @property
    def network_errors(self) -> List[NetworkRequest]:
        return [req for req in self.network_requests if req.failed]

    @property
    def failed_steps(self) -> List[StepRecord]:
        return [s for s in self.steps if not s.passed]

    def has_critical_errors(self) -> bool:
        all_errors = " ".join(self.errors)
        return any(pattern in all_errors for pattern in self.CRITICAL_PATTERNS)

    def get_critical_errors(self) -> List[str]:
        return [
            error for error in self.errors
            if any(pattern in error for pattern in self.CRITICAL_PATTERNS)
        ]

    def summary(self) -> Dict[str, Any]:
        """Generate summary statistics."""
        return {
            "console_logs": len(self.console_logs),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
            "network_errors": len(self.network_errors),
            "page_errors": len(self.page_errors),
            "steps": len(self.steps),
            "steps_passed": sum(1 for s in self.steps if s.passed),
            "steps_failed": len(self.failed_steps),
            "has_critical_errors": self.has_critical_errors(),
        }

    def reset(self):
        """Clear all captured data."""
        self.console_logs.clear()
        self.network_requests.clear()
        self.page_errors.clear()
        self.steps.clear()
