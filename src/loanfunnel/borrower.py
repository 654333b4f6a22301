"""
Borrower record consumed by the funnel pages.

A Borrower is immutable and validated on construction, so a page never has to
check the format of what it types into the form.
"""

import re
from dataclasses import dataclass, fields
from datetime import datetime

_ZIP_RE = re.compile(r"^\d{5}$")
_STATE_RE = re.compile(r"^[A-Z]{2}$")
_PHONE_RE = re.compile(r"^\d{10}$")
_DOB_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
_AMOUNT_RE = re.compile(r"^\d+$")

DATE_OF_BIRTH_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True)
class Borrower:
    """One simulated applicant."""

    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip: str
    date_of_birth: str  # MM/DD/YYYY
    phone_number: str  # digits only
    individual_annual_income: str
    additional_annual_income: str = "0"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{f.name} must be a non-empty string")

        if not _STATE_RE.match(self.state):
            raise ValueError(f"state must be a 2-letter code, got {self.state!r}")
        if not _ZIP_RE.match(self.zip):
            raise ValueError(f"zip must be 5 digits, got {self.zip!r}")
        if not _PHONE_RE.match(self.phone_number):
            raise ValueError(f"phone_number must be 10 digits, got {self.phone_number!r}")

        if not _DOB_RE.match(self.date_of_birth):
            raise ValueError(f"date_of_birth must be MM/DD/YYYY, got {self.date_of_birth!r}")
        try:
            datetime.strptime(self.date_of_birth, DATE_OF_BIRTH_FORMAT)
        except ValueError as e:
            raise ValueError(f"date_of_birth is not a calendar date: {self.date_of_birth!r}") from e

        for name in ("individual_annual_income", "additional_annual_income"):
            if not _AMOUNT_RE.match(getattr(self, name)):
                raise ValueError(f"{name} must be a non-negative whole number")

    @property
    def autocomplete_label(self) -> str:
        """Accessible name of the address suggestion matching this borrower."""
        return f"{self.address}, {self.city}, {self.state}, USA"

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
