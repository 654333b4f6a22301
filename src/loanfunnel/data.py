"""
Borrower test data using factory_boy and Faker.

The street address is fixed: the basic-info step validates it against a live
address autocomplete service, so it has to be a real, resolvable address.
Everything else is randomized.

Usage:
    borrower = get_random_borrower()
    borrower = get_random_borrower(first_name="Nodald", phone_number="4144144144")
    borrowers = BorrowerFactory.build_batch(5)
"""

from datetime import date
from typing import Optional

import factory
from faker import Faker

from loanfunnel.borrower import DATE_OF_BIRTH_FORMAT, Borrower

fake = Faker("en_US")

MIN_AGE = 21
MAX_AGE = 65

INDIVIDUAL_INCOME_RANGE = (48_000, 300_000)
ADDITIONAL_INCOME_RANGE = (0, 50_000)


def format_date_of_birth(value: date) -> str:
    """Format a date the way the date-of-birth field expects it (MM/DD/YYYY)."""
    return value.strftime(DATE_OF_BIRTH_FORMAT)


def date_of_birth_for_age(age: int, today: Optional[date] = None) -> date:
    """Date on which someone turns exactly ``age`` years old ``today``."""
    today = today or date.today()
    try:
        return today.replace(year=today.year - age)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - age, day=28)


def random_date_of_birth(min_age: int = MIN_AGE, max_age: int = MAX_AGE) -> str:
    return format_date_of_birth(fake.date_of_birth(minimum_age=min_age, maximum_age=max_age))


class BorrowerFactory(factory.Factory):
    """
    Factory for Borrower records.

    Usage:
        borrower = BorrowerFactory.build()
        borrower = BorrowerFactory.build(additional_annual_income="0")
    """

    class Meta:
        model = Borrower

    first_name = factory.LazyFunction(fake.first_name)
    last_name = factory.LazyFunction(fake.last_name)

    # Must resolve in the address autocomplete
    address = "123 Main Street"
    city = "San Francisco"
    state = "CA"
    zip = "94105"

    date_of_birth = factory.LazyFunction(random_date_of_birth)
    phone_number = factory.LazyFunction(lambda: fake.numerify("%#########"))
    individual_annual_income = factory.LazyFunction(
        lambda: str(fake.pyint(*INDIVIDUAL_INCOME_RANGE))
    )
    additional_annual_income = factory.LazyFunction(
        lambda: str(fake.pyint(*ADDITIONAL_INCOME_RANGE))
    )


def get_random_borrower(**overrides) -> Borrower:
    """Build a random, valid Borrower; keyword arguments pin specific fields."""
    return BorrowerFactory.build(**overrides)
