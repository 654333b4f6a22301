"""
Page objects for the loan application funnel.

Each page models one funnel step. The only way to get the next page is the
current page's advance operation:

    home = start_funnel(page, config)
    basic_info = home.enter_amount_and_get_started("9000", "Large Purchase")
    income = basic_info.enter_basic_information(borrower)
    income.enter_income_details(borrower)
"""

from typing import Dict, Optional, Tuple

from loanfunnel.config import FunnelConfig
from loanfunnel.context import SessionContext
from loanfunnel.pages.basic_info import BasicInfoPage, FieldPresence
from loanfunnel.pages.home import HomePage
from loanfunnel.pages.income import IncomePage
from loanfunnel.pages.lifecycle import PageLifecycle

# Page type -> page types its advance operations return
NAVIGATION_GRAPH: Dict[type, Tuple[type, ...]] = {
    HomePage: (BasicInfoPage,),
    BasicInfoPage: (IncomePage,),
    IncomePage: (),
}


def start_funnel(page, config: FunnelConfig, context: Optional[SessionContext] = None) -> HomePage:
    """Open the landing page and return it."""
    home = HomePage(page, config, context)
    home.goto()
    return home


__all__ = [
    "BasicInfoPage",
    "FieldPresence",
    "HomePage",
    "IncomePage",
    "NAVIGATION_GRAPH",
    "PageLifecycle",
    "start_funnel",
]
