"""
Command-line interface for loanfunnel.

Runs one funnel traversal against a live site with a random borrower.
"""

import argparse
import sys

from .config import FunnelConfig
from .log import configure_logging


def run_command(args) -> int:
    """Drive Home -> Basic info -> Income once."""
    from playwright.sync_api import sync_playwright

    from .context import SessionContext
    from .data import get_random_borrower
    from .exceptions import FunnelError
    from .pages import start_funnel

    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.headless is not None:
        overrides["headless"] = args.headless
    config = FunnelConfig(**overrides)
    configure_logging(config)

    borrower = get_random_borrower()

    print("💸 loanfunnel run")
    print(f"Target: {config.base_url}")
    print(f"Amount: {args.amount} ({args.purpose})")
    print(f"Borrower: {borrower.display_name}")
    print()

    context = SessionContext()
    failed = False
    with sync_playwright() as p:
        browser = getattr(p, config.browser_name).launch(headless=config.headless)
        page = browser.new_page(viewport=config.viewport)
        page.set_default_timeout(config.default_timeout_ms)
        context.attach_to_page(page)

        try:
            home = start_funnel(page, config, context)
            basic_info = home.enter_amount_and_get_started(args.amount, args.purpose)
            income = basic_info.enter_basic_information(borrower)
            income.enter_income_details(borrower)
        except (FunnelError, AssertionError) as e:
            failed = True
            print(f"❌ Funnel failed: {e}")
        finally:
            browser.close()

    print()
    for record in context.steps:
        status = "PASS" if record.passed else "FAIL"
        print(f"  [{status}] {record.page}.{record.step} ({record.duration_ms:.0f} ms)")
    print()
    print(context.summary())

    if failed:
        return 1
    print("✅ Reached the end of the income step")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="loanfunnel - page-object tests for a loan application funnel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the funnel against the default site
  loanfunnel run

  # Different amount and purpose, with a visible browser
  loanfunnel run --amount 15000 --purpose "Debt Consolidation" --headed

  # Another environment
  loanfunnel run --base-url https://staging.example.com/
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Drive the funnel once with a random borrower")
    run_parser.add_argument("--amount", default="9000", help="Desired loan amount (default: 9000)")
    run_parser.add_argument(
        "--purpose",
        default="Large Purchase",
        help="Loan purpose option (default: 'Large Purchase')",
    )
    run_parser.add_argument("--base-url", help="Application root URL (or set BASE_URL)")
    run_parser.add_argument(
        "--headless",
        action="store_true",
        default=None,
        help="Run browser in headless mode (default from HEADLESS, true if unset)",
    )
    run_parser.add_argument(
        "--headed",
        action="store_false",
        dest="headless",
        help="Run browser in headed mode (show browser window)",
    )
    run_parser.set_defaults(func=run_command)

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
