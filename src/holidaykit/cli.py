"""
HolidayKit CLI

Command-line interface for listing and checking holidays.

Usage:
    holidaykit providers
    holidaykit list NO 2024 --locale nb_NO --type official
    holidaykit list US 2024 --tag person --json
    holidaykit check DK 2024-12-25
    holidaykit working-day US 2024-07-03 --days 2
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import Optional, Sequence

from . import config
from .calendar import ProviderCalendar
from .exceptions import HolidayKitError
from .logs import configure_logging
from .models import HolidayType, Tag
from .providers import available_providers, create


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}' (expected YYYY-MM-DD)")


# =============================================================================
# Commands
# =============================================================================

def cmd_providers(args: argparse.Namespace) -> int:
    """List available providers."""
    providers = available_providers()
    if args.json:
        print(json.dumps(providers, indent=2, ensure_ascii=False))
        return 0

    print(f"{'ID':<8} Name")
    print("-" * 40)
    for provider_id, name in providers.items():
        print(f"{provider_id:<8} {name}")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List the holidays of one provider and year."""
    provider = create(args.provider, args.year, args.locale)
    holidays = provider.holidays
    if args.type:
        holidays = holidays.by_type(*args.type)
    if args.tag:
        holidays = holidays.with_tags(*args.tag, match_all=args.all_tags)

    if args.json:
        print(json.dumps(holidays.to_list(), indent=2, ensure_ascii=False))
        return 0

    print(f"{provider.name} ({provider.id}) {provider.year}")
    print("-" * 70)
    for holiday in holidays:
        print(f"{holiday.iso_date}  {holiday.type.value:<11} {holiday.name}")
    print("-" * 70)
    print(f"{len(holidays)} holidays")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Show the holidays falling on one date."""
    provider = create(args.provider, args.date.year, args.locale)
    matches = provider.holidays.on(args.date)
    working = provider.is_working_day(args.date)

    if args.json:
        print(json.dumps({
            "provider": provider.id,
            "date": args.date.isoformat(),
            "is_holiday": bool(matches),
            "is_working_day": working,
            "holidays": matches.to_list(),
        }, indent=2, ensure_ascii=False))
        return 0

    if not matches:
        print(f"{args.date.isoformat()} is not a holiday in {provider.name}")
    for holiday in matches:
        print(f"{holiday.iso_date}  {holiday.name} ({holiday.type.value})")
    print(f"Working day: {'yes' if working else 'no'}")
    return 0


def cmd_working_day(args: argparse.Namespace) -> int:
    """Working-day status, or the date N working days away."""
    calendar = ProviderCalendar(args.provider, locale=args.locale)

    if args.days is not None:
        result = calendar.add_working_days(args.date, args.days)
        print(result.isoformat())
        return 0

    working = calendar.is_working_day(args.date)
    print(f"{args.date.isoformat()}: {'working day' if working else 'not a working day'}")
    if not working:
        print(f"Next working day: {calendar.next_working_day(args.date).isoformat()}")
    return 0


# =============================================================================
# Entry point
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="HolidayKit holiday calculator",
        prog="holidaykit",
    )
    parser.add_argument(
        "--log-level",
        default=config.HK_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=config.HK_LOG_JSON,
        help="Emit logs as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Providers command
    providers_parser = subparsers.add_parser("providers", help="List available providers")
    providers_parser.add_argument("--json", action="store_true", help="Output JSON")
    providers_parser.set_defaults(func=cmd_providers)

    # List command
    list_parser = subparsers.add_parser("list", help="List holidays for a year")
    list_parser.add_argument("provider", help="Provider id or name (e.g. NO, ES-NA)")
    list_parser.add_argument("year", type=int, help="Year")
    list_parser.add_argument("--locale", default=config.HK_DISPLAY_LOCALE, help="Display locale")
    list_parser.add_argument(
        "--type",
        action="append",
        choices=[t.value for t in HolidayType],
        help="Only holidays of this type (repeatable)",
    )
    list_parser.add_argument(
        "--tag",
        action="append",
        choices=[t.value for t in Tag],
        help="Only holidays with this tag (repeatable)",
    )
    list_parser.add_argument("--all-tags", action="store_true", help="Require every --tag")
    list_parser.add_argument("--json", action="store_true", help="Output JSON")
    list_parser.set_defaults(func=cmd_list)

    # Check command
    check_parser = subparsers.add_parser("check", help="Check a single date")
    check_parser.add_argument("provider", help="Provider id or name")
    check_parser.add_argument("date", type=_iso_date, help="Date (YYYY-MM-DD)")
    check_parser.add_argument("--locale", default=config.HK_DISPLAY_LOCALE, help="Display locale")
    check_parser.add_argument("--json", action="store_true", help="Output JSON")
    check_parser.set_defaults(func=cmd_check)

    # Working-day command
    working_parser = subparsers.add_parser("working-day", help="Working-day status and arithmetic")
    working_parser.add_argument("provider", help="Provider id or name")
    working_parser.add_argument("date", type=_iso_date, help="Date (YYYY-MM-DD)")
    working_parser.add_argument("--days", type=int, help="Add N working days (negative allowed)")
    working_parser.add_argument("--locale", default=config.HK_DISPLAY_LOCALE, help="Display locale")
    working_parser.set_defaults(func=cmd_working_day)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.log_level, args.log_json)

    try:
        return args.func(args)
    except HolidayKitError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
