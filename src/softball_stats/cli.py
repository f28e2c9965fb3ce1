#!/usr/bin/env python3
"""
Command-line interface for Softball Stats.

Usage:
    softball-stats categories                 # List stat categories
    softball-stats rankings                   # Print the team poll
    softball-stats stats batting --limit 10   # Print a leaderboard
    softball-stats stats era --json           # Raw normalized JSON
    softball-stats serve --port 8000          # Run the HTTP API
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .core.config import get_settings
from .core.types import CATEGORY_ALIASES, CATEGORY_REGISTRY
from .providers.base import ProviderError

logger = logging.getLogger("softball_stats.cli")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=getattr(logging, (level or get_settings().log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def cmd_categories(args: argparse.Namespace) -> int:
    """List supported stat categories."""
    print("\nStat Categories")
    print("=" * 50)
    for config in CATEGORY_REGISTRY.values():
        print(f"  {config.category.value:<20} {config.title}")
    for alias, category in CATEGORY_ALIASES.items():
        print(f"  {alias:<20} (alias of {category.value})")
    return 0


async def cmd_rankings_async(args: argparse.Namespace) -> int:
    from .services.stats import SoftballStatsService

    async with SoftballStatsService() as service:
        rankings = await service.get_rankings()

    if args.json:
        print(json.dumps(rankings.to_dict(), indent=2))
        return 0

    print(f"\n{rankings.title}")
    print(f"Updated: {rankings.updated}")
    print("=" * 50)
    for row in rankings.data:
        print(
            f"  {str(row.get('RANK', '')):>3}  {str(row.get('COLLEGE', '')):<28} "
            f"{str(row.get('RECORD', '')):<8} prev: {row.get('PREVIOUS RANK', '')}"
        )
    return 0


def cmd_rankings(args: argparse.Namespace) -> int:
    return asyncio.run(cmd_rankings_async(args))


async def cmd_stats_async(args: argparse.Namespace) -> int:
    from .services.stats import SoftballStatsService

    async with SoftballStatsService() as service:
        leaderboard = await service.get_stats(args.category)

    leaders = leaderboard.leaders[: args.limit] if args.limit else leaderboard.leaders

    if args.json:
        data = leaderboard.to_dict()
        data["leaders"] = data["leaders"][: len(leaders)]
        print(json.dumps(data, indent=2))
        return 0

    print(f"\n{leaderboard.category}")
    print(f"Updated: {leaderboard.updated}")
    print("=" * 50)
    for leader in leaders:
        extras = " ".join(f"{k}={v}" for k, v in leader.additional_stats.items())
        print(
            f"  {leader.rank:>3}  {leader.player.name:<24} {leader.team.name:<20} "
            f"{leader.value:<8} {extras}"
        )
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    return asyncio.run(cmd_stats_async(args))


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "softball_stats.api.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        reload=args.reload,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="NCAA D1 Softball Stats CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Logging level (default: from LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("categories", help="List stat categories")

    rankings_parser = subparsers.add_parser("rankings", help="Fetch team rankings")
    rankings_parser.add_argument("--json", action="store_true", help="Print normalized JSON")

    stats_parser = subparsers.add_parser("stats", help="Fetch a stat leaderboard")
    stats_parser.add_argument("category", help="Stat category (e.g. batting, homeRuns, era)")
    stats_parser.add_argument("--limit", type=_positive_int, help="Number of leaders to print")
    stats_parser.add_argument("--json", action="store_true", help="Print normalized JSON")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind host (default: API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: API_PORT)")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)

    commands = {
        "categories": cmd_categories,
        "rankings": cmd_rankings,
        "stats": cmd_stats,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if not cmd_func:
        parser.print_help()
        return 1

    try:
        return cmd_func(args)
    except ProviderError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
