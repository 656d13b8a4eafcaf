"""
Command-line interface for the Jobo client.

Usage:
    python -m jobo search "data engineer" --location Berlin
    python -m jobo feed --source greenhouse --remote --limit 100
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from contextlib import aclosing
from datetime import datetime
from typing import Any, AsyncIterator, List, Optional

from pydantic import BaseModel

from jobo.client import JoboClient
from jobo.config import get_settings
from jobo.errors import JoboError
from jobo.models import JobFeedRequest, JobSearchRequest, LocationFilter


def _parse_datetime(value: str) -> datetime:
    """argparse type for ISO-8601 timestamps (a trailing Z is accepted)."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 timestamp: {value!r}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="jobo",
        description="Query the Jobo job-listings API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One page of simple search results
  python -m jobo search "platform engineer" --location "London, UK"

  # Every advanced-search result, stopping after 200 jobs
  python -m jobo search "platform engineer" --all --limit 200

  # Bulk feed, remote jobs posted this week
  python -m jobo feed --remote --posted-after 2026-10-12T00:00:00Z

  # Jobs expired in the last day
  python -m jobo expired --since 2026-10-18T00:00:00Z

  # Geocode a location string
  python -m jobo geocode "San Francisco, CA"

The API key is read from --api-key or the JOBO_API_KEY environment variable.
""",
    )

    parser.add_argument("--api-key", default=None, help="API key (default: $JOBO_API_KEY)")
    parser.add_argument("--base-url", default=None, help="API base URL (default: $JOBO_BASE_URL)")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: $JOBO_TIMEOUT_S or 30)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every HTTP request",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # Feed
    feed = sub.add_parser("feed", help="Stream jobs from the bulk feed")
    feed.add_argument("--source", action="append", default=None, dest="sources",
                      help="Restrict to a source (repeatable)")
    feed.add_argument("--country", default=None, help="Country filter")
    feed.add_argument("--region", default=None, help="Region filter")
    feed.add_argument("--city", default=None, help="City filter")
    feed.add_argument("--remote", action="store_true", default=None, help="Remote jobs only")
    feed.add_argument("--posted-after", type=_parse_datetime, default=None,
                      help="Only jobs posted after this ISO-8601 timestamp")
    feed.add_argument("--batch-size", type=int, default=1000, help="Jobs per page (default: 1000)")
    feed.add_argument("--limit", type=int, default=None, help="Stop after this many jobs")

    # Expired IDs
    expired = sub.add_parser("expired", help="Stream IDs of expired jobs")
    expired.add_argument("--since", type=_parse_datetime, required=True,
                         help="ISO-8601 timestamp, at most 7 days ago")
    expired.add_argument("--batch-size", type=int, default=1000, help="IDs per page (default: 1000)")
    expired.add_argument("--limit", type=int, default=None, help="Stop after this many IDs")

    # Search
    search = sub.add_parser("search", help="Search jobs")
    search.add_argument("query", nargs="?", default=None, help="Free-text query")
    search.add_argument("--location", "-l", default=None, help="Location text")
    search.add_argument("--sources", default=None, help="Comma-separated sources")
    search.add_argument("--remote", action="store_true", default=None, help="Remote jobs only")
    search.add_argument("--posted-after", type=_parse_datetime, default=None,
                        help="Only jobs posted after this ISO-8601 timestamp")
    search.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    search.add_argument("--page-size", type=int, default=25, help="Results per page (default: 25)")
    search.add_argument("--all", action="store_true", dest="all_pages",
                        help="Follow every page via the advanced search endpoint")
    search.add_argument("--limit", type=int, default=None, help="Stop after this many jobs (with --all)")

    # Geocode
    geocode = sub.add_parser("geocode", help="Resolve a location string")
    geocode.add_argument("location", help="Location text, e.g. 'Berlin, Germany'")

    return parser.parse_args(argv)


def build_client(args: argparse.Namespace) -> JoboClient:
    """Build a client from arguments, falling back to JOBO_* settings."""
    settings = get_settings()
    return JoboClient(
        args.api_key or settings.api_key,
        base_url=args.base_url or settings.base_url,
        timeout_s=args.timeout if args.timeout is not None else settings.timeout_s,
        user_agent=settings.user_agent,
    )


def _emit(item: Any) -> None:
    if isinstance(item, BaseModel):
        item = item.model_dump(mode="json", exclude_none=True)
    elif not isinstance(item, (dict, list)):
        item = str(item)
    print(json.dumps(item, ensure_ascii=False))


async def _drain(items: AsyncIterator[Any], limit: Optional[int]) -> int:
    count = 0
    async with aclosing(items) as stream:
        if limit is not None and limit <= 0:
            return count
        async for item in stream:
            _emit(item)
            count += 1
            if limit is not None and count >= limit:
                break
    return count


async def run_command(client: JoboClient, args: argparse.Namespace) -> int:
    """Run the selected subcommand against ``client``."""
    if args.command == "feed":
        locations = None
        if args.country or args.region or args.city:
            locations = [LocationFilter(country=args.country, region=args.region, city=args.city)]
        request = JobFeedRequest(
            locations=locations,
            sources=args.sources,
            is_remote=args.remote,
            posted_after=args.posted_after,
            batch_size=args.batch_size,
        )
        await _drain(client.feed.iter_jobs(request), args.limit)

    elif args.command == "expired":
        await _drain(client.feed.iter_expired_job_ids(args.since, args.batch_size), args.limit)

    elif args.command == "search":
        if args.all_pages:
            request = JobSearchRequest(
                queries=[args.query] if args.query else None,
                locations=[args.location] if args.location else None,
                sources=[s.strip() for s in args.sources.split(",") if s.strip()] if args.sources else None,
                is_remote=args.remote,
                posted_after=args.posted_after,
                page_size=args.page_size,
            )
            await _drain(client.search.iter_jobs(request), args.limit)
        else:
            response = await client.search.search(
                q=args.query,
                location=args.location,
                sources=args.sources,
                remote=args.remote,
                posted_after=args.posted_after,
                page=args.page,
                page_size=args.page_size,
            )
            for job in response.jobs:
                _emit(job)

    elif args.command == "geocode":
        _emit(await client.locations.geocode(args.location))

    return 0


async def async_main(args: argparse.Namespace) -> int:
    """Async entry point."""
    try:
        client = build_client(args)
    except ValueError as e:
        print(f"error: {e} (set JOBO_API_KEY or pass --api-key)", file=sys.stderr)
        return 2

    async with client:
        try:
            return await run_command(client, args)
        except JoboError as e:
            print(f"error: {e}", file=sys.stderr)
            if e.retry_after_seconds is not None:
                print(f"retry after {e.retry_after_seconds}s", file=sys.stderr)
            return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(async_main(args))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
