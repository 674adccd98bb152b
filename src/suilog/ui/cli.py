from __future__ import annotations

import argparse
import logging
import sys
from datetime import UTC, datetime
from signal import SIGINT, signal
from typing import TYPE_CHECKING
from uuid import UUID

from dotenv import load_dotenv

from suilog.app import (
    edit_visit,
    get_collection_stats,
    list_aquariums,
    remove_visit,
    sync_catalog,
)
from suilog.app import check_in_aquarium as check_in_at
from suilog.config import configure_logging
from suilog.domain.model import CheckInType, VisitStatusFilter
from suilog.domain.ports.geofence import Coordinate

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from suilog.domain.model import Aquarium
    from suilog.domain.statistics import CollectionStats

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Aquarium visit log")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Sync the aquarium catalog")
    sync.add_argument(
        "--url",
        type=str,
        help="Catalog URL to fetch instead of the configured one",
    )

    listing = subparsers.add_parser("list", help="List aquariums")
    listing.add_argument("--search", type=str, default="", help="Case-insensitive name filter")
    listing.add_argument(
        "--region",
        action="append",
        default=[],
        help="Only show this region (repeatable)",
    )
    listing.add_argument(
        "--status",
        choices=[status.value for status in VisitStatusFilter],
        default=VisitStatusFilter.ALL.value,
        help="Filter by visit status",
    )

    subparsers.add_parser("stats", help="Show visit statistics")

    check_in = subparsers.add_parser("check-in", help="Log a visit to an aquarium")
    check_in.add_argument("name", type=str, help="Exact aquarium name")
    mode = check_in.add_mutually_exclusive_group(required=True)
    mode.add_argument("--manual", action="store_true", help="Manual check-in (no geofence)")
    mode.add_argument("--lat", type=float, help="Current latitude for a location check-in")
    check_in.add_argument("--lon", type=float, help="Current longitude for a location check-in")
    check_in.add_argument("--memo", type=str, default="", help="Optional memo")
    check_in.add_argument("--date", type=str, help="ISO-8601 visit date (defaults to now)")

    visits = subparsers.add_parser("visits", help="List the visits logged for an aquarium")
    visits.add_argument("name", type=str, help="Exact aquarium name")

    edit = subparsers.add_parser("edit-visit", help="Edit a logged visit")
    edit.add_argument("visit_id", type=str, help="Visit id as shown by 'visits'")
    edit.add_argument("--memo", type=str, help="Replacement memo")
    edit.add_argument("--date", type=str, help="Replacement ISO-8601 visit date")

    remove = subparsers.add_parser("remove-visit", help="Delete a logged visit")
    remove.add_argument("visit_id", type=str, help="Visit id as shown by 'visits'")

    return parser.parse_args(list(argv))


def _parse_iso_datetime(value: str) -> datetime:
    try:
        normalized = value.strip()
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        dt = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"Invalid ISO timestamp: {value}") from exc
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def _parse_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError as exc:
        raise ValueError(f"Invalid UUID: {value}") from exc


def _location(args: argparse.Namespace) -> Coordinate | None:
    if args.manual:
        return None
    if args.lon is None:
        raise ValueError("--lat requires --lon")
    return Coordinate(args.lat, args.lon)


def _write(line: str = "") -> None:
    sys.stdout.write(line + "\n")


def _print_aquariums(aquariums: Sequence[Aquarium]) -> None:
    for aquarium in aquariums:
        marker = "*" if aquarium.has_visited else " "
        _write(f"{marker} [{aquarium.region}] {aquarium.name} ({aquarium.visit_count})")


def _print_visits(aquarium: Aquarium) -> None:
    _write(aquarium.name)
    for visit in aquarium.visits:
        memo = f"  {visit.memo}" if visit.memo else ""
        _write(
            f"  {visit.id}  {visit.visit_date:%Y-%m-%d %H:%M}  "
            f"{visit.check_in_type.value}{memo}"
        )


def _print_stats(stats: CollectionStats) -> None:
    _write(f"Visited {stats.visited}/{stats.total} ({stats.achievement_rate:.0%})")
    _write(f"Total visits: {stats.total_visits}")
    for region in stats.regions:
        if region.total:
            _write(f"  {region.region}: {region.visited}/{region.total}")
    if stats.top_region is not None:
        _write(f"Most visited region: {stats.top_region[0]} ({stats.top_region[1]})")
    for rank, item in enumerate(stats.top_aquariums, start=1):
        _write(f"  {rank}. {item.aquarium.name} ({item.visits})")
    for (year, month), count in stats.monthly_visits.items():
        _write(f"  {year:04d}-{month:02d}: {count}")
    for check_in_type, count in stats.check_in_types.items():
        _write(f"  {check_in_type.value}: {count}")


def _run_command(args: argparse.Namespace) -> int:  # noqa: PLR0911
    if args.command == "sync":
        outcome = sync_catalog(catalog_url=args.url)
        if outcome.is_error:
            log.error("Catalog sync failed: %s", outcome.message)
            return 1
        log.info("Catalog sync %s (version %s)", outcome.status.value, outcome.stored_version)
        return 0

    if args.command == "list":
        _print_aquariums(
            list_aquariums(
                search_text=args.search,
                regions=set(args.region),
                visit_status=VisitStatusFilter(args.status),
            )
        )
        return 0

    if args.command == "stats":
        _print_stats(get_collection_stats())
        return 0

    if args.command == "check-in":
        coordinate = _location(args)
        visit = check_in_at(
            args.name,
            check_in_type=CheckInType.MANUAL if coordinate is None else CheckInType.LOCATION,
            coordinate=coordinate,
            visit_date=_parse_iso_datetime(args.date) if args.date else None,
            memo=args.memo,
        )
        log.info("Logged visit %s", visit.id)
        return 0

    if args.command == "visits":
        matches = list_aquariums(search_text=args.name)
        exact = [aquarium for aquarium in matches if aquarium.name == args.name]
        if not exact:
            log.error("No aquarium named %r", args.name)
            return 1
        _print_visits(exact[0])
        return 0

    if args.command == "edit-visit":
        edit_visit(
            _parse_uuid(args.visit_id),
            memo=args.memo,
            visit_date=_parse_iso_datetime(args.date) if args.date else None,
        )
        return 0

    if args.command == "remove-visit":
        remove_visit(_parse_uuid(args.visit_id))
        return 0

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        exit_code = _run_command(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
