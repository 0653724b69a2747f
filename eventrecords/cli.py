#!/usr/bin/env python3

"""
Command-line interface for the event store.

Works directly against the configured database (ENVIRONMENT / SQLITE_PATH /
DATABASE_URL), without going through the HTTP API.

For usage information, run:
    eventrecords --help

Common use cases:
    # List stored events
    eventrecords list

    # Show one event
    eventrecords show 3

    # Export reports for February events coordinated by Dr. Rao
    eventrecords export --start 2024-02-01 --end 2024-02-29 --coordinator rao

    # Export one report per event instead of a combined document
    eventrecords export --separate --output-dir reports/
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from .config.reports import ReportConfig
from .db import Database, DatabaseConfig, DatabaseError, EventStore, get_database
from .export import ExportFailed, generate_all_events_pdf, generate_event_pdf
from .models.event import Event
from .utils.report_filter import ReportCriteria, filter_events

logger = logging.getLogger(__name__)

def _sorted(events: List[Event]) -> List[Event]:
    return sorted(events, key=lambda event: event.id)

def cmd_list(store: EventStore, args: argparse.Namespace) -> int:
    events = _sorted(store.read_all())
    if not events:
        print("No events found")
        return 0
    for event in events:
        print(f"{event.id:>4}  {event.display_date():<12}  {event.category:<12}  {event.title}")
    print(f"\nTotal: {len(events)} events")
    return 0

def cmd_show(store: EventStore, args: argparse.Namespace) -> int:
    for event in store.read_all():
        if event.id == args.event_id:
            print(json.dumps(event.to_dict(), indent=2, ensure_ascii=False))
            return 0
    print(f"Event {args.event_id} not found", file=sys.stderr)
    return 1

def cmd_clear(store: EventStore, args: argparse.Namespace) -> int:
    if not args.yes:
        answer = input("Delete every stored event? [y/N] ")
        if answer.strip().lower() != 'y':
            print("Aborted")
            return 1
    count = store.clear()
    print(f"Cleared {count} events")
    return 0

def cmd_export(store: EventStore, args: argparse.Namespace) -> int:
    criteria = ReportCriteria(
        start_date=args.start,
        end_date=args.end,
        coordinator=args.coordinator,
        venue=args.venue,
        department=args.department,
    )
    events = filter_events(_sorted(store.read_all()), criteria)
    if not events:
        print("No events to generate report from", file=sys.stderr)
        return 1

    config = ReportConfig()
    output_dir = Path(args.output_dir) if args.output_dir else config.output_dir

    if args.separate:
        failures = 0
        for event in events:
            try:
                print(generate_event_pdf(event, output_dir, config))
            except ExportFailed as e:
                logger.error(f"Skipping event {event.id}: {e}")
                failures += 1
        return 1 if failures == len(events) else 0

    print(generate_all_events_pdf(events, output_dir / 'all-events-report.pdf', config))
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='College event records management tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--sqlite-path', type=Path,
                        help='Use this SQLite file instead of the configured database')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')
    subparsers.required = True

    subparsers.add_parser('list', help='List stored events')

    show_parser = subparsers.add_parser('show', help='Show one event as JSON')
    show_parser.add_argument('event_id', type=int, help='Event ID')

    clear_parser = subparsers.add_parser('clear', help='Delete every stored event')
    clear_parser.add_argument('--yes', action='store_true', help='Do not ask for confirmation')

    export_parser = subparsers.add_parser('export', help='Write PDF reports')
    export_parser.add_argument('--start', type=date.fromisoformat,
                               help='Earliest start date (YYYY-MM-DD)')
    export_parser.add_argument('--end', type=date.fromisoformat,
                               help='Latest start date (YYYY-MM-DD)')
    export_parser.add_argument('--coordinator', default='', help='Coordinator name contains')
    export_parser.add_argument('--venue', default='', help='Venue contains')
    export_parser.add_argument('--department', default='', help='Department contains')
    export_parser.add_argument('--output-dir', help='Directory for the generated files')
    export_parser.add_argument('--separate', action='store_true',
                               help='One file per event instead of a combined report')

    return parser

COMMANDS = {
    'list': cmd_list,
    'show': cmd_show,
    'clear': cmd_clear,
    'export': cmd_export,
}

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script"""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s - %(message)s')
    args = build_parser().parse_args(argv)

    database = Database(DatabaseConfig(sqlite_path=args.sqlite_path)) if args.sqlite_path else get_database()
    store = EventStore(database)
    try:
        return COMMANDS[args.command](store, args)
    except (DatabaseError, ExportFailed) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        database.dispose()

if __name__ == "__main__":
    sys.exit(main())
