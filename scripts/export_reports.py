#!/usr/bin/env python3
"""
Write PDF reports for stored events matching the given filters.

Examples:
    # Combined report for February
    python scripts/export_reports.py --start 2024-02-01 --end 2024-02-29

    # One file per event coordinated by Dr. Rao
    python scripts/export_reports.py --coordinator rao --separate
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from eventrecords.cli import main as cli_main

def main(argv: Optional[List[str]] = None) -> int:
    """Run the `export` command; filter options are passed through unchanged."""
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument('--sqlite-path')
    args, export_args = parser.parse_known_args(argv)

    cli_args = ['--sqlite-path', args.sqlite_path] if args.sqlite_path else []
    return cli_main(cli_args + ['export'] + export_args)

if __name__ == "__main__":
    sys.exit(main())
