"""
Main Entry Point - Jorei Crawler

Provides the command line interface:
- crawl: fetch every ordinance in a year range to local JSON files
- summary: print per-prefecture counts from an index file
"""

import argparse
import logging
import sys
from typing import Optional

from .coreutils.config import CrawlSettings
from .coreutils.errors import JoreiError
from .coreutils.logging import setup_logging
from .coreutils.time import parse_date_bound
from .extract.queries import DateRange
from .load.local_storage import load_index, summarize_index
from .orchestration.pipeline import run_crawl

logger = logging.getLogger("listup_jorei")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listup-jorei", description="Japanese municipal ordinance crawler"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    crawl = subparsers.add_parser("crawl", help="Crawl ordinances to local files")
    crawl.add_argument(
        "-o", "--output", required=True, help="Folder for per-record JSON files"
    )
    crawl.add_argument("-i", "--index", required=True, help="Index file to write")
    crawl.add_argument(
        "-s",
        "--start",
        type=parse_date_bound,
        default=None,
        help="Start of the announcement range (YYYY or YYYY-MM-DD)",
    )
    crawl.add_argument(
        "-e",
        "--end",
        type=parse_date_bound,
        default=None,
        help="End of the announcement range (YYYY or YYYY-MM-DD)",
    )
    crawl.add_argument(
        "-r",
        "--rows",
        type=int,
        default=None,
        help="Records per API page; larger values load the server more (default 50)",
    )
    crawl.add_argument(
        "--sleep-time",
        type=int,
        default=None,
        help="Pause after every page in milliseconds (default 500)",
    )
    crawl.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    summary = subparsers.add_parser("summary", help="Summarize an index file")
    summary.add_argument("-i", "--index", required=True, help="Index file to read")

    return parser


def run_crawl_command(args: argparse.Namespace) -> int:
    settings = CrawlSettings.from_env(
        output_dir=args.output,
        index_path=args.index,
        rows=args.rows,
        sleep_time_ms=args.sleep_time,
    )
    setup_logging(
        logging.DEBUG if args.verbose else logging.INFO, log_dir=settings.log_dir
    )

    date_range = DateRange(start=args.start, end=args.end)
    result = run_crawl(settings, date_range)
    logger.info(
        f"✅ Crawl completed: {result.records} records over {result.pages} pages "
        f"-> {result.index_path}"
    )
    return 0


def run_summary_command(args: argparse.Namespace) -> int:
    setup_logging()
    df = summarize_index(load_index(args.index))
    print(df)
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "crawl":
            return run_crawl_command(args)
        return run_summary_command(args)
    except (JoreiError, ValueError, FileNotFoundError) as e:
        logger.error(f"❌ {args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
