from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import ConfigError, load_settings
from csv_fns import export_records_csv
from data_models import CardRecord
from errors import ScraperError
from giftoff_scraper import GiftoffScraper
from page_fetcher import PageFetcher

logger = logging.getLogger("giftoff")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Export gift cards from the giftoff.com dashboard.")
    p.add_argument("-s", "--sessionId", dest="session_id", help="authentication cookie (PHPSESSID)")
    p.add_argument("--csv", dest="csv_path", default=None, help="also write the records to this CSV file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(session_id=args.session_id, csv_path=args.csv_path, verbose=args.verbose)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    scraper = GiftoffScraper(PageFetcher(timeout=settings.timeout), domain=settings.domain)
    records: List[CardRecord] = []
    try:
        for record in scraper.iter_records(settings.session_id):
            print(record.to_line(), flush=True)
            records.append(record)
    except ScraperError as e:
        logger.error("Run aborted: %s", e)
        return 1

    if settings.csv_path:
        n = export_records_csv(settings.csv_path, records)
        logger.info("Wrote %d records to %s", n, settings.csv_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
