from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional

from bs4 import BeautifulSoup

from data_models import CardRecord, CardSummary
from default_selectors import DEFAULT_SELECTORS, DOMAIN, archive_url, dashboard_url
from detail_cache import DetailCache
from errors import PipelineAbortedError, ScraperError
from field_extractor import extract_card_summary, extract_voucher_code

logger = logging.getLogger(__name__)

UrlBuilder = Callable[[int], str]

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class GiftoffScraper:
    """
    Walks the active and archived dashboards and turns every card into a CardRecord.
    Expects a fetcher with .fetch(url, session_id=None) and .fetch_authenticated(url, session_id),
    both returning a parsed document.
    """

    def __init__(self, fetcher, domain: str = DOMAIN, selectors=DEFAULT_SELECTORS):
        self.fetcher = fetcher
        self.sel = selectors
        self.domain = domain.rstrip("/")
        self.base_url = dashboard_url(domain=self.domain)

    # Listing URLs
    def dashboard_url(self, page_number: int = 1) -> str:
        return dashboard_url(page_number, domain=self.domain)

    def archive_url(self, page_number: int = 1) -> str:
        return archive_url(page_number, domain=self.domain)

    # Pagination
    def last_page_number(self, root: BeautifulSoup) -> int:
        node = root.select_one(self.sel["dashboard"]["pagination_max"])
        m = LEADING_INT_RE.match(node.get_text()) if node else None
        if not m:
            return 1
        return max(1, int(m.group(1)))

    def parse_listing(self, root: BeautifulSoup) -> List[CardSummary]:
        containers = root.select(self.sel["dashboard"]["card_container"])
        return [extract_card_summary(c, self.base_url) for c in containers]

    def walk(self, url_builder: UrlBuilder, session_id: str) -> List[CardSummary]:
        first_url = url_builder(1)
        first = self.fetcher.fetch_authenticated(first_url, session_id)
        page_count = self.last_page_number(first)
        logger.info("Max pages for %s: %d", first_url, page_count)

        summaries: List[CardSummary] = []
        for i in range(1, page_count + 1):
            page_url = url_builder(i)
            logger.info("Fetching listing page %d/%d: %s", i, page_count, page_url)
            doc = self.fetcher.fetch_authenticated(page_url, session_id)
            summaries.extend(self.parse_listing(doc))
        return summaries

    def collect_summaries(self, session_id: str) -> List[CardSummary]:
        # No dedup across listings: a card present in both yields two records
        return self.walk(self.dashboard_url, session_id) + self.walk(self.archive_url, session_id)

    # Per card
    def fetch_voucher_code(self, listing_url: str) -> Optional[str]:
        # Voucher pages are requested without the session cookie
        return extract_voucher_code(self.fetcher.fetch(listing_url))

    def build_record(self, summary: CardSummary, cache: DetailCache, session_id: str) -> CardRecord:
        code = self.fetch_voucher_code(summary.listing_url)
        details = None
        if summary.detail_url:
            details = cache.get_order_details(summary.detail_url, session_id)
        return CardRecord.build(summary, code, details)

    def iter_records(
        self,
        session_id: str,
        summaries: Optional[List[CardSummary]] = None,
        cache: Optional[DetailCache] = None,
    ) -> Iterator[CardRecord]:
        if summaries is None:
            summaries = self.collect_summaries(session_id)
        if cache is None:
            cache = DetailCache(self.fetcher)

        for idx, summary in enumerate(summaries, 1):
            if not summary.listing_url:
                logger.debug("[%d/%d] Skipping %r: no voucher link", idx, len(summaries), summary.title)
                continue
            logger.info("[%d/%d] Fetching card: %s", idx, len(summaries), summary.listing_url)
            try:
                record = self.build_record(summary, cache, session_id)
            except ScraperError as e:
                raise PipelineAbortedError(e, url=summary.listing_url, card_title=summary.title) from e
            yield record

        logger.info("Order detail pages fetched: %d", cache.fetch_count)

    def run(self, session_id: str) -> List[CardRecord]:
        return list(self.iter_records(session_id))

