from __future__ import annotations

import logging
from typing import Dict

from data_models import OrderDetails
from default_selectors import DEFAULT_SELECTORS
from errors import StructuralMismatchError
from field_extractor import extract_order_details

logger = logging.getLogger(__name__)


class DetailCache:
    """
    Order details keyed by detail-page URL, for one run. Several cards from the
    same order share a detail page, which is fetched and parsed only once.
    Not safe for concurrent writers.
    """

    def __init__(self, fetcher):
        self.fetcher = fetcher
        self._store: Dict[str, OrderDetails] = {}
        self.fetch_count = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, detail_url: str) -> bool:
        return detail_url in self._store

    def get_order_details(self, detail_url: str, session_id: str) -> OrderDetails:
        cached = self._store.get(detail_url)
        if cached is not None:
            logger.debug("Order details cache hit: %s", detail_url)
            return cached

        doc = self.fetcher.fetch_authenticated(detail_url, session_id)
        self.fetch_count += 1
        selector = DEFAULT_SELECTORS["dashboard"]["card_container"]
        container = doc.select_one(selector)
        if container is None:
            raise StructuralMismatchError(selector, url=detail_url)

        details = extract_order_details(container)
        self._store[detail_url] = details
        return details
