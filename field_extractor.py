from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Pattern, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from data_models import CardSummary, OrderDetails
from date_normalizer import parse_date
from default_selectors import BASE_URL, DEFAULT_SELECTORS

EXPIRY_RE = re.compile(r": (.*)")


@dataclass(frozen=True)
class TextRule:
    selector: str


@dataclass(frozen=True)
class HrefRule:
    selector: str


@dataclass(frozen=True)
class DateRule:
    selector: str
    date_format: str
    # When set, group 1 of the first match is parsed instead of the whole text
    pattern: Optional[Pattern[str]] = None


FieldRule = Union[TextRule, HrefRule, DateRule]

_card = DEFAULT_SELECTORS["card_info"]
_order = DEFAULT_SELECTORS["order_detail"]

CARD_INFO_RULES: Dict[str, FieldRule] = {
    "url": HrefRule(_card["view_link"]),
    "expiry": DateRule(_card["expiry"], "MMMM dd, yyyy", pattern=EXPIRY_RE),
    "title": TextRule(_card["title"]),
    "value": TextRule(_card["value"]),
    "detail_url": HrefRule(_card["detail_link"]),
}

ORDER_DETAIL_RULES: Dict[str, FieldRule] = {
    "purchase_date": DateRule(_order["purchase_date"], "do MMMM, yyyy"),
    "status": TextRule(_order["status"]),
    "order_id": TextRule(_order["order_id"]),
    "order_total": TextRule(_order["order_total"]),
}


def query_text(root: BeautifulSoup | Tag, selector: str) -> Optional[str]:
    node = root.select_one(selector)
    return node.get_text().strip() if node else None


def query_href(root: BeautifulSoup | Tag, selector: str, base_url: str = BASE_URL) -> Optional[str]:
    node = root.select_one(selector)
    href = node.get("href") if node else None
    return urljoin(base_url, href) if href else None


def extract_field(container: BeautifulSoup | Tag, rule: FieldRule, base_url: str = BASE_URL) -> Optional[str]:
    if isinstance(rule, HrefRule):
        return query_href(container, rule.selector, base_url)
    if isinstance(rule, TextRule):
        return query_text(container, rule.selector)
    if isinstance(rule, DateRule):
        node = container.select_one(rule.selector)
        if node is None:
            return None
        text = node.get_text()
        if rule.pattern is not None:
            m = rule.pattern.search(text)
            text = m.group(1) if m else None
        return parse_date(text, rule.date_format)
    raise TypeError(f"Unknown field rule: {rule!r}")


def extract_fields(
    container: BeautifulSoup | Tag, rules: Dict[str, FieldRule], base_url: str = BASE_URL
) -> Dict[str, Optional[str]]:
    return {name: extract_field(container, rule, base_url) for name, rule in rules.items()}


def extract_card_summary(container: Tag, base_url: str = BASE_URL) -> CardSummary:
    f = extract_fields(container, CARD_INFO_RULES, base_url)
    return CardSummary(
        title=f["title"],
        value=f["value"],
        expiry_date=f["expiry"],
        listing_url=f["url"],
        detail_url=f["detail_url"],
    )


def extract_order_details(container: Tag) -> OrderDetails:
    return OrderDetails(**extract_fields(container, ORDER_DETAIL_RULES))


def extract_voucher_code(document: BeautifulSoup | Tag) -> Optional[str]:
    return query_text(document, DEFAULT_SELECTORS["voucher_page"]["code"])
