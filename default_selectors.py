from typing import Dict, Any

DOMAIN = "https://giftoff.com"
DASHBOARD_PATH = "/dashboard"
ARCHIVED_PATH = DASHBOARD_PATH + "/archived"


def dashboard_url(page_number: int = 1, domain: str = DOMAIN) -> str:
    return f"{domain}{DASHBOARD_PATH}?page={page_number}"


def archive_url(page_number: int = 1, domain: str = DOMAIN) -> str:
    return f"{domain}{ARCHIVED_PATH}?page={page_number}"


# Relative links on every page resolve against the dashboard location
BASE_URL = dashboard_url()

DEFAULT_SELECTORS: Dict[str, Any] = {
    "dashboard": {
        "card_container": ".dashboard__card",
        "pagination_max": "ul.pagination li:nth-last-child(2)",
    },
    "card_info": {
        "view_link": "a.dashboard__card__action.button",
        "detail_link": "a.dashboard__card__link",
        "title": ".dashboard__card__title h3[item=text-left]",
        "value": ".dashboard__card__title h3.text-right",
        "expiry": ".dashboard__card__date",
    },
    "order_detail": {
        "status": ".order__status",
        "purchase_date": ".orders .order__details:nth-child(2) .order__detail",
        "order_id": ".orders .order__details:nth-child(3) .order__detail",
        "order_total": ".orders .order__details:nth-child(4) .order__detail",
    },
    "voucher_page": {
        "code": "#voucher__code",
    },
}
