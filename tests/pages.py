"""HTML builders mimicking the giftoff.com markup."""

from typing import Iterable, Optional


def card_html(
    title: Optional[str] = "Amazon",
    value: Optional[str] = "£10.00",
    expiry: Optional[str] = "Expires: March 05, 2024",
    view_href: Optional[str] = "/voucher/abc",
    detail_href: Optional[str] = "https://giftoff.com/orders/123",
) -> str:
    parts = ['<div class="dashboard__card">', '<div class="dashboard__card__title">']
    if title is not None:
        parts.append(f'<h3 item="text-left">\n  {title}  \n</h3>')
    if value is not None:
        parts.append(f'<h3 class="text-right"> {value} </h3>')
    parts.append("</div>")
    if expiry is not None:
        parts.append(f'<p class="dashboard__card__date">{expiry}</p>')
    if view_href is not None:
        parts.append(f'<a class="dashboard__card__action button" href="{view_href}">View</a>')
    if detail_href is not None:
        parts.append(f'<a class="dashboard__card__link" href="{detail_href}">Order details</a>')
    parts.append("</div>")
    return "\n".join(parts)


def pagination_html(last_page: Optional[str]) -> str:
    if last_page is None:
        return ""
    return (
        '<ul class="pagination">'
        '<li><a href="?page=1">&laquo;</a></li>'
        '<li><a href="?page=1">1</a></li>'
        f'<li><a href="?page={last_page}">{last_page}</a></li>'
        '<li><a href="?page=2">&raquo;</a></li>'
        "</ul>"
    )


def listing_html(cards: Iterable[str], last_page: Optional[str] = None) -> str:
    body = "\n".join(cards)
    return f"<html><body><main>{body}</main>{pagination_html(last_page)}</body></html>"


def detail_html(
    status: str = "Delivered",
    purchase_date: str = "5th March, 2024",
    order_id: str = "GO-123",
    order_total: str = "£20.00",
) -> str:
    return (
        "<html><body>"
        '<div class="dashboard__card">'
        f'<span class="order__status"> {status} </span>'
        '<div class="orders">'
        '<div class="order__details"><span class="order__detail">Your order</span></div>'
        f'<div class="order__details"><span class="order__detail"> {purchase_date} </span></div>'
        f'<div class="order__details"><span class="order__detail">\n{order_id}\n</span></div>'
        f'<div class="order__details"><span class="order__detail"> {order_total}</span></div>'
        "</div>"
        "</div>"
        "</body></html>"
    )


def voucher_html(code: Optional[str] = "ABCD-1234") -> str:
    inner = f'<div id="voucher__code"> {code} </div>' if code is not None else "<p>Nothing here</p>"
    return f"<html><body>{inner}</body></html>"
