from dataclasses import dataclass
from typing import Optional, Dict


@dataclass(frozen=True)
class CardSummary:
    title: Optional[str]
    value: Optional[str]
    expiry_date: Optional[str]
    listing_url: Optional[str]
    detail_url: Optional[str]


@dataclass(frozen=True)
class OrderDetails:
    purchase_date: Optional[str]
    status: Optional[str]
    order_id: Optional[str]
    order_total: Optional[str]

    @classmethod
    def empty(cls) -> "OrderDetails":
        return cls(purchase_date=None, status=None, order_id=None, order_total=None)


@dataclass(frozen=True)
class CardRecord:
    title: Optional[str]
    code: Optional[str]
    value: Optional[str]
    expiry: Optional[str]
    purchase_date: Optional[str] = None
    status: Optional[str] = None
    order_id: Optional[str] = None
    order_total: Optional[str] = None
    has_order_details: bool = False

    @classmethod
    def build(cls, summary: CardSummary, code: Optional[str], details: Optional[OrderDetails]) -> "CardRecord":
        details_fields = details or OrderDetails.empty()
        return cls(
            title=summary.title,
            code=code,
            value=summary.value,
            expiry=summary.expiry_date,
            purchase_date=details_fields.purchase_date,
            status=details_fields.status,
            order_id=details_fields.order_id,
            order_total=details_fields.order_total,
            has_order_details=details is not None,
        )

    def to_line(self) -> str:
        fields = [self.title, self.code, self.value, self.expiry]
        if self.has_order_details:
            fields += [self.purchase_date, self.status, self.order_id, self.order_total]
        else:
            # order-detail columns collapse to a single empty trailing field
            fields.append(None)
        return ";".join("" if f is None else f for f in fields)

    def as_row(self) -> Dict[str, Optional[str]]:
        return {
            "title": self.title,
            "code": self.code,
            "value": self.value,
            "expiry": self.expiry,
            "purchase_date": self.purchase_date,
            "status": self.status,
            "order_id": self.order_id,
            "order_total": self.order_total,
        }
