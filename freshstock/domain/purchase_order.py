from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot

ORDER_NUMBER_MAX_LENGTH = 50
TRACKING_CODE_MAX_LENGTH = 50
PURCHASE_ORDER_BOUNDS = {
    "order_number": ORDER_NUMBER_MAX_LENGTH,
    "tracking_code": TRACKING_CODE_MAX_LENGTH,
}

PURCHASE_ORDER_EXISTS = "order_number already exists"
PURCHASE_ORDER_REFERENCE_MISSING = "a column table constraint fails"
PURCHASE_ORDER_DATE_INVALID = "invalid order date"
PURCHASE_ORDER_NOT_FOUND = "Purchase Order not found"


@dataclass(frozen=True)
class PurchaseOrder(Snapshot):
    id: Optional[int]
    order_number: str
    order_date: str
    tracking_code: str
    buyer_id: int
    product_record_id: int
    order_status_id: int


@dataclass(frozen=True)
class BuyerPurchaseOrdersReport(Snapshot):
    buyer_id: int
    card_number_id: str
    first_name: str
    last_name: str
    orders_count: int
