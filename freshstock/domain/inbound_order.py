from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot

INBOUND_ORDER_EXISTS = "inbound order already exists"
INBOUND_ORDER_NUMBER_EMPTY = "orderNumber field cannot be empty"
INBOUND_ORDER_DATE_INVALID = "invalid order date"
INBOUND_EMPLOYEE_MISSING = "the associated employee does not exist"
INBOUND_WAREHOUSE_MISSING = "the associated warehouse does not exist"
INBOUND_PRODUCT_BATCH_MISSING = "the associated product batch does not exist"


@dataclass(frozen=True)
class InboundOrder(Snapshot):
    id: Optional[int]
    order_date: str
    order_number: str
    employee_id: int
    product_batch_id: int
    warehouse_id: int
