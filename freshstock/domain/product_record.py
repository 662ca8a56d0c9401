from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot

RECORD_DATE_INVALID = "invalid input date"
RECORD_DATE_PAST = "input date cannot be less than today"
RECORD_PRODUCT_MISSING = "product not found"
RECORD_NOT_FOUND = "product record not found"


@dataclass(frozen=True)
class ProductRecord(Snapshot):
    id: Optional[int]
    last_update_date: str
    purchase_price: float
    sale_price: float
    product_id: int
