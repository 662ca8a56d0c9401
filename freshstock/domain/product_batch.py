from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot

BATCH_EXISTS = "a product batch with the batch_number {batch_number} already exists"
BATCH_DATE_INVALID = "the string provided does not match the valid date format yyyy-mm-dd"
BATCH_PRODUCT_MISSING = "the given id does not have a product attached to it"
BATCH_SECTION_MISSING = "the given id does not have a section attached to it"


@dataclass(frozen=True)
class ProductBatch(Snapshot):
    """Dates are yyyy-mm-dd strings"""
    id: Optional[int]
    batch_number: int
    current_quantity: int
    current_temperature: int
    due_date: str
    initial_quantity: int
    manufacturing_date: str
    manufacturing_hour: int
    minimum_temperature: int
    product_id: int
    section_id: int
