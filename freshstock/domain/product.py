from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

PRODUCT_EXISTS = "product code already exists"
PRODUCT_NOT_FOUND = "product not found"
PRODUCT_SELLER_MISSING = "seller not found"
PRODUCT_REFERENCE_MISSING = "a column table constraint fails"


@dataclass(frozen=True)
class Product(Snapshot):
    id: Optional[int]
    description: str
    expiration_rate: int
    freezing_rate: int
    height: float
    length: float
    net_weight: float
    product_code: str
    recommended_freezing_temperature: float
    width: float
    product_type_id: int
    seller_id: Optional[int] = None

    omit_when_none = ("seller_id",)


@dataclass(frozen=True)
class ProductPatch:
    description: Option[str] = ABSENT
    expiration_rate: Option[int] = ABSENT
    freezing_rate: Option[int] = ABSENT
    height: Option[float] = ABSENT
    length: Option[float] = ABSENT
    net_weight: Option[float] = ABSENT
    product_code: Option[str] = ABSENT
    recommended_freezing_temperature: Option[float] = ABSENT
    width: Option[float] = ABSENT
    product_type_id: Option[int] = ABSENT
    seller_id: Option[int] = ABSENT


@dataclass(frozen=True)
class ProductRecordsReport(Snapshot):
    product_id: int
    description: str
    records_count: int
