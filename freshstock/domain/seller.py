from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

SELLER_EXISTS = "cid already exists"
SELLER_NOT_FOUND = "Id {id} does not exist"
SELLER_LOCALITY_MISSING = "locality not found"


@dataclass(frozen=True)
class Seller(Snapshot):
    id: Optional[int]
    cid: int
    company_name: str
    address: str
    telephone: str
    locality_id: str


@dataclass(frozen=True)
class SellerPatch:
    cid: Option[int] = ABSENT
    company_name: Option[str] = ABSENT
    address: Option[str] = ABSENT
    telephone: Option[str] = ABSENT
    locality_id: Option[str] = ABSENT
