from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

BUYER_EXISTS = "card_number_id already exists"
BUYER_NOT_FOUND = "buyer with id {id} not found"


@dataclass(frozen=True)
class Buyer(Snapshot):
    id: Optional[int]
    card_number_id: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class BuyerPatch:
    card_number_id: Option[str] = ABSENT
    first_name: Option[str] = ABSENT
    last_name: Option[str] = ABSENT
