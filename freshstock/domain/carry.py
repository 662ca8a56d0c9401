from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot

CID_MAX_LENGTH = 10
CARRY_BOUNDS = {"cid": CID_MAX_LENGTH}

CARRY_EXISTS = "carry cid already exists"
CARRY_REFERENCE_MISSING = "a column table constraint fails"


@dataclass(frozen=True)
class Carry(Snapshot):
    id: Optional[int]
    cid: str
    company_name: str
    address: str
    telephone: str
    locality_id: str
