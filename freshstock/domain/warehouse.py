from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

WAREHOUSE_EXISTS = "warehouse code already exists"
WAREHOUSE_NOT_FOUND = "warehouse not found"


@dataclass(frozen=True)
class Warehouse(Snapshot):
    id: Optional[int]
    address: str
    telephone: str
    warehouse_code: str
    minimum_capacity: int
    minimum_temperature: int


@dataclass(frozen=True)
class WarehousePatch:
    address: Option[str] = ABSENT
    telephone: Option[str] = ABSENT
    warehouse_code: Option[str] = ABSENT
    minimum_capacity: Option[int] = ABSENT
    minimum_temperature: Option[int] = ABSENT
