from dataclasses import dataclass
from typing import Optional

from freshstock.domain.base import Snapshot
from freshstock.domain.optional import ABSENT, Option

EMPLOYEE_EXISTS = "employee already exists"
EMPLOYEE_NOT_FOUND = "employee not found"
EMPLOYEE_WAREHOUSE_MISSING = "the associated warehouse does not exist"


@dataclass(frozen=True)
class Employee(Snapshot):
    id: Optional[int]
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int


@dataclass(frozen=True)
class EmployeePatch:
    """card_number_id is immutable once the employee exists"""
    first_name: Option[str] = ABSENT
    last_name: Option[str] = ABSENT
    warehouse_id: Option[int] = ABSENT


@dataclass(frozen=True)
class EmployeeInboundOrdersReport(Snapshot):
    id: int
    card_number_id: str
    first_name: str
    last_name: str
    warehouse_id: int
    inbound_orders_count: int
