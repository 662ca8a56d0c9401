from dataclasses import replace
from typing import List, Optional

from freshstock.data.repositories import InboundOrderRepository
from freshstock.domain.dates import normalize_date
from freshstock.domain.employee import EmployeeInboundOrdersReport
from freshstock.domain.inbound_order import (
    INBOUND_EMPLOYEE_MISSING,
    INBOUND_ORDER_DATE_INVALID,
    INBOUND_ORDER_EXISTS,
    INBOUND_ORDER_NUMBER_EMPTY,
    INBOUND_PRODUCT_BATCH_MISSING,
    INBOUND_WAREHOUSE_MISSING,
)
from freshstock.errors import Conflict, DateInvalid, ReferentNotFound
from freshstock.services.crud_service import CrudService


class InboundOrderService(CrudService):
    """
    Inbound orders assign an employee to receive a product batch at a warehouse.

    Missing referents are reported individually (404) so the caller knows
    which id to fix.
    """

    entity_name = "inbound order"
    unique_field = "order_number"
    already_exists_message = INBOUND_ORDER_EXISTS
    referent_errors = {
        "employee_id": (ReferentNotFound, INBOUND_EMPLOYEE_MISSING),
        "warehouse_id": (ReferentNotFound, INBOUND_WAREHOUSE_MISSING),
        "product_batch_id": (ReferentNotFound, INBOUND_PRODUCT_BATCH_MISSING),
    }

    def __init__(self, repository=None):
        super().__init__(repository or InboundOrderRepository())

    def create(self, snapshot):
        if not snapshot.order_number.strip():
            raise Conflict(INBOUND_ORDER_NUMBER_EMPTY)
        try:
            snapshot = replace(snapshot, order_date=normalize_date(snapshot.order_date))
        except ValueError as error:
            raise DateInvalid(INBOUND_ORDER_DATE_INVALID) from error
        return super().create(snapshot)

    def report_all(self) -> List[EmployeeInboundOrdersReport]:
        """Inbound orders per employee, every employee included"""
        return self.repository.report_by_employee()

    def report_for_employee(self, employee_id: int) -> EmployeeInboundOrdersReport:
        """
        Inbound orders of one employee.

        Raises:
            NotFound: If the employee does not exist
        """
        return self.repository.report_by_employee(employee_id)[0]
