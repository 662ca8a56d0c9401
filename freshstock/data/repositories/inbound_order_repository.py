from typing import List, Optional

from sqlalchemy import func, select

from freshstock.data.employee import Employee
from freshstock.data.inbound_order import InboundOrder
from freshstock.data.product_batch import ProductBatch
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.warehouse import Warehouse
from freshstock.domain.employee import EMPLOYEE_NOT_FOUND, EmployeeInboundOrdersReport
from freshstock.domain.inbound_order import INBOUND_ORDER_EXISTS


class InboundOrderRepository(SqlRepository):
    model = InboundOrder
    not_found_message = "inbound order not found"
    already_exists_message = INBOUND_ORDER_EXISTS
    unique_field = 'order_number'
    references = (
        ('employee_id', Employee),
        ('warehouse_id', Warehouse),
        ('product_batch_id', ProductBatch),
    )

    def report_by_employee(self, employee_id: Optional[int] = None) -> List[EmployeeInboundOrdersReport]:
        """Inbound orders per employee, employees without orders included with 0"""
        statement = (
            select(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
                func.count(InboundOrder.id),
            )
            .outerjoin(InboundOrder, InboundOrder.employee_id == Employee.id)
            .group_by(
                Employee.id,
                Employee.card_number_id,
                Employee.first_name,
                Employee.last_name,
                Employee.warehouse_id,
            )
            .order_by(Employee.id)
        )
        return self._aggregate(statement, Employee.id, employee_id, EmployeeInboundOrdersReport, EMPLOYEE_NOT_FOUND)
