from freshstock.data.employee import Employee
from freshstock.data.repositories.base import SqlRepository
from freshstock.data.warehouse import Warehouse
from freshstock.domain.employee import EMPLOYEE_EXISTS, EMPLOYEE_NOT_FOUND


class EmployeeRepository(SqlRepository):
    model = Employee
    not_found_message = EMPLOYEE_NOT_FOUND
    already_exists_message = EMPLOYEE_EXISTS
    unique_field = 'card_number_id'
    references = (('warehouse_id', Warehouse),)
