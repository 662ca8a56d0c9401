from freshstock.data.repositories import EmployeeRepository
from freshstock.domain.employee import EMPLOYEE_EXISTS, EMPLOYEE_WAREHOUSE_MISSING
from freshstock.errors import ReferentNotFound
from freshstock.services.crud_service import CrudService


class EmployeeService(CrudService):
    """
    Employees: card_number_id is unique and immutable.

    A foreign-key failure on warehouse_id is reported as a missing warehouse
    (404) on both create and update.
    """

    entity_name = "employee"
    unique_field = "card_number_id"
    already_exists_message = EMPLOYEE_EXISTS
    referent_errors = {"warehouse_id": (ReferentNotFound, EMPLOYEE_WAREHOUSE_MISSING)}

    def __init__(self, repository=None):
        super().__init__(repository or EmployeeRepository())
