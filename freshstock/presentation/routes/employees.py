"""
Employee routes
CRUD over /employees plus the inbound-orders-per-employee report
"""

from flask import Blueprint

from freshstock.domain.employee import Employee, EmployeePatch
from freshstock.presentation.schemas import EmployeeCreateRequest, EmployeePatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, success, to_patch, to_snapshot
from freshstock.services.employee_service import EmployeeService
from freshstock.services.inbound_order_service import InboundOrderService

bp = Blueprint('employees', __name__)
service = EmployeeService()
inbound_order_service = InboundOrderService()

INVALID_ID = "invalid id"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_employees():
    return success(service.get_all())


@bp.route('/reportInboundOrders', methods=['GET'], strict_slashes=False)
def report_inbound_orders():
    """Inbound orders per employee, every employee included"""
    return success(inbound_order_service.report_all())


@bp.route('/reportInboundOrders/<employee_id>', methods=['GET'])
def report_employee_inbound_orders(employee_id):
    return success(inbound_order_service.report_for_employee(parse_id(employee_id, INVALID_ID)))


@bp.route('/<employee_id>', methods=['GET'])
def get_employee(employee_id):
    return success(service.get(parse_id(employee_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_employee():
    body = bind_json(EmployeeCreateRequest)
    return success(service.create(to_snapshot(body, Employee)), 201)


@bp.route('/<employee_id>', methods=['PATCH'])
def update_employee(employee_id):
    entity_id = parse_id(employee_id, INVALID_ID)
    body = bind_json(EmployeePatchRequest)
    return success(service.update(entity_id, to_patch(body, EmployeePatch)))


@bp.route('/<employee_id>', methods=['DELETE'])
def delete_employee(employee_id):
    service.delete(parse_id(employee_id, INVALID_ID))
    return no_content()
