"""
Warehouse routes
CRUD over /warehouses. Every binding failure answers "invalid request body".
"""

from flask import Blueprint

from freshstock.domain.warehouse import Warehouse, WarehousePatch
from freshstock.presentation.schemas import WarehouseCreateRequest, WarehousePatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, success, to_patch, to_snapshot
from freshstock.services.warehouse_service import WarehouseService

bp = Blueprint('warehouses', __name__)
service = WarehouseService()

INVALID_ID = "bad request"
INVALID_BODY = "invalid request body"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_warehouses():
    return success(service.get_all())


@bp.route('/<warehouse_id>', methods=['GET'])
def get_warehouse(warehouse_id):
    return success(service.get(parse_id(warehouse_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_warehouse():
    body = bind_json(WarehouseCreateRequest, message=INVALID_BODY)
    return success(service.create(to_snapshot(body, Warehouse)), 201)


@bp.route('/<warehouse_id>', methods=['PATCH'])
def update_warehouse(warehouse_id):
    entity_id = parse_id(warehouse_id, INVALID_ID)
    body = bind_json(WarehousePatchRequest, message=INVALID_BODY)
    return success(service.update(entity_id, to_patch(body, WarehousePatch)))


@bp.route('/<warehouse_id>', methods=['DELETE'])
def delete_warehouse(warehouse_id):
    service.delete(parse_id(warehouse_id, INVALID_ID))
    return no_content()
