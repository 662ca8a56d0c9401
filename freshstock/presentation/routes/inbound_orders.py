"""
Inbound order routes
Create-only; the per-employee report lives under /employees
"""

from flask import Blueprint

from freshstock.domain.inbound_order import InboundOrder
from freshstock.presentation.schemas import InboundOrderCreateRequest
from freshstock.presentation.web import bind_json, success, to_snapshot
from freshstock.services.inbound_order_service import InboundOrderService

bp = Blueprint('inbound_orders', __name__)
service = InboundOrderService()


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_inbound_order():
    body = bind_json(InboundOrderCreateRequest)
    return success(service.create(to_snapshot(body, InboundOrder)), 201)
