"""
Purchase order routes
Create under /purchase_orders; orders-per-buyer report under /reportPurchaseOrder
"""

from flask import Blueprint

from freshstock.domain.purchase_order import PurchaseOrder
from freshstock.presentation.schemas import PurchaseOrderCreateRequest
from freshstock.presentation.web import bind_json, query_id, success, to_snapshot
from freshstock.services.purchase_order_service import PurchaseOrderService

bp = Blueprint('purchase_orders', __name__)
service = PurchaseOrderService()

INVALID_ID = "invalid Id"


@bp.route('/purchase_orders/', methods=['POST'], strict_slashes=False)
def create_purchase_order():
    body = bind_json(PurchaseOrderCreateRequest, message="invalid request body")
    return success(service.create(to_snapshot(body, PurchaseOrder)), 201)


@bp.route('/reportPurchaseOrder/', methods=['GET'], strict_slashes=False)
def report_purchase_orders():
    """Purchase orders per buyer, optionally filtered by ?id="""
    return success(service.report_by_buyer(query_id(INVALID_ID)))
