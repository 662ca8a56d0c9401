"""
Product batch routes
Create-only
"""

from flask import Blueprint

from freshstock.domain.product_batch import ProductBatch
from freshstock.presentation.schemas import ProductBatchCreateRequest
from freshstock.presentation.web import bind_json, success, to_snapshot
from freshstock.services.product_batch_service import ProductBatchService

bp = Blueprint('product_batches', __name__)
service = ProductBatchService()


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_product_batch():
    body = bind_json(ProductBatchCreateRequest)
    return success(service.create(to_snapshot(body, ProductBatch)), 201)
