"""
Product record routes
Create-only
"""

from flask import Blueprint

from freshstock.domain.product_record import ProductRecord
from freshstock.presentation.schemas import ProductRecordCreateRequest
from freshstock.presentation.web import bind_json, success, to_snapshot
from freshstock.services.product_record_service import ProductRecordService

bp = Blueprint('product_records', __name__)
service = ProductRecordService()


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_product_record():
    body = bind_json(ProductRecordCreateRequest)
    return success(service.create(to_snapshot(body, ProductRecord)), 201)
