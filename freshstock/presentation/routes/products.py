"""
Product routes
CRUD with partial update over /products plus the records-per-product report
"""

from flask import Blueprint

from freshstock.domain.product import Product, ProductPatch
from freshstock.presentation.schemas import ProductCreateRequest, ProductPatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, query_id, success, to_patch, to_snapshot
from freshstock.services.product_service import ProductService

bp = Blueprint('products', __name__)
service = ProductService()

INVALID_ID = "invalid ID"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_products():
    return success(service.get_all())


@bp.route('/reportRecords', methods=['GET'])
def report_records():
    """Price records per product, optionally filtered by ?id="""
    return success(service.report_records(query_id(INVALID_ID)))


@bp.route('/<product_id>', methods=['GET'])
def get_product(product_id):
    return success(service.get(parse_id(product_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_product():
    """Create a product; a missing field is a 400, a mistyped one a 422"""
    body = bind_json(ProductCreateRequest, missing_status=400)
    return success(service.create(to_snapshot(body, Product)), 201)


@bp.route('/<product_id>', methods=['PATCH'])
def update_product(product_id):
    entity_id = parse_id(product_id, INVALID_ID)
    body = bind_json(ProductPatchRequest)
    return success(service.update(entity_id, to_patch(body, ProductPatch)))


@bp.route('/<product_id>', methods=['DELETE'])
def delete_product(product_id):
    service.delete(parse_id(product_id, INVALID_ID))
    return no_content()
