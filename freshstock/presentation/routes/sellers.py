"""
Seller routes
CRUD over /sellers
"""

from flask import Blueprint

from freshstock.domain.seller import Seller, SellerPatch
from freshstock.presentation.schemas import SellerCreateRequest, SellerPatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, success, to_patch, to_snapshot
from freshstock.services.seller_service import SellerService

bp = Blueprint('sellers', __name__)
service = SellerService()

INVALID_ID = "invalid Id"
MISSING_FIELDS = "Bad Request, missing required fields"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_sellers():
    """List all sellers"""
    return success(service.get_all())


@bp.route('/<seller_id>', methods=['GET'])
def get_seller(seller_id):
    return success(service.get(parse_id(seller_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_seller():
    """Create a seller; a missing field is a 400, a mistyped one a 422"""
    body = bind_json(SellerCreateRequest, missing_status=400, missing_message=MISSING_FIELDS)
    return success(service.create(to_snapshot(body, Seller)), 201)


@bp.route('/<seller_id>', methods=['PATCH'])
def update_seller(seller_id):
    entity_id = parse_id(seller_id, INVALID_ID)
    body = bind_json(SellerPatchRequest)
    return success(service.update(entity_id, to_patch(body, SellerPatch)))


@bp.route('/<seller_id>', methods=['DELETE'])
def delete_seller(seller_id):
    service.delete(parse_id(seller_id, INVALID_ID))
    return no_content()
