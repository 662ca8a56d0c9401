"""
Buyer routes
CRUD over /buyers
"""

from flask import Blueprint

from freshstock.domain.buyer import Buyer, BuyerPatch
from freshstock.presentation.schemas import BuyerCreateRequest, BuyerPatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, success, to_patch, to_snapshot
from freshstock.services.buyer_service import BuyerService

bp = Blueprint('buyers', __name__)
service = BuyerService()

INVALID_ID = "invalid Id"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_buyers():
    """List all buyers"""
    return success(service.get_all())


@bp.route('/<buyer_id>', methods=['GET'])
def get_buyer(buyer_id):
    return success(service.get(parse_id(buyer_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_buyer():
    body = bind_json(BuyerCreateRequest)
    return success(service.create(to_snapshot(body, Buyer)), 201)


@bp.route('/<buyer_id>', methods=['PATCH'])
def update_buyer(buyer_id):
    entity_id = parse_id(buyer_id, INVALID_ID)
    body = bind_json(BuyerPatchRequest)
    return success(service.update(entity_id, to_patch(body, BuyerPatch)))


@bp.route('/<buyer_id>', methods=['DELETE'])
def delete_buyer(buyer_id):
    service.delete(parse_id(buyer_id, INVALID_ID))
    return no_content()
