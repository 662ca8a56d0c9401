"""
Carry routes
Create-only
"""

from flask import Blueprint

from freshstock.domain.carry import Carry
from freshstock.presentation.schemas import CarryCreateRequest
from freshstock.presentation.web import bind_json, success, to_snapshot
from freshstock.services.carry_service import CarryService

bp = Blueprint('carries', __name__)
service = CarryService()


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_carry():
    body = bind_json(CarryCreateRequest, message="invalid request body")
    return success(service.create(to_snapshot(body, Carry)), 201)
