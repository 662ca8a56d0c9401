"""
Locality routes
Create, fetch, and the per-locality seller and carry reports
"""

from flask import Blueprint

from freshstock.domain.locality import Locality
from freshstock.presentation.schemas import LocalityCreateRequest
from freshstock.presentation.web import bind_json, query_text, success, to_snapshot
from freshstock.services.locality_service import LocalityService

bp = Blueprint('localities', __name__)
service = LocalityService()

MISSING_FIELDS = "Bad Request, missing required fields"


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_locality():
    body = bind_json(LocalityCreateRequest, missing_status=400, missing_message=MISSING_FIELDS)
    return success(service.create(to_snapshot(body, Locality)), 201)


@bp.route('/reportSellers', methods=['GET'])
def report_sellers():
    """Sellers per locality, optionally filtered by ?id="""
    return success(service.report_sellers(query_text()))


@bp.route('/reportCarries', methods=['GET'])
def report_carries():
    """Carries per locality, optionally filtered by ?id="""
    return success(service.report_carries(query_text()))


@bp.route('/<locality_id>', methods=['GET'])
def get_locality(locality_id):
    return success(service.get(locality_id))
