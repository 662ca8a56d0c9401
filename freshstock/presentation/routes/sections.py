"""
Section routes
CRUD over /sections plus the products-per-section report
"""

from flask import Blueprint

from freshstock.domain.section import Section, SectionPatch
from freshstock.presentation.schemas import SectionCreateRequest, SectionPatchRequest
from freshstock.presentation.web import bind_json, no_content, parse_id, query_id, success, to_patch, to_snapshot
from freshstock.services.section_service import SectionService

bp = Blueprint('sections', __name__)
service = SectionService()

INVALID_ID = "invalid id"


@bp.route('/', methods=['GET'], strict_slashes=False)
def list_sections():
    return success(service.get_all())


@bp.route('/reportProducts', methods=['GET'])
def report_products():
    """Units stocked per section, optionally filtered by ?id="""
    return success(service.report_products(query_id(INVALID_ID)))


@bp.route('/<section_id>', methods=['GET'])
def get_section(section_id):
    return success(service.get(parse_id(section_id, INVALID_ID)))


@bp.route('/', methods=['POST'], strict_slashes=False)
def create_section():
    body = bind_json(SectionCreateRequest)
    return success(service.create(to_snapshot(body, Section)), 201)


@bp.route('/<section_id>', methods=['PATCH'])
def update_section(section_id):
    """Partial update; a body that does not bind is a 400 here, unlike other entities"""
    entity_id = parse_id(section_id, INVALID_ID)
    body = bind_json(SectionPatchRequest, missing_status=400, invalid_status=400)
    return success(service.update(entity_id, to_patch(body, SectionPatch)))


@bp.route('/<section_id>', methods=['DELETE'])
def delete_section(section_id):
    service.delete(parse_id(section_id, INVALID_ID))
    return no_content()
